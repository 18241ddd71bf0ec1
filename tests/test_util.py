import pytest

from tm25rays.util import index_sort, narrow, null_terminated, tokenize, trim_white_space


def test_null_terminated_str():
    assert null_terminated("abc\0def") == "abc"


def test_null_terminated_bytes():
    assert null_terminated(b"LTRF\0\0\0") == b"LTRF"


def test_null_terminated_without_nul_keeps_everything():
    assert null_terminated("unknown") == "unknown"
    assert null_terminated("") == ""


def test_narrow_keeps_ascii():
    assert narrow("x y z kx") == "x y z kx"


def test_narrow_replaces_non_ascii():
    result = narrow("a\u00e9b\u4e2d", "#")
    assert result == "a#b#"
    assert len(result) == 4


def test_narrow_default_replacement():
    assert narrow("\u00b5m") == "?m"


def test_narrow_rejects_long_replacement():
    with pytest.raises(ValueError):
        narrow("abc", "??")


def test_trim_white_space():
    assert trim_white_space(" \t ab c\t  ") == "ab c"


def test_trim_white_space_only_blanks():
    assert trim_white_space(" \t\t ") == ""


def test_trim_white_space_keeps_newline():
    assert trim_white_space(" a\n ") == "a\n"


def test_tokenize_mixed_delimiters():
    assert tokenize("0 1\t,-2.3e-5;,3", " \t,;") == ["0", "1", "-2.3e-5", "3"]


def test_tokenize_empty_and_delims_only():
    assert tokenize("", " ") == []
    assert tokenize(" \t  ", " \t") == []


def test_tokenize_default_delims_roundtrip():
    words = ["alpha", "beta", "gamma"]
    assert tokenize("  " + "\t ".join(words) + " ") == words


def test_index_sort_orders_values():
    values = [3.0, -1.0, 2.5, 0.0, 2.5]
    idx = index_sort(values)
    assert sorted(idx) == list(range(len(values)))
    ordered = [values[i] for i in idx]
    assert ordered == sorted(values)


def test_index_sort_with_key_descending():
    values = [1.0, 5.0, 3.0]
    idx = index_sort(values, key=lambda v: -v)
    assert [values[i] for i in idx] == sorted(values, reverse=True)


def test_index_sort_does_not_modify_input():
    values = [2.0, 1.0]
    index_sort(values)
    assert values == [2.0, 1.0]


def test_index_sort_empty():
    assert index_sort([]) == []