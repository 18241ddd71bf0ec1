import math

import pytest

from tm25rays.parse_string import (
    char_range_to_double,
    split_string,
    string_to_array,
    string_to_vector,
)


@pytest.mark.parametrize("s", ["  ab\tc  ", "x", "", " \t ", "a  b\t\tc d"])
def test_split_string_positions_cover_items(s):
    pos = split_string(s)
    assert [s[a:b] for a, b in pos] == s.split()


def test_split_string_pinned():
    assert split_string("  ab\tc  ") == [(2, 4), (5, 6)]


def test_split_string_custom_delims():
    s = "1,2;;3"
    assert [s[a:b] for a, b in split_string(s, ",;")] == ["1", "2", "3"]


def test_string_to_vector_values():
    assert string_to_vector("1 2.5\t-4") == [1.0, 2.5, -4.0]


def test_string_to_vector_empty():
    assert string_to_vector("  \t ") == []


def test_string_to_vector_bad_item():
    with pytest.raises(ValueError):
        string_to_vector("1 abc")


def test_string_to_array_count():
    assert string_to_array("3 4 5", 3) == [3.0, 4.0, 5.0]
    with pytest.raises(ValueError, match="expected 2 substrings"):
        string_to_array("3 4 5", 2)


def test_char_range_to_double_prefix():
    assert char_range_to_double("1.5abc") == 1.5
    assert char_range_to_double("  7") == 7.0
    assert char_range_to_double("2e") == 2.0


def test_char_range_to_double_special():
    assert math.isnan(char_range_to_double("nan"))
    assert char_range_to_double("-inf") == -math.inf
    assert char_range_to_double("0x10") == 16.0


def test_char_range_to_double_errors():
    with pytest.raises(ValueError):
        char_range_to_double("abc")
    with pytest.raises(ValueError):
        char_range_to_double("")
    with pytest.raises(OverflowError):
        char_range_to_double("1e999")