"""Splitting delimited text into items and converting them to numbers."""

from __future__ import annotations

import math
import re

DEFAULT_DELIMS = " \t"

_NUMBER = re.compile(
    r"[ \t\n\v\f\r]*"
    r"(?P<num>[+-]?(?:"
    r"(?P<hex>0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?)"
    r"|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
    r"|(?P<special>[iI][nN][fF](?:[iI][nN][iI][tT][yY])?"
    r"|[nN][aA][nN](?:\([0-9A-Za-z_]*\))?)"
    r"))"
)


def split_string(s: str, delims: str = DEFAULT_DELIMS) -> list[tuple[int, int]]:
    """Return ``(start, end)`` positions of the items of ``s``.

    An item is a maximal run of characters not in ``delims``; ``end`` is one
    past the last character, so ``s[start:end]`` is the item.
    """
    if not delims:
        return [(0, len(s))] if s else []
    pattern = "[^" + "".join(re.escape(c) for c in delims) + "]+"
    return [m.span() for m in re.finditer(pattern, s)]


def char_range_to_double(text: str) -> float:
    """Convert the longest leading number in ``text`` to a float.

    Leading white space is skipped and anything after the number is ignored.
    Raises ``ValueError`` when no number starts the text and
    ``OverflowError`` when the number is out of range.
    """
    m = _NUMBER.match(text)
    if m is None:
        raise ValueError(f"char_range_to_double: no conversion for {text!r}")
    num = m.group("num")
    if m.group("hex") is not None:
        sign = -1.0 if num.startswith("-") else 1.0
        value = sign * float.fromhex(m.group("hex"))
    elif m.group("special") is not None:
        special = m.group("special").lower()
        sign = -1.0 if num.startswith("-") else 1.0
        value = sign * (math.nan if special.startswith("nan") else math.inf)
    else:
        value = float(num)
    if math.isinf(value) and m.group("special") is None:
        raise OverflowError(f"char_range_to_double: {num} is out of range")
    return value


def string_to_vector(s: str, delims: str = DEFAULT_DELIMS) -> list[float]:
    """Convert a delimited sequence of numbers to a list, possibly empty."""
    return [char_range_to_double(s[a:b]) for a, b in split_string(s, delims)]


def string_to_array(s: str, n: int, delims: str = DEFAULT_DELIMS) -> list[float]:
    """Convert a delimited sequence of exactly ``n`` numbers to a list."""
    positions = split_string(s, delims)
    if len(positions) != n:
        raise ValueError(f"StringToArray: expected {n} substrings")
    return [char_range_to_double(s[a:b]) for a, b in positions]