"""Small string and sequence helpers shared by the ray file readers."""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence, TypeVar

AnyStr_ = TypeVar("AnyStr_", str, bytes)

WHITESPACE = " \t"


def null_terminated(source: AnyStr_) -> AnyStr_:
    """Return ``source`` up to, but not including, its first NUL character."""
    if isinstance(source, bytes):
        return source.split(b"\0", 1)[0]
    return source.split("\0", 1)[0]


def narrow(s: str, notranslation: str = "?") -> str:
    """Map every character outside ASCII to ``notranslation``."""
    if len(notranslation) != 1:
        raise ValueError("notranslation must be a single character")
    return "".join(c if ord(c) < 128 else notranslation for c in s)


def trim_white_space(s: str) -> str:
    """Strip blanks and tabs from both ends of ``s``."""
    return s.strip(WHITESPACE)


def tokenize(s: str, delims: str = WHITESPACE) -> list[str]:
    """Split ``s`` at any run of characters from ``delims``, dropping empty tokens."""
    tokens: list[str] = []
    current: list[str] = []
    for c in s:
        if c in delims:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(c)
    if current:
        tokens.append("".join(current))
    return tokens


def index_sort(
    values: Sequence[Any], key: Optional[Callable[[Any], Any]] = None
) -> list[int]:
    """Return the permutation of indices that sorts ``values`` without changing it.

    With ``key`` given, values are compared by ``key(value)``.
    """
    if key is None:
        return sorted(range(len(values)), key=values.__getitem__)
    return sorted(range(len(values)), key=lambda i: key(values[i]))