"""Classification of single ASCII characters."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "is_ascii",
    "is_printable",
    "is_alphanumeric",
    "is_lower",
    "is_upper",
    "is_numeric",
    "is_punctuation",
    "is_blank",
    "is_whitespace",
    "is_class",
]

Char = int | str | bytes | bytearray

_BLANK = frozenset(b" \t")
_WHITESPACE = frozenset(b" \t\v\f\r\n")


def _ordinal(c: Char) -> int:
    """Return the code of a character given as an int, a 1-char str or a 1-byte bytes."""
    if isinstance(c, bool):
        raise TypeError("a character must be an int, str or bytes, not bool")
    if isinstance(c, int):
        if not 0 <= c <= 255:
            raise ValueError(f"character code {c} is outside the range 0-255")
        return c
    if isinstance(c, (str, bytes, bytearray)):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return ord(c)
    raise TypeError(f"a character must be an int, str or bytes, not {type(c).__name__}")


def is_ascii(c: Char) -> bool:
    """True if ``c`` is a 7-bit ASCII character."""
    return _ordinal(c) < 128


def is_printable(c: Char) -> bool:
    """True if ``c`` is a printable ASCII character, space through tilde."""
    return ord(" ") <= _ordinal(c) <= ord("~")


def is_alphanumeric(c: Char) -> bool:
    """True if ``c`` is an ASCII letter or digit."""
    code = _ordinal(c)
    return (
        ord("A") <= code <= ord("Z")
        or ord("a") <= code <= ord("z")
        or ord("0") <= code <= ord("9")
    )


def is_lower(c: Char) -> bool:
    """True if ``c`` is an ASCII lowercase letter."""
    return ord("a") <= _ordinal(c) <= ord("z")


def is_upper(c: Char) -> bool:
    """True if ``c`` is an ASCII uppercase letter."""
    return ord("A") <= _ordinal(c) <= ord("Z")


def is_numeric(c: Char) -> bool:
    """True if ``c`` is an ASCII digit."""
    return ord("0") <= _ordinal(c) <= ord("9")


def is_punctuation(c: Char) -> bool:
    """True if ``c`` is an ASCII punctuation character."""
    code = _ordinal(c)
    return (
        ord("!") <= code <= ord("/")
        or ord(":") <= code <= ord("@")
        or ord("[") <= code <= ord("`")
        or ord("{") <= code <= ord("~")
    )


def is_blank(c: Char) -> bool:
    """True if ``c`` is a space or a horizontal tab."""
    return _ordinal(c) in _BLANK


def is_whitespace(c: Char) -> bool:
    """True if ``c`` is a blank or one of CR, LF, FF and VT."""
    return _ordinal(c) in _WHITESPACE


def is_class(c: Char, chars: Iterable[Char]) -> bool:
    """True if ``c`` is one of the characters in ``chars``."""
    code = _ordinal(c)
    return any(_ordinal(member) == code for member in chars)