"""Ordering comparisons and searches over byte strings.

Every comparison returns -1, 0 or 1. ``None`` and zero-length values count
as empty; an empty value orders before any non-empty one. Case-insensitive
variants fold only ASCII letters.
"""

from __future__ import annotations

__all__ = [
    "mem_cmp_eq",
    "cmp_eq",
    "cmp_starts",
    "cmp_ends",
    "search",
    "search_chr",
]

Text = bytes | bytearray | memoryview | str | None


def _as_bytes(value: Text) -> bytes:
    """Return ``value`` as bytes; ``None`` becomes empty and text is UTF-8 encoded."""
    if value is None:
        return b""
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return memoryview(value).cast("B").tobytes()
    raise TypeError(f"expected bytes or str, not {type(value).__name__}")


def _fold(data: bytes, case_sensitive: bool) -> bytes:
    return data if case_sensitive else data.lower()


def _order(a: bytes, b: bytes) -> int:
    return (a > b) - (a < b)


def _empty_order(a: bytes, b: bytes) -> int | None:
    """Order two values when at least one is empty, else None."""
    if not a and not b:
        return 0
    if not a:
        return -1
    if not b:
        return 1
    return None


def mem_cmp_eq(a: Text, b: Text, length: int, case_sensitive: bool = True) -> int:
    """Compare the first ``length`` bytes of two buffers."""
    if length < 0:
        raise ValueError("length must not be negative")
    left = _as_bytes(a)
    right = _as_bytes(b)
    left_empty = a is None or length == 0
    right_empty = b is None or length == 0
    if left_empty and right_empty:
        return 0
    if left_empty:
        return -1
    if right_empty:
        return 1
    if len(left) < length or len(right) < length:
        raise ValueError(f"both buffers must hold at least {length} bytes")
    return _order(
        _fold(left[:length], case_sensitive), _fold(right[:length], case_sensitive)
    )


def cmp_eq(a: Text, b: Text, case_sensitive: bool = True) -> int:
    """Compare two strings; on a common prefix the longer one is greater."""
    left = _fold(_as_bytes(a), case_sensitive)
    right = _fold(_as_bytes(b), case_sensitive)
    empty = _empty_order(left, right)
    if empty is not None:
        return empty
    return _order(left, right)


def cmp_starts(s: Text, starts: Text, case_sensitive: bool = True) -> int:
    """Return 0 if ``s`` begins with ``starts``, otherwise their ordering."""
    text = _fold(_as_bytes(s), case_sensitive)
    prefix = _fold(_as_bytes(starts), case_sensitive)
    empty = _empty_order(text, prefix)
    if empty is not None:
        return empty
    check = min(len(text), len(prefix))
    result = _order(text[:check], prefix[:check])
    if result == 0 and len(text) < len(prefix):
        return -1
    return result


def cmp_ends(s: Text, ends: Text, case_sensitive: bool = True) -> int:
    """Return 0 if ``s`` ends with ``ends``; otherwise order them comparing backwards."""
    text = _fold(_as_bytes(s), case_sensitive)[::-1]
    suffix = _fold(_as_bytes(ends), case_sensitive)[::-1]
    empty = _empty_order(text, suffix)
    if empty is not None:
        return empty
    check = min(len(text), len(suffix))
    result = _order(text[:check], suffix[:check])
    if result == 0 and len(text) < len(suffix):
        return -1
    return result


def search(haystack: Text, needle: Text, case_sensitive: bool = True) -> int | None:
    """Return the index of the first occurrence of ``needle``, or None.

    An empty haystack or needle is never found.
    """
    hay = _fold(_as_bytes(haystack), case_sensitive)
    pin = _fold(_as_bytes(needle), case_sensitive)
    if not hay or not pin or len(pin) > len(hay):
        return None
    index = hay.find(pin)
    return None if index < 0 else index


def search_chr(haystack: Text, needle: int | str | bytes) -> int | None:
    """Return the index of the first occurrence of the byte ``needle``, or None."""
    if isinstance(needle, bool):
        raise TypeError("needle must be an int, str or bytes, not bool")
    if isinstance(needle, int):
        if not 0 <= needle <= 255:
            raise ValueError(f"byte value {needle} is outside the range 0-255")
        code = needle
    elif isinstance(needle, (str, bytes, bytearray)):
        encoded = _as_bytes(needle)
        if len(encoded) != 1:
            raise ValueError("needle must be a single byte")
        code = encoded[0]
    else:
        raise TypeError(f"needle must be an int, str or bytes, not {type(needle).__name__}")
    hay = _as_bytes(haystack)
    index = hay.find(bytes([code]))
    return None if index < 0 else index