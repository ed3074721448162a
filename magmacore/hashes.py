"""Non-cryptographic hashes: Adler-32, Fletcher-32 and the Murmur family."""

from __future__ import annotations

import struct

__all__ = ["adler32", "fletcher32", "murmur32", "murmur64"]

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

_ADLER_MOD = 65521
_ADLER_CHUNK = 5550
_FLETCHER_CHUNK = 360

_MURMUR32_M = 0x5BD1E995
_MURMUR32_R = 24
_MURMUR64_M = 0xC6A4A7935BD1E995
_MURMUR64_R = 47


def _as_bytes(data: bytes | bytearray | memoryview) -> bytes:
    """Return the raw bytes of a bytes-like object, rejecting text."""
    if isinstance(data, str):
        raise TypeError("hashes operate on bytes, not str")
    return memoryview(data).cast("B").tobytes()


def _signed_byte(byte: int) -> int:
    return byte - 256 if byte >= 128 else byte


def _sar32(value: int, shift: int) -> int:
    """Arithmetic right shift of a 32-bit value treated as signed."""
    signed = value - (1 << 32) if value & 0x80000000 else value
    return (signed >> shift) & _MASK32


def adler32(data: bytes | bytearray | memoryview) -> int:
    """Return the Adler-32 hash of ``data``.

    Bytes are added as signed characters, so input with bytes of 128 and
    above differs from the zlib variant; 7-bit input gives the same result.
    """
    buffer = _as_bytes(data)
    a, b = 1, 0
    for start in range(0, len(buffer), _ADLER_CHUNK):
        for byte in buffer[start:start + _ADLER_CHUNK]:
            a = (a + _signed_byte(byte)) & _MASK64
            b = (b + a) & _MASK64
        a = ((a & 0xFFFF) + (a >> 16) * (65536 - _ADLER_MOD)) & _MASK64
        b = ((b & 0xFFFF) + (b >> 16) * (65536 - _ADLER_MOD)) & _MASK64

    if a >= _ADLER_MOD:
        a -= _ADLER_MOD
    b = ((b & 0xFFFF) + (b >> 16) * (65536 - _ADLER_MOD)) & _MASK64
    if b >= _ADLER_MOD:
        b -= _ADLER_MOD
    return ((b << 16) | a) & _MASK32


def fletcher32(data: bytes | bytearray | memoryview) -> int:
    """Return the Fletcher-32 hash of ``data``.

    The hash consumes ``len(data) // 2`` little-endian 16-bit words that
    start at successive byte offsets, so consecutive words overlap by one
    byte and only the first ``len(data) // 2 + 1`` bytes take part.
    """
    buffer = _as_bytes(data)
    blocks = len(buffer) // 2
    a = b = 0xFFFF
    for start in range(0, blocks, _FLETCHER_CHUNK):
        for offset in range(start, min(start + _FLETCHER_CHUNK, blocks)):
            word = buffer[offset] | (buffer[offset + 1] << 8)
            a = (a + word) & _MASK32
            b = (b + a) & _MASK32
        a = (a & 0xFFFF) + (a >> 16)
        b = (b & 0xFFFF) + (b >> 16)
    a = (a & 0xFFFF) + (a >> 16)
    b = (b & 0xFFFF) + (b >> 16)
    return ((b << 16) | a) & _MASK32


def murmur32(data: bytes | bytearray | memoryview) -> int:
    """Return the 32-bit Murmur hash of ``data``, seeded with its length."""
    buffer = _as_bytes(data)
    m = _MURMUR32_M
    h = len(buffer) & _MASK32
    whole = len(buffer) // 4 * 4

    for (k,) in struct.iter_unpack("<I", buffer[:whole]):
        k = (k * m) & _MASK32
        k ^= k >> _MURMUR32_R
        k = (k * m) & _MASK32
        h = (h * m) & _MASK32
        h ^= k

    tail = buffer[whole:]
    if tail:
        for position, byte in enumerate(tail):
            h ^= byte << (8 * position)
        h = (h * m) & _MASK32

    h ^= _sar32(h, 13)
    h = (h * m) & _MASK32
    h ^= _sar32(h, 15)
    return h


def murmur64(data: bytes | bytearray | memoryview) -> int:
    """Return the 64-bit Murmur hash (variant 64A) of ``data``."""
    buffer = _as_bytes(data)
    m = _MURMUR64_M
    r = _MURMUR64_R
    h = (len(buffer) * m) & _MASK64
    whole = len(buffer) // 8 * 8

    for (k,) in struct.iter_unpack("<Q", buffer[:whole]):
        k = (k * m) & _MASK64
        k ^= k >> r
        k = (k * m) & _MASK64
        h ^= k
        h = (h * m) & _MASK64

    tail = buffer[whole:]
    if tail:
        for position, byte in enumerate(tail):
            h ^= byte << (8 * position)
        h = (h * m) & _MASK64

    h ^= h >> r
    h = (h * m) & _MASK64
    h ^= h >> r
    return h