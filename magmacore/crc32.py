"""CRC-32 checksums using the reflected IEEE 802.3 polynomial."""

from __future__ import annotations

__all__ = ["crc32_update", "crc32_checksum"]

CRC32_POLY = 0xEDB88320

_WORD_MASK = 0xFFFFFFFF


def _build_table() -> tuple[int, ...]:
    table = []
    for value in range(256):
        crc = value
        for _ in range(8):
            crc = (crc >> 1) ^ CRC32_POLY if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_TABLE = _build_table()


def _as_bytes(data: bytes | bytearray | memoryview) -> bytes:
    """Return the raw bytes of a bytes-like object, rejecting text."""
    if isinstance(data, str):
        raise TypeError("CRC-32 operates on bytes, not str")
    return memoryview(data).cast("B").tobytes()


def crc32_update(data: bytes | bytearray | memoryview, crc: int) -> int:
    """Continue a CRC-32 computation over ``data``.

    ``crc`` is the value returned by a previous call, or 0 for the first pass.
    """
    buffer = _as_bytes(data)
    register = (crc & _WORD_MASK) ^ _WORD_MASK
    table = _TABLE
    for byte in buffer:
        register = table[(register ^ byte) & 0xFF] ^ (register >> 8)
    return register ^ _WORD_MASK


def crc32_checksum(data: bytes | bytearray | memoryview) -> int:
    """Compute the 32-bit CRC of ``data`` in one call."""
    return crc32_update(data, 0)