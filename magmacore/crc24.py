"""CRC-24 checksums as used by the OpenPGP radix-64 armor (RFC 4880)."""

from __future__ import annotations

__all__ = ["crc24_init", "crc24_update", "crc24_final", "crc24_checksum"]

CRC24_INIT = 0xB704CE
CRC24_POLY = 0x1864CFB

_WORD_MASK = 0xFFFFFFFF
_RESULT_MASK = 0xFFFFFF
_TOP_BIT = 0x1000000


def _as_bytes(data: bytes | bytearray | memoryview) -> bytes:
    """Return the raw bytes of a bytes-like object, rejecting text."""
    if isinstance(data, str):
        raise TypeError("CRC-24 operates on bytes, not str")
    return memoryview(data).cast("B").tobytes()


def crc24_init() -> int:
    """Return the initial register value for a CRC-24 computation."""
    return CRC24_INIT


def crc24_update(data: bytes | bytearray | memoryview, crc: int) -> int:
    """Feed ``data`` into a running CRC-24 register and return the new register.

    The register is not masked to 24 bits; pass the result to
    :func:`crc24_final` once all data has been processed.
    """
    buffer = _as_bytes(data)
    crc &= _WORD_MASK
    if not buffer:
        return crc

    for byte in buffer:
        crc ^= byte << 16
        for _ in range(8):
            crc = (crc << 1) & _WORD_MASK
            if crc & _TOP_BIT:
                crc ^= CRC24_POLY
    return crc


def crc24_final(crc: int) -> int:
    """Reduce a CRC-24 register to its final 24-bit value."""
    return crc & _RESULT_MASK


def crc24_checksum(data: bytes | bytearray | memoryview) -> int:
    """Compute the 24-bit CRC of ``data`` in one call."""
    return crc24_final(crc24_update(data, crc24_init()))