"""CRC-24 and CRC-32 checksums, fast hashes, ASCII character classes, byte-string comparison, an object pool and a FIFO list."""

__version__ = "0.2.0"

__all__ = [
    "classify",
    "compare",
    "crc24",
    "crc32",
    "hashes",
    "pool",
    "stacker",
]