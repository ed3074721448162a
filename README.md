# magmacore

A small library of building blocks that needs nothing beyond the standard library.

- **Checksums** (`magmacore.crc24`, `magmacore.crc32`): CRC-24 as used by OpenPGP armor (RFC 4880), and CRC-32 with the reflected IEEE polynomial.
- **Fast hashes** (`magmacore.hashes`): Adler-32, Fletcher-32, 32-bit Murmur and 64-bit Murmur (64A).
- **Character classes** (`magmacore.classify`): ASCII tests for printable, alphanumeric, punctuation, whitespace and similar classes.
- **Comparison** (`magmacore.compare`): case-sensitive and case-insensitive ordering, prefix and suffix comparison, and substring search on byte strings.
- **Containers**: a thread-safe object pool with timeouts (`magmacore.pool`) and a thread-safe FIFO list (`magmacore.stacker`).

## Installation

```
pip install magmacore
```

To run the tests:

```
pip install "magmacore[test]"
pytest
```

## Checksums

The checksum functions take bytes-like data and reject `str`. You can also compute each checksum in steps.

```python
from magmacore.crc24 import crc24_checksum, crc24_init, crc24_update, crc24_final
from magmacore.crc32 import crc32_checksum, crc32_update

crc24_checksum(b"hello")

state = crc24_init()
state = crc24_update(b"hel", state)
state = crc24_update(b"lo", state)
crc24_final(state)          # same as crc24_checksum(b"hello")

crc = crc32_update(b"hel", 0)
crc32_update(b"lo", crc)    # same as crc32_checksum(b"hello")
```

`crc32_checksum` gives the same values as `zlib.crc32`.

## Hashes

```python
from magmacore.hashes import adler32, fletcher32, murmur32, murmur64

adler32(b"Wikipedia")
fletcher32(b"abcdef")
murmur32(b"key")
murmur64(b"key")
```

Two of these hashes differ from the textbook definitions:

- `adler32` adds each byte as a signed value. For 7-bit input it matches `zlib.adler32`. Input that contains bytes of 128 or higher gives a different result.
- `fletcher32` reads `len(data) // 2` little-endian 16-bit words that start at successive byte offsets. Each word overlaps the next by one byte, so only the first `len(data) // 2 + 1` bytes affect the result.

`murmur32` uses the input length as its seed.

## Character classes

Each test takes one character. A character can be an int from 0 to 255, a one-character `str`, or a one-byte `bytes`. Any other value raises `TypeError` or `ValueError`.

```python
from magmacore.classify import is_printable, is_punctuation, is_whitespace, is_class

is_printable("~")                # True
is_punctuation(ord("@"))         # True
is_whitespace("\v")              # True
is_class("x", b"xyz")            # True
```

The other tests are `is_ascii`, `is_alphanumeric`, `is_lower`, `is_upper`, `is_numeric` and `is_blank`.

## Comparison and search

The comparison functions return -1, 0 or 1. They accept bytes-like values or `str`, and encode `str` as UTF-8. `None` and empty values count as empty, and an empty value sorts before any non-empty value. Case-insensitive comparison folds ASCII letters only.

```python
from magmacore.compare import cmp_eq, cmp_starts, cmp_ends, search, search_chr, mem_cmp_eq

cmp_eq(b"Hello", b"hello", case_sensitive=False)     # 0
cmp_starts(b"hello world", b"hello", True)           # 0
cmp_ends(b"archive.tar.gz", b".GZ", False)           # 0
search(b"haystack", b"st", True)                     # 3
search_chr(b"haystack", "y")                         # 2
mem_cmp_eq(b"abcx", b"abcy", 3, True)                # 0
```

- `search` and `search_chr` return `None` when there is no match. `search` never finds an empty needle.
- `cmp_ends` compares the two strings backwards from their last bytes.

## Containers

### Pool

```python
from magmacore.pool import Pool, PoolError, PoolStatus

pool = Pool(4, timeout=5)
pool.set(0, "connection")
item = pool.pull()                          # reserves the first available slot
pool.status(item)                           # PoolStatus.RESERVED
pool.release(item)
pool.swap(0, "new connection")              # waits for slot 0 to be free; returns "connection"
```

- `pull` waits up to `timeout` seconds for a free slot. A timeout of 0 means it waits forever.
- If `pull` gives up, it raises `PoolError` and counts a failure in `failures()`.
- A pool holds at most 4096 slots, and its timeout is at most 86400 seconds.
- A slot index outside the pool raises `IndexError`.

### Stacker

```python
from magmacore.stacker import Stacker

with Stacker(print) as queue:
    queue.push("first")
    queue.push("second")
    queue.pop()                             # "first"
# on leaving the block, close() passes "second" to print
```

- `pop` returns `None` when the list is empty.
- Pushing `None` raises `ValueError`.

## Limits

- The checksums cover CRC-24 and CRC-32 only. The package has no 64-bit CRC.
- The only containers are the object pool and the FIFO list. The package has no general typed array container.