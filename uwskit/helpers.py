"""Small helpers: a bitwise CRC-32, file extension checks, and chunk splitting."""

from __future__ import annotations

from collections.abc import Iterator

_CRC32_POLYNOMIAL = 0xEDB88320


def crc32(data: bytes, crc: int = 0xFFFFFFFF) -> int:
    """Update a running CRC-32 register with ``data``.

    The register is neither pre- nor post-inverted beyond the default
    starting value; invert the result to obtain the usual checksum.
    """
    crc &= 0xFFFFFFFF
    for byte in data:
        for _ in range(8):
            low = (byte ^ crc) & 1
            crc >>= 1
            if low:
                crc ^= _CRC32_POLYNOMIAL
            byte >>= 1
    return crc


def has_ext(file: str, ext: str) -> bool:
    """Whether ``file`` ends with ``ext``."""
    return file.endswith(ext)


def make_chunked(data: bytes) -> Iterator[bytes]:
    """Split ``data`` into chunks described by leading size bytes.

    Each chunk is preceded by one byte giving its size; zero means the
    rest of the data. Sizes past the end are cut short.
    """
    pos = 0
    end = len(data)
    while pos < end:
        size = data[pos]
        pos += 1
        size = end - pos if not size else min(size, end - pos)
        yield data[pos:pos + size]
        pos += size