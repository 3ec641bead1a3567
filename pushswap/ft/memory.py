"""Byte-buffer helpers working on ``bytearray`` and other byte sequences."""

from __future__ import annotations

from typing import Optional

ByteSource = "bytes | bytearray | memoryview"


def _require(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer of length {len(buf)}")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` (taken modulo 256)."""
    _require(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` within the first ``n`` bytes, or None."""
    _require(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare ``n`` bytes; the difference of the first unequal pair, or 0."""
    _require(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _require(n, dest, src)
    if dest is not src:
        dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    Overlapping regions are handled correctly.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _require(n)
    if dst + n > len(buf) or src + n > len(buf):
        raise ValueError("region lies outside the buffer")
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf