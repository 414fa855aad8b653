"""Operations on mutable byte buffers."""

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
Readable = Union[bytes, bytearray, memoryview]


def _check_span(buf, n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")
    if n > len(buf):
        raise ValueError(f"{name} holds {len(buf)} bytes, {n} requested")


def memset(buf: Buffer, c: int, n: int) -> Buffer:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` truncated to a byte."""
    _check_span(buf, n, "buffer")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def memmove(dest: Buffer, src: Readable, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` into ``dest``; overlapping views are safe."""
    _check_span(dest, n, "destination")
    _check_span(src, n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memcpy(dest: Buffer, src: Readable, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` into ``dest``."""
    return memmove(dest, src, n)


def memchr(data: Readable, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_span(data, n, "data")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Readable, b: Readable, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch."""
    _check_span(a, n, "first buffer")
    _check_span(b, n, "second buffer")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)