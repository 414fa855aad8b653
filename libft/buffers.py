"""Size-bounded copying and appending of NUL-terminated byte strings."""

from typing import Union

Buffer = Union[bytearray, memoryview]
Readable = Union[bytes, bytearray, memoryview]


def _cstrlen(data: Readable) -> int:
    """Length up to the first NUL byte, or the whole length if there is none."""
    if isinstance(data, str):
        raise TypeError("expected a bytes-like object, got str")
    raw = bytes(data)
    index = raw.find(0)
    return len(raw) if index < 0 else index


def _check_size(dst: Buffer, size: int) -> None:
    if size < 0:
        raise ValueError(f"negative size {size}")
    if size > len(dst):
        raise ValueError(f"destination holds {len(dst)} bytes, size is {size}")


def strlcpy(dst: Buffer, src: Readable, size: int) -> int:
    """Copy ``src`` into ``dst``, writing at most ``size`` bytes including NUL.

    Returns the length of ``src``; a result of ``size`` or more means truncation.
    """
    _check_size(dst, size)
    srclen = _cstrlen(src)
    if size > 0:
        count = min(srclen, size - 1)
        dst[:count] = bytes(src[:count])
        dst[count] = 0
    return srclen


def strlcat(dst: Buffer, src: Readable, size: int) -> int:
    """Append ``src`` to the string in ``dst`` within a total of ``size`` bytes.

    Returns the length of the string it tried to create; when ``size`` does
    not exceed the current length, returns ``size`` plus the length of ``src``.
    """
    _check_size(dst, size)
    dstlen = _cstrlen(dst)
    srclen = _cstrlen(src)
    if size <= dstlen:
        return size + srclen
    count = min(srclen, size - 1 - dstlen)
    dst[dstlen:dstlen + count] = bytes(src[:count])
    dst[dstlen + count] = 0
    return dstlen + srclen