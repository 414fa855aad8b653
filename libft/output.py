"""Writing characters, strings and numbers to file descriptors."""

import os
from typing import Optional, Union

CharLike = Union[int, str]

_ENCODING = "utf-8"


def _write_all(fd: int, data: bytes) -> None:
    """Write all of ``data`` to ``fd``, retrying after short writes."""
    if not isinstance(fd, int) or isinstance(fd, bool):
        raise TypeError(f"fd must be an int, got {type(fd).__name__}")
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _char_bytes(c: CharLike) -> bytes:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c.encode(_ENCODING)
    if isinstance(c, int) and not isinstance(c, bool):
        if not 0 <= c <= 0xFF:
            raise ValueError(f"byte value out of range: {c}")
        return bytes([c])
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _text_bytes(s: str) -> bytes:
    if not isinstance(s, str):
        raise TypeError(f"s must be a str, got {type(s).__name__}")
    return s.encode(_ENCODING)


def putchar_fd(c: CharLike, fd: int) -> None:
    """Write one character (or one byte value) to ``fd``."""
    _write_all(fd, _char_bytes(c))


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` to ``fd``; ``None`` writes nothing."""
    if s is None:
        return
    _write_all(fd, _text_bytes(s))


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``; ``None`` writes nothing."""
    if s is None:
        return
    _write_all(fd, _text_bytes(s) + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal representation of ``n`` to ``fd``."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _write_all(fd, str(n).encode("ascii"))