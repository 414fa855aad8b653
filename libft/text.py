"""String searching, comparison and construction helpers."""

from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest
from typing import Any, Optional, Union

CharLike = Union[int, str]

_NUL = "\0"


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _require_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(_require_str(s, "s"))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the end of the string.
    """
    ch = _char(c)
    index = _require_str(s, "s").find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _NUL else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(_require_str(s, "s"))
    index = _require_str(s, "s").rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference at the first mismatch, 0 if the compared
    parts are equal. The end of a string compares as NUL, and comparison
    stops at a NUL common to both.
    """
    _require_str(s1, "s1")
    _require_str(s2, "s2")
    if n < 0:
        raise ValueError(f"negative length {n}")
    for a, b in islice(zip_longest(s1, s2, fillvalue=_NUL), n):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Index of ``little`` within the first ``n`` characters of ``big``, or None.

    An empty ``little`` is found at index 0.
    """
    _require_str(big, "big")
    _require_str(little, "little")
    if n < 0:
        raise ValueError(f"negative length {n}")
    if not little:
        return 0
    index = big[:n].find(little)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return str(_require_str(s, "s"))


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _require_str(s, "s")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate ``s1`` and ``s2``."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return _require_str(s, "s").strip(_require_str(charset, "charset"))


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty words."""
    delimiter = _char(sep)
    return [word for word in _require_str(s, "s").split(delimiter) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to each character."""
    if not callable(f):
        raise TypeError("f must be callable")
    return "".join(f(i, ch) for i, ch in enumerate(_require_str(s, "s")))


def striteri(s: MutableSequence, f: Callable[[int, Any], Any]) -> None:
    """Call ``f(index, item)`` on each item of ``s`` in place.

    When ``f`` returns something other than None, it replaces the item.
    """
    if not isinstance(s, MutableSequence):
        raise TypeError(f"s must be a mutable sequence, got {type(s).__name__}")
    if not callable(f):
        raise TypeError("f must be callable")
    for i, item in enumerate(s):
        replacement = f(i, item)
        if replacement is not None:
            s[i] = replacement