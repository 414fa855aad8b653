"""Classification and case conversion of ASCII character codes.

Every function takes either an integer code or a one-character string.
"""

from typing import Union

CharLike = Union[int, str]

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGITS = range(ord("0"), ord("9") + 1)
_ASCII = range(0, 128)
_PRINTABLE = range(32, 127)
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def is_alpha(c: CharLike) -> bool:
    """True if ``c`` is an ASCII letter."""
    code = _code(c)
    return code in _UPPER or code in _LOWER


def is_digit(c: CharLike) -> bool:
    """True if ``c`` is an ASCII decimal digit."""
    return _code(c) in _DIGITS


def is_alnum(c: CharLike) -> bool:
    """True if ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True if ``c`` is in the range 0..127."""
    return _code(c) in _ASCII


def is_print(c: CharLike) -> bool:
    """True if ``c`` is a printable ASCII character, space included."""
    return _code(c) in _PRINTABLE


def _convert(c: CharLike, source: range, shift: int) -> CharLike:
    code = _code(c)
    if code in source:
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    return _convert(c, _LOWER, -_CASE_OFFSET)


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    return _convert(c, _UPPER, _CASE_OFFSET)