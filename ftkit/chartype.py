"""ASCII character classification and case conversion.

Each function accepts either an integer character code or a string of
exactly one character. The classifiers return a bool. The case converters
return the same kind of value they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

__all__ = [
    "isalpha",
    "isdigit",
    "isalnum",
    "isascii",
    "isprint",
    "isspace",
    "tolower",
    "toupper",
]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code for a character given as int or 1-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def isalpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for a code in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def isspace(c: CharLike) -> bool:
    """True for space, tab, newline, vertical tab, form feed or carriage return."""
    code = _code(c)
    return 9 <= code <= 13 or code == 32


def tolower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


def toupper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code