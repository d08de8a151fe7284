"""Integer and text conversions with 32-bit signed integer semantics."""

from __future__ import annotations

from ftkit.chartype import isdigit, isspace

__all__ = ["INT_MIN", "INT_MAX", "iabs", "atoi", "natoi", "itoa"]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _wrap32(value: int) -> int:
    """Reduce a value to the 32-bit signed range, two's complement style."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def _split_number(text: str) -> tuple[int, str, str]:
    """Split text into (sign, digit run, remainder) after an optional sign."""
    sign = 1
    if text[:1] == "-":
        sign, text = -1, text[1:]
    elif text[:1] == "+":
        text = text[1:]
    end = 0
    for ch in text:
        if not isdigit(ch):
            break
        end += 1
    return sign, text[:end], text[end:]


def iabs(x: int) -> int:
    """Absolute value of an integer."""
    return -x if x < 0 else x


def atoi(text: str) -> int:
    """Parse a leading integer, C style.

    Leading whitespace is skipped, one optional sign is read, then as many
    decimal digits as follow. Anything after them is ignored; with no digits
    the result is 0. The result wraps to the 32-bit signed range.
    """
    start = 0
    for ch in text:
        if not isspace(ch):
            break
        start += 1
    sign, digits, _ = _split_number(text[start:])
    value = int(digits) if digits else 0
    return _wrap32(sign * value)


def natoi(text: str) -> int:
    """Strictly parse a whole string as a 32-bit signed integer.

    An optional sign followed by decimal digits only, with no surrounding
    whitespace. Returns 0 if the text holds anything else or the value lies
    outside the 32-bit signed range.
    """
    sign, digits, rest = _split_number(text)
    value = sign * (int(digits) if digits else 0)
    if rest or not INT_MIN <= value <= INT_MAX:
        return 0
    return value


def itoa(n: int) -> str:
    """Decimal text of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    return str(n)