"""Formatted output to file descriptors.

The formatting language is a small subset of printf: ``%c``, ``%s``,
``%p``, ``%d``, ``%i``, ``%u``, ``%x``, ``%X`` and ``%%``. There are no
flags, widths or precisions. A ``%`` followed by any other character
prints nothing and takes no argument; a ``%`` at the very end of the
format is dropped. Integer conversions follow 32-bit C ``int`` and
``unsigned int`` semantics.
"""

from __future__ import annotations

import operator
import os
import sys
from typing import Any, Callable, Optional, Union

__all__ = [
    "format_string",
    "printf",
    "printfd",
    "putchar_fd",
    "putstr_fd",
    "putendl_fd",
    "putnbr_fd",
]

_UINT32_MASK = 2**32 - 1
_POINTER_MASK = 2**64 - 1
_ENCODING = "utf-8"


def _to_int32(value: Any) -> int:
    number = operator.index(value) & _UINT32_MASK
    return number - 2**32 if number >= 2**31 else number


def _to_uint32(value: Any) -> int:
    return operator.index(value) & _UINT32_MASK


def _conv_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _conv_string(value: Optional[str]) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects str or None, got {type(value).__name__}")
    return value


def _conv_pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int):
        address = value & _POINTER_MASK
    else:
        address = id(value) & _POINTER_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _conv_signed(value: Any) -> str:
    return str(_to_int32(value))


def _conv_unsigned(value: Any) -> str:
    return str(_to_uint32(value))


def _conv_hex_lower(value: Any) -> str:
    return f"{_to_uint32(value):x}"


def _conv_hex_upper(value: Any) -> str:
    return f"{_to_uint32(value):X}"


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _conv_char,
    "s": _conv_string,
    "p": _conv_pointer,
    "d": _conv_signed,
    "i": _conv_signed,
    "u": _conv_unsigned,
    "x": _conv_hex_lower,
    "X": _conv_hex_upper,
}


def format_string(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the text.

    Raises ``TypeError`` when ``fmt`` is ``None`` or when there are fewer
    arguments than conversions. Extra arguments are ignored.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    values = iter(args)
    pieces: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        conv = next(chars, None)
        if conv is None:
            break
        converter = _CONVERTERS.get(conv)
        if converter is not None:
            try:
                value = next(values)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{conv}") from None
            pieces.append(converter(value))
        elif conv == "%":
            pieces.append("%")
    return "".join(pieces)


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def printf(fmt: str, *args: Any) -> int:
    """Write formatted text to standard output; return the bytes written."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text.encode(_ENCODING))


def printfd(fd: int, fmt: str, *args: Any) -> int:
    """Write formatted text to ``fd``; return the bytes written."""
    data = format_string(fmt, *args).encode(_ENCODING)
    _write_all(fd, data)
    return len(data)


def putchar_fd(c: Union[str, bytes, int], fd: int) -> None:
    """Write one character to ``fd``; an integer is written as one byte."""
    if isinstance(c, (str, bytes)):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode(_ENCODING) if isinstance(c, str) else c
    else:
        data = bytes([operator.index(c) & 0xFF])
    _write_all(fd, data)


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` to ``fd``; nothing happens for ``None`` or a negative fd."""
    if s is None or fd < 0:
        return
    _write_all(fd, s.encode(_ENCODING))


def putendl_fd(s: str, fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    if s is None:
        raise TypeError("string must not be None")
    _write_all(fd, s.encode(_ENCODING) + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of ``n`` to ``fd``."""
    _write_all(fd, str(operator.index(n)).encode("ascii"))