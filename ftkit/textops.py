"""Building new strings: copying, slicing, joining, trimming and splitting.

Strings may be ``str`` or bytes-like. Like the other string helpers in
this package, a string ends at its first NUL character, if it has one.
Results are of the same kind as the input: ``str`` in, ``str`` out;
bytes-like in, ``bytes`` out.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional, Union

__all__ = [
    "strdup",
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "nsplit",
    "matlen",
]

Text = Union[str, bytes, bytearray, memoryview]

_STR_SPACE = re.compile(r"[\t\n\v\f\r ]+")


def _text(s: Text) -> Union[str, bytes]:
    """``s`` cut at its first NUL, as ``str`` or ``bytes``."""
    if isinstance(s, str):
        return s.split("\0", 1)[0]
    if isinstance(s, (bytes, bytearray, memoryview)):
        return bytes(s).split(b"\0", 1)[0]
    raise TypeError(f"expected str or bytes-like, got {type(s).__name__}")


def _separator(sep: Union[str, bytes, int], for_str: bool) -> Union[str, bytes]:
    """Normalise a one-character separator to match the string kind."""
    if isinstance(sep, bool):
        raise TypeError("expected a character, got bool")
    if isinstance(sep, int):
        code = sep & 0xFF
        return chr(code) if for_str else bytes([code])
    if isinstance(sep, (str, bytes)):
        if len(sep) != 1:
            raise ValueError(f"expected a single character, got {sep!r}")
        if for_str:
            return sep if isinstance(sep, str) else chr(sep[0])
        return sep if isinstance(sep, bytes) else bytes([ord(sep)])
    raise TypeError(f"expected int, str or bytes, got {type(sep).__name__}")


def strdup(s: Text) -> Union[str, bytes]:
    """A copy of ``s`` up to its first NUL."""
    return _text(s)


def substr(s: Optional[Text], start: int, length: int) -> Optional[Union[str, bytes]]:
    """At most ``length`` characters of ``s`` beginning at index ``start``.

    A start at or past the end gives an empty string. ``None`` gives
    ``None``.
    """
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _text(s)
    if start >= len(text):
        return text[:0]
    return text[start:start + length]


def strjoin(s1: Text, s2: Text) -> Union[str, bytes]:
    """``s1`` followed by ``s2``, both of the same kind."""
    a, b = _text(s1), _text(s2)
    if type(a) is not type(b):
        raise TypeError("cannot join str with bytes")
    return a + b


def strtrim(s: Optional[Text], charset: Optional[Text]) -> Optional[Union[str, bytes]]:
    """``s`` with characters from ``charset`` removed from both ends.

    ``None`` gives ``None``; with no ``charset``, or an empty ``s``, a copy
    of ``s`` comes back. When at most one character is left after the
    leading characters are removed, the result is empty.
    """
    if s is None:
        return None
    text = _text(s)
    if charset is None or not text:
        return text
    chars = _text(charset)
    if type(chars) is not type(text):
        raise TypeError("string and character set must be of the same kind")
    members = set(chars)
    start = 0
    while start < len(text) and text[start] in members:
        start += 1
    end = len(text) - 1
    if start >= end:
        return text[:0]
    while text[end] in members:
        end -= 1
    return text[start:end + 1]


def split(s: Optional[Text], sep: Union[str, bytes, int]) -> Optional[list]:
    """The non-empty pieces of ``s`` between occurrences of ``sep``.

    ``None`` gives ``None``.
    """
    if s is None:
        return None
    text = _text(s)
    separator = _separator(sep, isinstance(text, str))
    return [word for word in text.split(separator) if word]


def nsplit(s: Optional[Text]) -> Optional[list]:
    """The words of ``s``, separated by runs of ASCII whitespace.

    Whitespace is space, tab, newline, vertical tab, form feed and carriage
    return. ``None`` gives ``None``.
    """
    if s is None:
        return None
    text = _text(s)
    if isinstance(text, str):
        return [word for word in _STR_SPACE.split(text) if word]
    return text.split()


def matlen(items: Optional[Iterable]) -> int:
    """Number of items before the first ``None``; 0 for ``None`` itself."""
    if items is None:
        return 0
    count = 0
    for item in items:
        if item is None:
            break
        count += 1
    return count