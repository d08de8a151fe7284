"""Searching, comparing, copying and mapping character strings.

A string here is either ``str`` or a bytes-like object. It ends at its
first NUL character (``"\\0"`` or byte 0), if it has one; anything after
that is not part of it. Positions are returned as indexes, and ``None``
stands for "not found".
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strcmp",
    "strncmp",
    "strnstr",
    "strlcpy",
    "strlcat",
    "striteri",
    "strmapi",
]

Text = Union[str, bytes, bytearray, memoryview]
CharLike = Union[int, str, bytes]


def _codes(s: Text) -> list[int]:
    """Character codes of ``s`` up to its first NUL."""
    if isinstance(s, str):
        return [ord(ch) for ch in s.split("\0", 1)[0]]
    if isinstance(s, (bytes, bytearray, memoryview)):
        return list(bytes(s).split(b"\0", 1)[0])
    raise TypeError(f"expected str or bytes-like, got {type(s).__name__}")


def _signed_codes(s: Text) -> list[int]:
    """Like ``_codes`` but bytes above 127 read as negative, as a plain char."""
    codes = _codes(s)
    if isinstance(s, str):
        return codes
    return [code - 256 if code > 127 else code for code in codes]


def _target(c: CharLike) -> int:
    """Code of the character to look for; integers are taken modulo 256."""
    if isinstance(c, bool):
        raise TypeError("expected a character, got bool")
    if isinstance(c, int):
        return c & 0xFF
    if isinstance(c, (str, bytes)):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected int, str or bytes, got {type(c).__name__}")


def _compare(a: list[int], b: list[int], limit: Optional[int]) -> int:
    """Difference of the first unequal codes, the end reading as 0."""
    i = 0
    while limit is None or i < limit:
        x = a[i] if i < len(a) else 0
        y = b[i] if i < len(b) else 0
        if x != y or x == 0:
            return x - y
        i += 1
    return 0


def strlen(s: Text) -> int:
    """Number of characters before the first NUL."""
    return len(_codes(s))


def strchr(s: Text, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or ``None``.

    Looking for NUL finds the end of the string.
    """
    codes = _codes(s)
    target = _target(c)
    if target == 0:
        return len(codes)
    try:
        return codes.index(target)
    except ValueError:
        return None


def strrchr(s: Text, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or ``None``.

    Looking for NUL finds the end of the string.
    """
    codes = _codes(s)
    target = _target(c)
    if target == 0:
        return len(codes)
    for index in reversed(range(len(codes))):
        if codes[index] == target:
            return index
    return None


def strcmp(s1: Text, s2: Text) -> int:
    """Compare two strings.

    Returns the difference of the first pair of unequal characters, 0 when
    the strings are equal. Bytes above 127 count as negative values.
    """
    return _compare(_signed_codes(s1), _signed_codes(s2), None)


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most ``n`` characters of two strings, bytes unsigned."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    return _compare(_codes(s1), _codes(s2), n)


def strnstr(big: Text, little: Text, length: int) -> Optional[int]:
    """Index of the first ``little`` in ``big`` lying wholly within the first
    ``length`` characters, or ``None``. An empty ``little`` is found at 0."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    needle = _codes(little)
    if not needle:
        return 0
    hay = _codes(big)
    size = len(needle)
    for start in range(len(hay)):
        if length - start < size:
            break
        if hay[start:start + size] == needle:
            return start
    return None


def _src_bytes(src: Text) -> bytes:
    if isinstance(src, str):
        raise TypeError("source must be bytes-like, not str")
    return bytes(_codes(src))


def _check_size(dst: bytearray, size: int) -> None:
    if not isinstance(dst, bytearray):
        raise TypeError(f"destination must be a bytearray, got {type(dst).__name__}")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dst):
        raise ValueError(f"size {size} exceeds buffer length {len(dst)}")


def strlcpy(dst: bytearray, src: Text, size: int) -> int:
    """Copy ``src`` into the first ``size`` bytes of ``dst``, NUL-terminated
    and truncated to fit. Returns the length of ``src``."""
    _check_size(dst, size)
    data = _src_bytes(src)
    if size == 0:
        return len(data)
    count = min(size - 1, len(data))
    dst[:count] = data[:count]
    dst[count] = 0
    return len(data)


def strlcat(dst: bytearray, src: Text, size: int) -> int:
    """Append ``src`` to the string in ``dst`` within ``size`` bytes in all.

    Returns the length the full result would have had: the old length of
    ``dst`` plus that of ``src``, or ``size`` plus that of ``src`` when
    ``size`` does not exceed the old length of ``dst``.
    """
    _check_size(dst, size)
    data = _src_bytes(src)
    d_len = strlen(dst)
    if size <= d_len:
        return size + len(data)
    count = min(len(data), size - 1 - d_len)
    dst[d_len:d_len + count] = data[:count]
    dst[d_len + count] = 0
    return d_len + len(data)


def striteri(
    chars: Optional[MutableSequence], f: Callable[[int, object], object]
) -> None:
    """Replace each character of ``chars`` in place with ``f(index, char)``.

    ``chars`` is a mutable sequence such as a list of one-character strings
    or a bytearray; it is processed up to its first NUL. ``None`` is left
    alone.
    """
    if chars is None:
        return
    for index, ch in enumerate(list(chars)):
        if ch in ("\0", 0):
            break
        chars[index] = f(index, ch)


def strmapi(s: Optional[Text], f: Callable[[int, object], object]) -> Text:
    """A new string whose characters are ``f(index, char)`` for each
    character of ``s``. ``None`` gives an empty ``str``."""
    if s is None:
        return ""
    if isinstance(s, str):
        return "".join(f(index, ch) for index, ch in enumerate(s.split("\0", 1)[0]))
    return bytes(f(index, code) for index, code in enumerate(_codes(s)))