import struct

import pytest

from ftkit.memory import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
    realloc,
)


def test_memset_source_example():
    buf = bytearray(b"Ciao mondo!")
    result = memset(buf, ord("X"), 6)
    assert result is buf
    assert buf == bytearray(b"XXXXXXondo!")


def test_memset_value_taken_modulo_256():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytearray(b"AAAA")


def test_memset_zero_count_leaves_buffer():
    buf = bytearray(b"abc")
    memset(buf, ord("z"), 0)
    assert buf == bytearray(b"abc")


def test_memset_count_too_large():
    with pytest.raises(ValueError):
        memset(bytearray(3), 0, 4)


def test_memset_negative_count():
    with pytest.raises(ValueError):
        memset(bytearray(3), 0, -1)


def test_memset_read_only_buffer():
    with pytest.raises(TypeError):
        memset(b"abc", 0, 1)


def test_memset_on_memoryview_writes_through():
    backing = bytearray(b"hello")
    memset(memoryview(backing)[1:], ord("-"), 2)
    assert backing == bytearray(b"h--lo")


def test_bzero_source_example():
    buf = bytearray(b"Ciao mondo!")
    bzero(buf, 6)
    assert buf[:6] == bytearray(6)
    assert buf[6:] == bytearray(b"ondo!")


def test_memchr_finds_first_occurrence():
    assert memchr(b"bonjourno", ord("o"), 9) == 1


def test_memchr_respects_count():
    assert memchr(b"bonjourno", ord("u"), 5) is None
    assert memchr(b"bonjourno", ord("u"), 6) == 5


def test_memchr_finds_zero_byte():
    data = b"bonjourno\x00tail"
    assert memchr(data, 0, len(data)) == len(b"bonjourno")


def test_memchr_value_modulo_256():
    assert memchr(b"abc", 0x100 + ord("c"), 3) == 2


def test_memchr_count_too_large():
    with pytest.raises(ValueError):
        memchr(b"abc", ord("a"), 4)


def test_memcmp_source_example():
    s1 = struct.pack("<4i", 1, 0, 11, 5)
    s2 = struct.pack("<4i", 1, 0, 11, 84)
    assert memcmp(s1, s2, len(s1)) == -79


def test_memcmp_equal_prefix_is_zero():
    assert memcmp(b"abcdef", b"abcxyz", 3) == 0


def test_memcmp_zero_count():
    assert memcmp(b"a", b"b", 0) == 0


def test_memcmp_is_antisymmetric():
    a, b = b"abcd", b"abzd"
    assert memcmp(a, b, 4) < 0
    assert memcmp(b, a, 4) == -memcmp(a, b, 4)


def test_memcmp_bytes_are_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_count_too_large():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_memcpy_copies_prefix():
    dest = bytearray(b"Belli ciao")
    result = memcpy(dest, b"Brutt ciao", 5)
    assert result is dest
    assert dest == bytearray(b"Brutt ciao")


def test_memcpy_leaves_rest_untouched():
    dest = bytearray(b"0000000")
    memcpy(dest, b"abc", 3)
    assert dest == bytearray(b"abc0000")


def test_memcpy_count_exceeds_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"ab", 3)


def test_memcpy_into_read_only():
    with pytest.raises(TypeError):
        memcpy(b"xxxx", b"ab", 2)


def test_memmove_forward_overlap():
    buf = bytearray(b"0123456789")
    result = memmove(buf, 2, 0, 5)
    assert result is buf
    assert buf == bytearray(b"0101234789")


def test_memmove_backward_overlap():
    buf = bytearray(b"0123456789")
    memmove(buf, 0, 2, 5)
    assert buf == bytearray(b"2345656789")


def test_memmove_same_offset_and_zero_count_unchanged():
    buf = bytearray(b"abcdef")
    memmove(buf, 3, 3, 3)
    memmove(buf, 0, 4, 0)
    assert buf == bytearray(b"abcdef")


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(b"abcdef"), 4, 0, 3)
    with pytest.raises(ValueError):
        memmove(bytearray(b"abcdef"), -1, 0, 2)


def test_calloc_zero_filled():
    buf = calloc(4, 3)
    assert buf == bytearray(12)


def test_calloc_zero_sizes_give_empty_buffer():
    assert calloc(0, 8) == bytearray()
    assert calloc(8, 0) == bytearray()


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(2**62, 2**8)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_realloc_source_example_shrinks():
    buf = calloc(10, 1)
    buf[0:2] = b"cb"
    shrunk = realloc(buf, 3)
    assert shrunk == bytearray(b"cb\x00")


def test_realloc_grows_with_zero_padding():
    grown = realloc(bytearray(b"abc"), 6)
    assert grown == bytearray(b"abc\x00\x00\x00")


def test_realloc_same_size_returns_same_object():
    buf = bytearray(b"abc")
    assert realloc(buf, 3) is buf


def test_realloc_zero_releases():
    assert realloc(bytearray(b"abc"), 0) is None


def test_realloc_none_allocates():
    assert realloc(None, 4) == bytearray(4)


def test_realloc_negative():
    with pytest.raises(ValueError):
        realloc(bytearray(b"abc"), -2)