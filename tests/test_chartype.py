import string

import pytest

from ftkit.chartype import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    isspace,
    tolower,
    toupper,
)

ASCII = range(128)


@pytest.mark.parametrize("code", ASCII)
def test_isalpha_matches_ascii_letters(code):
    assert isalpha(code) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", ASCII)
def test_isdigit_matches_ascii_digits(code):
    assert isdigit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", ASCII)
def test_isalnum_is_alpha_or_digit(code):
    assert isalnum(code) == (isalpha(code) or isdigit(code))


@pytest.mark.parametrize("code", ASCII)
def test_isspace_matches_whitespace(code):
    assert isspace(code) == (chr(code) in string.whitespace)


def test_non_ascii_codes_are_not_letters_or_digits():
    for code in range(128, 256):
        assert not isalpha(code)
        assert not isdigit(code)
        assert not isspace(code)


def test_isascii_bounds():
    assert isascii(0)
    assert isascii(127)
    assert not isascii(128)
    assert not isascii(-1)


def test_isprint_bounds():
    assert not isprint(31)
    assert isprint(32)
    assert isprint(126)
    assert not isprint(127)


def test_accepts_single_character_strings():
    assert isalpha("a")
    assert not isalpha("9")
    assert isdigit("9")
    assert not isalnum(" ")
    assert isspace("\t")


def test_rejects_multi_character_string():
    with pytest.raises(ValueError):
        isalpha("ab")


def test_rejects_other_types():
    with pytest.raises(TypeError):
        isdigit(1.5)


@pytest.mark.parametrize("code", ASCII)
def test_tolower_matches_ascii_lower(code):
    assert tolower(chr(code)) == chr(code).lower()


@pytest.mark.parametrize("code", ASCII)
def test_toupper_matches_ascii_upper(code):
    assert toupper(chr(code)) == chr(code).upper()


def test_case_conversion_keeps_int_type():
    assert tolower(90) == ord("z")
    assert tolower(100) == 100
    assert toupper(100) == ord("D")
    assert toupper(90) == 90


def test_case_conversion_leaves_non_ascii_alone():
    for code in range(128, 256):
        assert tolower(code) == code
        assert toupper(code) == code


def test_case_round_trip_on_letters():
    for ch in string.ascii_lowercase:
        assert tolower(toupper(ch)) == ch
    for ch in string.ascii_uppercase:
        assert toupper(tolower(ch)) == ch