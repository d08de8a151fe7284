import pytest

from ftkit.convert import INT_MAX, INT_MIN, atoi, iabs, itoa, natoi


@pytest.mark.parametrize("x", [0, 1, -1, 7, -7, INT_MAX, INT_MIN + 1])
def test_iabs_is_non_negative_and_preserves_magnitude(x):
    result = iabs(x)
    assert result >= 0
    assert result in (x, -x)


def test_atoi_skips_whitespace_and_reads_sign():
    assert atoi(" \t\n\v\f\r-42") == -42
    assert atoi("+17") == 17
    assert atoi("123abc") == 123


def test_atoi_double_sign_gives_zero():
    assert atoi("\t  -+11") == 0


def test_atoi_without_digits_gives_zero():
    assert atoi("") == 0
    assert atoi("   ") == 0
    assert atoi("abc") == 0


def test_atoi_int_limits():
    assert atoi("-2147483648") == INT_MIN
    assert atoi(str(INT_MAX)) == INT_MAX


def test_atoi_wraps_past_int_max():
    assert atoi("2147483648") == INT_MIN


def test_natoi_accepts_plain_numbers():
    assert natoi("42") == 42
    assert natoi("-42") == -42
    assert natoi("+42") == 42


def test_natoi_rejects_trailing_garbage():
    assert natoi("15d7") == 0


def test_natoi_rejects_leading_whitespace():
    assert natoi(" 5") == 0


def test_natoi_rejects_out_of_range():
    assert natoi("2147483648") == 0
    assert natoi("-2147483649") == 0


def test_natoi_accepts_limits():
    assert natoi("-2147483648") == INT_MIN
    assert natoi(str(INT_MAX)) == INT_MAX


def test_natoi_empty_and_lone_sign():
    assert natoi("") == 0
    assert natoi("-") == 0


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_zero():
    assert itoa(0) == "0"


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 12345, INT_MAX, INT_MIN])
def test_itoa_round_trips_through_natoi_and_atoi(n):
    text = itoa(n)
    assert natoi(text) == n
    assert atoi(text) == n


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa(1.5)
    with pytest.raises(TypeError):
        itoa("3")