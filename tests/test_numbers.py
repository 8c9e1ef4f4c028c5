import pytest

from pipekit.numbers import INT_MAX, INT_MIN, atoi, itoa


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 1000000, INT_MAX, INT_MIN])
def test_round_trip(n):
    assert atoi(itoa(n)) == n


def test_leading_whitespace_and_sign():
    assert atoi(" \t\n\v\f\r+17abc") == 17
    assert atoi("   -42") == -42


def test_stops_at_first_non_digit():
    assert atoi("123abc456") == 123


def test_single_sign_only():
    assert atoi("--5") == atoi("")
    assert atoi("+-5") == atoi("")


def test_empty_and_garbage():
    assert atoi("") == 0
    assert atoi("xyz") == atoi("")


def test_range_limits():
    assert atoi("2147483647") == INT_MAX
    assert atoi("-2147483648") == INT_MIN


def test_overflow_positive():
    assert atoi("99999999999") == -1


def test_overflow_negative():
    assert atoi("-99999999999") == atoi("")


def test_itoa_values():
    assert itoa(INT_MIN) == "-2147483648"
    assert itoa(0) == "0"
    assert itoa(-7) == "-7"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("5")
    with pytest.raises(TypeError):
        itoa(True)