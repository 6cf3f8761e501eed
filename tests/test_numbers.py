import pytest

from swapcheck.numbers import INT_MAX, INT_MIN, atoi, digit_count, is_int


@pytest.mark.parametrize("value", [0, 1, -1, 42, -17, 123456, INT_MAX, INT_MIN])
def test_atoi_round_trips_decimal_text(value):
    assert atoi(str(value)) == value


def test_atoi_skips_leading_whitespace_and_plus():
    assert atoi(" \t\n\v\f\r+5") == 5


def test_atoi_stops_at_first_non_digit():
    assert atoi("  -17abc") == -17


@pytest.mark.parametrize("text", ["abc", "--5", "+-3", "", "   "])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_wraps_past_int_max():
    assert atoi("2147483648") == -2147483648


def test_digit_count_of_int_min():
    assert digit_count(-2147483648) == 11


@pytest.mark.parametrize("value", [1, 9, 10, 99, 12345, INT_MAX])
def test_digit_count_negative_adds_sign(value):
    assert digit_count(-value) == digit_count(value) + 1


def test_digit_count_matches_text_length_of_zero():
    assert digit_count(0) == len("0")


@pytest.mark.parametrize("text", ["2147483647", "-2147483648", "0", "+12", "-0", "007"])
def test_is_int_accepts_values_in_range(text):
    assert is_int(text) is True


@pytest.mark.parametrize(
    "text", ["2147483648", "-2147483649", "12a", " 1", "1 ", "--1", "\u0663", "99999999999"]
)
def test_is_int_rejects_bad_or_out_of_range(text):
    assert is_int(text) is False


@pytest.mark.parametrize("text", ["", "+", "-"])
def test_is_int_accepts_bare_sign_and_empty(text):
    assert is_int(text) is True


@pytest.mark.parametrize("value", [INT_MIN, -1, 0, 1, INT_MAX])
def test_is_int_and_atoi_agree(value):
    text = str(value)
    assert is_int(text)
    assert atoi(text) == value