import string

import pytest

from pipeline_runner import chars


@pytest.mark.parametrize("code", range(0, 256))
def test_classification_matches_ascii_sets(code):
    ch = chr(code)
    assert chars.is_alpha(code) == (ch in string.ascii_letters)
    assert chars.is_digit(code) == (ch in string.digits)
    assert chars.is_alnum(code) == (ch in string.ascii_letters + string.digits)
    assert chars.is_ascii(code) == (code < 128)


def test_is_print_bounds():
    assert chars.is_print(" ")
    assert chars.is_print("~")
    assert not chars.is_print(31)
    assert not chars.is_print(127)


def test_negative_code_is_not_ascii():
    assert not chars.is_ascii(-1)


def test_classification_accepts_strings():
    assert chars.is_alpha("q")
    assert not chars.is_alpha("5")
    assert chars.is_digit("5")


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        chars.is_alpha("ab")


def test_non_char_type_rejected():
    with pytest.raises(TypeError):
        chars.is_digit(1.5)


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_case_round_trip(letter):
    upper = chars.to_upper(letter)
    assert upper == letter.upper()
    assert chars.to_lower(upper) == letter


def test_case_conversion_keeps_int_type():
    assert chars.to_upper(ord("a")) == ord("A")
    assert chars.to_lower(ord("Z")) == ord("z")


@pytest.mark.parametrize("value", ["1", "@", "[", "{", " "])
def test_case_conversion_leaves_non_letters(value):
    assert chars.to_upper(value) == value
    assert chars.to_lower(value) == value


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert chars.atoi(" \t\n\v\f\r-42abc") == -42
    assert chars.atoi("+17") == 17


def test_atoi_without_digits_is_zero():
    assert chars.atoi("abc") == 0
    assert chars.atoi("") == 0
    assert chars.atoi("--5") == 0


def test_atoi_single_sign_only():
    assert chars.atoi("+-5") == 0


def test_atoi_limits():
    assert chars.atoi("-2147483648") == -2147483648
    assert chars.atoi("2147483647") == 2147483647


def test_atoi_wraps_like_32_bit():
    assert chars.atoi("2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 7, -7, 100, -2147483648, 2147483647])
def test_itoa_atoi_round_trip(n):
    assert chars.atoi(chars.itoa(n)) == n


def test_itoa_minimum():
    assert chars.itoa(-2147483648) == "-2147483648"


def test_itoa_zero():
    assert chars.itoa(0) == "0"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        chars.itoa(2147483648)