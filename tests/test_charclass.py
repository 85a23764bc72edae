import string

import pytest

from minilex.charclass import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ALL_BYTES = [chr(code) for code in range(256)]


@pytest.mark.parametrize("char", ALL_BYTES)
def test_is_alpha_matches_ascii_letters(char):
    assert is_alpha(char) == (char in string.ascii_letters)


@pytest.mark.parametrize("char", ALL_BYTES)
def test_is_digit_matches_ascii_digits(char):
    assert is_digit(char) == (char in string.digits)


@pytest.mark.parametrize("char", ALL_BYTES)
def test_is_alnum_is_alpha_or_digit(char):
    assert is_alnum(char) == (is_alpha(char) or is_digit(char))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_matches_printable_without_whitespace_controls():
    printable = {c for c in string.printable if c == " " or not c.isspace()}
    for char in ALL_BYTES:
        assert is_print(char) == (char in printable)


def test_int_and_str_agree():
    for code in range(256):
        assert is_alnum(code) == is_alnum(chr(code))
        assert is_print(code) == is_print(chr(code))


def test_to_upper_maps_lowercase_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(lower) == upper
        assert to_lower(upper) == lower


def test_case_mapping_leaves_other_chars_alone():
    for char in ALL_BYTES:
        if char not in string.ascii_letters:
            assert to_upper(char) == char
            assert to_lower(char) == char


def test_case_mapping_round_trip_with_ints():
    for char in string.ascii_lowercase:
        code = ord(char)
        assert to_lower(to_upper(code)) == code
        assert isinstance(to_upper(code), int)


def test_non_ascii_letters_are_not_alpha():
    assert is_alpha("é") is False
    assert to_upper("é") == "é"


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)