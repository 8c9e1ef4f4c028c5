import string

import pytest

from pipekit.ctype import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
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
def test_isalnum_is_union(code):
    assert isalnum(code) == (isalpha(code) or isdigit(code))


@pytest.mark.parametrize("code", ASCII)
def test_isprint_matches_printable(code):
    assert isprint(code) == chr(code).isprintable()


def test_isascii_bounds():
    assert isascii(0)
    assert isascii(127)
    assert not isascii(128)
    assert not isascii(-1)


def test_non_ascii_is_not_alpha():
    assert not isalpha("é")
    assert not isalpha(200)


def test_string_arguments():
    assert isalpha("q")
    assert isdigit("7")
    assert not isprint("\n")


def test_multichar_string_rejected():
    with pytest.raises(ValueError):
        isalpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        isdigit(3.0)


@pytest.mark.parametrize("ch", string.ascii_letters)
def test_case_conversion_matches_str_methods(ch):
    assert toupper(ch) == ch.upper()
    assert tolower(ch) == ch.lower()


@pytest.mark.parametrize("ch", string.ascii_lowercase)
def test_case_round_trip(ch):
    assert tolower(toupper(ch)) == ch
    assert toupper(ord(ch)) == ord(ch.upper())


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " ")
def test_non_letters_unchanged(ch):
    assert toupper(ch) == ch
    assert tolower(ch) == ch
    assert toupper(ord(ch)) == ord(ch)