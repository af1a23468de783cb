import pytest

from iranid.common.errors import FormatError, ValidationError
from iranid.common.utils import (
    digit_at,
    is_blank,
    is_persian_text,
    normalize_persian,
    to_ascii_digits,
    to_persian_digits,
)

PERSIAN_DIGITS = '\u06F0\u06F1\u06F2\u06F3\u06F4\u06F5\u06F6\u06F7\u06F8\u06F9'
ARABIC_DIGITS = '\u0660\u0661\u0662\u0663\u0664\u0665\u0666\u0667\u0668\u0669'

ARABIC_YEH = '\u064A'
ARABIC_KAF = '\u0643'
PERSIAN_YEH = '\u06CC'
PERSIAN_KAF = '\u06A9'
PERSIAN_WAW = '\u0648'


@pytest.mark.parametrize('value', [None, '', ' ', '\t\n'])
def test_is_blank(value) -> None:
    assert is_blank(value)


def test_is_blank_false_for_text() -> None:
    assert not is_blank(' a ')


def test_to_ascii_digits_persian_and_arabic() -> None:
    assert to_ascii_digits(PERSIAN_DIGITS) == '0123456789'
    assert to_ascii_digits(ARABIC_DIGITS) == '0123456789'


def test_to_ascii_digits_mixed_same_value() -> None:
    mixed = PERSIAN_DIGITS[:5] + ARABIC_DIGITS[5:]
    assert to_ascii_digits(mixed) == to_ascii_digits(PERSIAN_DIGITS) == to_ascii_digits(ARABIC_DIGITS)


def test_to_ascii_digits_keeps_other_characters_and_trims() -> None:
    assert to_ascii_digits('  abc ' + PERSIAN_DIGITS[1:4] + '-9 ') == 'abc 123-9'


@pytest.mark.parametrize('value', [None, '', '   '])
def test_to_ascii_digits_blank_returns_empty(value) -> None:
    assert to_ascii_digits(value) == ''


def test_to_persian_digits() -> None:
    assert to_persian_digits('0123456789') == PERSIAN_DIGITS
    assert to_persian_digits(ARABIC_DIGITS) == PERSIAN_DIGITS


def test_normalize_persian_letters_and_digits() -> None:
    text = ' ' + ARABIC_KAF + ARABIC_YEH + ' \u06C4 ' + ARABIC_DIGITS[:3] + ' '
    expected = PERSIAN_KAF + PERSIAN_YEH + ' ' + PERSIAN_WAW + ' ' + PERSIAN_DIGITS[:3]
    assert normalize_persian(text) == expected


def test_normalize_persian_leaves_ascii_and_latin() -> None:
    assert normalize_persian('abc 123') == 'abc 123'


@pytest.mark.parametrize('value', [
    'abc',
    ARABIC_KAF + ARABIC_YEH + ARABIC_DIGITS,
    PERSIAN_KAF + ' 12 \u06C5',
])
def test_normalize_persian_is_idempotent(value) -> None:
    once = normalize_persian(value)
    assert normalize_persian(once) == once


def test_normalize_persian_blank() -> None:
    assert normalize_persian(None) == ''
    assert normalize_persian('  ') == ''


@pytest.mark.parametrize('value', [
    '\u0633\u0644\u0627\u0645',                       # salam
    '\u0633\u0644\u0627\u0645 \u062F\u0646\u06CC\u0627!',
    PERSIAN_DIGITS,
    ARABIC_DIGITS,
    '\u0645\u06CC\u200C\u0631\u0648\u0645',            # with ZWNJ
    '\u0628\u064E\u0631\u0627\u062F\u064E\u0631',      # short vowels
    ' \u06A9\u062A\u0627\u0628 \u00AB\u06AF\u0644\u00BB ',
])
def test_is_persian_text(value) -> None:
    assert is_persian_text(value)


@pytest.mark.parametrize('value', [
    None,
    '',
    '   ',
    'hello',
    '\u0633\u0644\u0627\u0645 world',
    ARABIC_KAF,
])
def test_is_persian_text_rejects(value) -> None:
    assert not is_persian_text(value)


def test_digit_at() -> None:
    assert digit_at('2791567895', 0) == 2
    assert digit_at('2791567895', 9) == 5


@pytest.mark.parametrize('value, index', [
    ('123', 3),
    ('123', -1),
    ('12a', 0),
    (' 123', 1),
    ('', 0),
    (PERSIAN_DIGITS, 0),
])
def test_digit_at_invalid(value, index) -> None:
    with pytest.raises(FormatError):
        digit_at(value, index)


def test_digit_at_error_is_validation_error() -> None:
    with pytest.raises(ValidationError, match='Invalid number'):
        digit_at('x', 0)
