"""Text helpers shared by the identifier services.

User input reaches the services typed on Persian, Arabic or Latin keyboards, so
digits are folded to ASCII before any checksum arithmetic runs.
"""

from iranid.common.characters import (
    ARABIC_KAF_PATTERN,
    ARABIC_TO_PERSIAN_DIGITS,
    ARABIC_WAW_PATTERN,
    ARABIC_YEH_PATTERN,
    ASCII_NUMERIC_PATTERN,
    ASCII_TO_PERSIAN_DIGITS,
    PERSIAN_KAF,
    PERSIAN_TEXT_PATTERN,
    PERSIAN_WAW,
    PERSIAN_YEH,
    TO_ASCII_DIGITS,
)
from iranid.common.errors import FormatError


def is_blank(value: str | None) -> bool:
    """True for None, empty or whitespace-only strings."""
    return value is None or not value.strip()


def to_ascii_digits(value: str | None) -> str:
    """
    Replace Persian (U+06F0..U+06F9) and Arabic-Indic (U+0660..U+0669) digits
    with '0'..'9'. Other characters are kept as they are.

    Examples:
        >>> to_ascii_digits(' ۱۲۳٤٥ ')
        '12345'
        >>> to_ascii_digits('')
        ''
    """
    if is_blank(value):
        return ''
    return value.strip().translate(TO_ASCII_DIGITS)


def to_persian_digits(value: str | None) -> str:
    """Replace ASCII and Arabic-Indic digits with Persian numerals (for display)."""
    if is_blank(value):
        return ''
    return value.strip().translate(ASCII_TO_PERSIAN_DIGITS).translate(ARABIC_TO_PERSIAN_DIGITS)


def normalize_persian(value: str | None) -> str:
    """
    Convert Arabic yeh, kaf, waw and Arabic-Indic digits to their Persian forms.
    ASCII digits and Latin letters are not touched.
    """
    if is_blank(value):
        return ''
    result = value.strip().translate(ARABIC_TO_PERSIAN_DIGITS)
    result = ARABIC_YEH_PATTERN.sub(PERSIAN_YEH, result)
    result = ARABIC_KAF_PATTERN.sub(PERSIAN_KAF, result)
    return ARABIC_WAW_PATTERN.sub(PERSIAN_WAW, result)


def is_persian_text(value: str | None) -> bool:
    """
    True if the trimmed value only holds Persian letters, numerals, vowel
    marks, Persian/Arabic punctuation, common symbols and whitespace.
    """
    if is_blank(value):
        return False
    return PERSIAN_TEXT_PATTERN.fullmatch(value.strip()) is not None


def digit_at(value: str, index: int) -> int:
    """
    Return the integer value of the ASCII digit at `index`.

    Raises FormatError if `value` is not made only of ASCII digits or `index`
    is outside the string. No trimming happens here; callers normalize first.
    """
    if (
        value is None
        or ASCII_NUMERIC_PATTERN.fullmatch(value) is None
        or index < 0
        or index >= len(value)
    ):
        raise FormatError('Invalid number')
    return ord(value[index]) - ord('0')
