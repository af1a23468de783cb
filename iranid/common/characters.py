"""
Character classes for Persian and Arabic text.
Each constant is the body of a regex character class (without the brackets),
so classes can be concatenated into larger ones.
"""

import re


class CharacterClass:
    # ارقام
    PERSIAN_NUMERIC = r'\u06F0-\u06F9'
    ARABIC_NUMERIC = r'\u0660-\u0669'
    PERSIAN_ARABIC_NUMERIC = ARABIC_NUMERIC + PERSIAN_NUMERIC
    NUMERIC = '0-9' + PERSIAN_ARABIC_NUMERIC

    # حروف فارسی
    PERSIAN_ALPHABET = (
        r'\u0621-\u0628\u062A-\u063A\u0641-\u0642\u0644-\u0649'
        r'\u06CC\u06A9\u06AF\u0686\u067E\u0698'
    )

    # شکل‌های عربی که باید فارسی شوند
    ARABIC_YEH = r'\u064A\u0649\u06CD'
    ARABIC_KAF = r'\u0643\u06AA'
    ARABIC_WAW = r'\u06C4\u06C5\u0676'

    # اعراب
    PERSIAN_ARABIC_SHORT_VOWEL = r'\u064E\u0650\u064F'
    PERSIAN_ARABIC_TANVIN = r'\u064B\u064C\u064D'

    # علائم
    PERSIAN_ARABIC_SYMBOL = r'\u200C\u0640\u060C\u00AB\u00BB\u061B\u061F\u066C\u002C\u060D\u066B\u066A'
    SYMBOL = r'!@#$%^&*()_\-=+\\/{}\[\]"\':;?<>|.'

    PERSIAN = (
        NUMERIC + PERSIAN_ALPHABET + PERSIAN_ARABIC_SHORT_VOWEL
        + PERSIAN_ARABIC_TANVIN + PERSIAN_ARABIC_SYMBOL + SYMBOL + r'\s'
    )


ASCII_NUMERIC_PATTERN = re.compile(r'[0-9]+')
PERSIAN_TEXT_PATTERN = re.compile(f'[{CharacterClass.PERSIAN}]+')
ARABIC_YEH_PATTERN = re.compile(f'[{CharacterClass.ARABIC_YEH}]')
ARABIC_KAF_PATTERN = re.compile(f'[{CharacterClass.ARABIC_KAF}]')
ARABIC_WAW_PATTERN = re.compile(f'[{CharacterClass.ARABIC_WAW}]')

PERSIAN_YEH = '\u06CC'
PERSIAN_KAF = '\u06A9'
PERSIAN_WAW = '\u0648'

# Digit tables, built by offset from each block's zero
PERSIAN_ZERO = 0x06F0
ARABIC_ZERO = 0x0660

TO_ASCII_DIGITS = {PERSIAN_ZERO + i: ord('0') + i for i in range(10)}
TO_ASCII_DIGITS.update({ARABIC_ZERO + i: ord('0') + i for i in range(10)})

ARABIC_TO_PERSIAN_DIGITS = {ARABIC_ZERO + i: PERSIAN_ZERO + i for i in range(10)}

ASCII_TO_PERSIAN_DIGITS = {ord('0') + i: PERSIAN_ZERO + i for i in range(10)}
