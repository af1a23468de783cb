"""Checksum arithmetic for Iranian national IDs and bank card numbers.

Both functions expect input that already passed the format checks of the
services; `digit_at` raises FormatError otherwise.
"""

from iranid.common.utils import digit_at

NATIONAL_ID_LENGTH = 10
CARD_NUMBER_LENGTH = 16


def national_id_remainder(national_id: str) -> int:
    """
    Weighted sum of the first nine digits (weights 10 down to 2), modulo 11.

    Examples:
        >>> national_id_remainder('2791567895')
        6
    """
    total = sum(
        digit_at(national_id, i) * (NATIONAL_ID_LENGTH - i)
        for i in range(NATIONAL_ID_LENGTH - 1)
    )
    return total % (NATIONAL_ID_LENGTH + 1)


def national_id_checksum_matches(national_id: str) -> bool:
    """
    اعتبارسنجی رقم کنترل کدملی.

    Examples:
        >>> national_id_checksum_matches('2791567895')
        True
        >>> national_id_checksum_matches('2791567896')
        False
    """
    remainder = national_id_remainder(national_id)
    control_digit = digit_at(national_id, NATIONAL_ID_LENGTH - 1)

    if remainder < 2:
        return control_digit == remainder
    return remainder + control_digit == NATIONAL_ID_LENGTH + 1


def card_number_checksum(card_number: str) -> int:
    """
    Luhn sum over the 16 digits: digits at odd 1-indexed positions are
    doubled (minus 9 when above 9), the others are added as they are.
    """
    total = 0
    for i in range(CARD_NUMBER_LENGTH):
        digit = digit_at(card_number, i)
        if (i + 1) % 2 != 0:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total


def card_number_checksum_matches(card_number: str) -> bool:
    """
    Examples:
        >>> card_number_checksum_matches('6037701689095443')
        True
        >>> card_number_checksum_matches('6219861034529008')
        False
    """
    return card_number_checksum(card_number) % 10 == 0
