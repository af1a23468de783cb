import logging
import re
from typing import Optional

from iranid.adapters.resources.banks_repo import BankRepository
from iranid.common.errors import (
    ChecksumError,
    EmptyInputError,
    FormatError,
    ValidationError,
)
from iranid.common.utils import is_blank, to_ascii_digits
from iranid.common.validators import card_number_checksum_matches
from iranid.domain.bank import Bank

LOGGER = logging.getLogger(__name__)

CARD_NUMBER_PATTERN = re.compile(r'[0-9]{16}')
REPEATED_DIGITS_PATTERN = re.compile(r'([0-9])\1{15}')
GROUP_SEPARATOR_PATTERN = re.compile(r'[\s\-]')
BIN_LENGTH = 6


class CardNumberService:
    """Validation and issuing-bank lookup of 16-digit bank card numbers."""

    def __init__(self, bank_repo: BankRepository | None = None):
        self.bank_repo = bank_repo or BankRepository()

    def normalize(self, card_number: str | None) -> str:
        """
        Turn keyboard input such as '۶۰۳۷-۷۰۱۶ ...' into plain ASCII digits.
        `validate` does not call this; it only accepts the exact 16 digits.
        """
        if is_blank(card_number):
            raise EmptyInputError('Card number is null or empty')
        return GROUP_SEPARATOR_PATTERN.sub('', to_ascii_digits(card_number))

    def check(self, card_number: str | None) -> Optional[ValidationError]:
        """Return the first validation error, or None when the number is valid."""
        if is_blank(card_number):
            return EmptyInputError('Card number is null or empty')
        if (
            CARD_NUMBER_PATTERN.fullmatch(card_number) is None
            or REPEATED_DIGITS_PATTERN.fullmatch(card_number) is not None
        ):
            return FormatError(f'Invalid card number format: {card_number}')
        if not card_number_checksum_matches(card_number):
            return ChecksumError(f'Invalid card number: {card_number}')
        return None

    def validate(self, card_number: str | None) -> None:
        error = self.check(card_number)
        if error is not None:
            raise error

    def is_valid(self, card_number: str | None) -> bool:
        error = self.check(card_number)
        if error is not None:
            LOGGER.warning(error.message)
            return False
        return True

    def find_bank(self, card_number: str | None) -> Optional[Bank]:
        """Bank owning the card's BIN (first six digits), or None."""
        self.validate(card_number)
        return self.bank_repo.find_by_bin(card_number[:BIN_LENGTH])


card_number_service = CardNumberService()
