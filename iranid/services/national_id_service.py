import logging
import re
from typing import List, Optional

from iranid.adapters.resources.hometowns_repo import HometownRepository
from iranid.common.errors import (
    BlacklistError,
    ChecksumError,
    EmptyInputError,
    FormatError,
    ParseError,
    ValidationError,
)
from iranid.common.utils import digit_at, is_blank, to_ascii_digits
from iranid.common.validators import NATIONAL_ID_LENGTH, national_id_checksum_matches
from iranid.domain.hometown import Hometown
from iranid.domain.national_id import NationalId

LOGGER = logging.getLogger(__name__)

# Up to two leading zeros may be left out by the user
MIN_NATIONAL_ID_LENGTH = 8

NATIONAL_ID_PATTERN = re.compile(r'[0-9]{10}')

# The same digit ten times is never assigned, except 1111111111
REPEATED_DIGITS_PATTERN = re.compile(r'([02-9])\1{9}')

# Sequential values that pass the checksum but are known to be fake
BLACKLISTED_NATIONAL_IDS = frozenset({
    '0123456789',
    '1234567890',
})


class NationalIdService:
    """Validation, hometown lookup and parsing of Iranian national IDs (کدملی)."""

    def __init__(self, hometown_repo: HometownRepository | None = None):
        self.hometown_repo = hometown_repo or HometownRepository()

    # ---- Normalization ----
    def _normalized_or_error(self, national_id: str | None) -> str | ValidationError:
        if is_blank(national_id):
            return EmptyInputError('National ID is null or empty')
        value = to_ascii_digits(national_id)
        message = f'Invalid national ID format: {value}'
        if not MIN_NATIONAL_ID_LENGTH <= len(value) <= NATIONAL_ID_LENGTH:
            return FormatError(message)
        value = value.rjust(NATIONAL_ID_LENGTH, '0')
        if (
            NATIONAL_ID_PATTERN.fullmatch(value) is None
            or REPEATED_DIGITS_PATTERN.fullmatch(value) is not None
        ):
            return FormatError(message)
        return value

    def normalize(self, national_id: str | None) -> str:
        """
        Trim, convert Persian/Arabic digits and left-pad 8 or 9 digit input
        to the canonical 10-digit form.
        """
        result = self._normalized_or_error(national_id)
        if isinstance(result, ValidationError):
            raise result
        return result

    # ---- Validation ----
    def _check_normalized(self, national_id: str) -> Optional[ValidationError]:
        if national_id in BLACKLISTED_NATIONAL_IDS:
            return BlacklistError(f'Invalid national ID: {national_id}')
        if not national_id_checksum_matches(national_id):
            return ChecksumError(f'Invalid national ID: {national_id}')
        return None

    def check(self, national_id: str | None) -> Optional[ValidationError]:
        """Return the first validation error, or None when the id is valid."""
        result = self._normalized_or_error(national_id)
        if isinstance(result, ValidationError):
            return result
        return self._check_normalized(result)

    def validate(self, national_id: str | None) -> None:
        error = self.check(national_id)
        if error is not None:
            raise error

    def is_valid(self, national_id: str | None) -> bool:
        error = self.check(national_id)
        if error is not None:
            LOGGER.warning(error.message)
            return False
        return True

    # ---- Lookup ----
    def find_hometown(self, national_id: str | None) -> List[Hometown]:
        """
        Hometowns registered for the first three digits of the id. Several
        hometowns may share a code; an empty list is not an error here.
        """
        value = self.normalize(national_id)
        self.validate(value)
        return self.hometown_repo.find_all_by_code(value[:3])

    def parse(self, national_id: str | None) -> NationalId:
        """
        Build a NationalId with every hometown registered for its prefix.

        Raises ParseError when no hometown has the prefix. The bundled
        hometowns.json covers only part of the registry; point IRANID_DATA_DIR
        at a complete hometowns.json in production.
        """
        value = self.normalize(national_id)
        hometowns = self.find_hometown(value)
        if not hometowns:
            raise ParseError(f'Unable to find hometown associated to the national ID: {value}')
        return NationalId(
            id=value,
            hometown_code=value[:3],
            personal_code=value[3:NATIONAL_ID_LENGTH - 1],
            control_digit=digit_at(value, NATIONAL_ID_LENGTH - 1),
            hometowns=tuple(hometowns),
        )


national_id_service = NationalIdService()
