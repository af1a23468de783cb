"""Exceptions raised by the identifier services."""


class IranIdError(Exception):
    """Base class for every error raised by iranid."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(IranIdError):
    """The input is not a valid identifier."""


class EmptyInputError(ValidationError):
    """None, empty or whitespace-only input."""


class FormatError(ValidationError):
    """Wrong length, non-digit characters or a repeated-digit value."""


class BlacklistError(ValidationError):
    """Well-formed value that is known to be fake."""


class ChecksumError(ValidationError):
    """Digits are well-formed but the control digit does not match."""


class ParseError(IranIdError):
    """The identifier is valid but no reference record matches it."""
