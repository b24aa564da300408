"""Phone validation error taxonomy.

Every failure of the normalization engine is a ``PhoneValidationError``
subclass carrying an ``ErrorCode``.  All of them are local, deterministic,
caller-correctable failures tied to a single input; none are retryable.

Error codes
-----------
EMPTY_OR_NON_STRING_INPUT : input is not a string, or is empty
INVALID_LENGTH            : cleaned input is outside 10-14 characters
INVALID_COUNTRY_CODE      : international spelling without ``234``
INVALID_LOCAL_NUMBER      : 10-character local number missing a digit
INVALID_FORMAT            : bare subscriber number that is not 10 digits
INVALID_NIGERIAN_NUMBER   : canonical form failed the final shape check

Safety rule: messages never contain the raw number, only its digit count.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    EMPTY_OR_NON_STRING_INPUT = "empty_or_non_string_input"
    INVALID_LENGTH = "invalid_length"
    INVALID_COUNTRY_CODE = "invalid_country_code"
    INVALID_LOCAL_NUMBER = "invalid_local_number"
    INVALID_FORMAT = "invalid_format"
    INVALID_NIGERIAN_NUMBER = "invalid_nigerian_number"


class PhoneValidationError(ValueError):
    """Base class for every normalization failure."""

    code: ErrorCode = ErrorCode.INVALID_FORMAT

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EmptyOrNonStringInputError(PhoneValidationError, TypeError):
    """Raised when the input is not a string or is empty."""

    code = ErrorCode.EMPTY_OR_NON_STRING_INPUT


class InvalidLengthError(PhoneValidationError):
    """Raised when the cleaned input has an impossible length."""

    code = ErrorCode.INVALID_LENGTH


class InvalidCountryCodeError(PhoneValidationError):
    """Raised when an international spelling does not carry ``234``."""

    code = ErrorCode.INVALID_COUNTRY_CODE


class InvalidLocalNumberError(PhoneValidationError):
    """Raised for a local number missing its leading zero or a digit."""

    code = ErrorCode.INVALID_LOCAL_NUMBER


class InvalidFormatError(PhoneValidationError):
    """Raised for a bare subscriber number that is not 10 digits."""

    code = ErrorCode.INVALID_FORMAT


class InvalidNigerianNumberError(PhoneValidationError):
    """Raised when a canonical candidate is not ``+234`` + 10 digits."""

    code = ErrorCode.INVALID_NIGERIAN_NUMBER
