"""Nigerian phone number normalizer.

Converts any recognised spelling of a Nigerian mobile number to the
canonical form ``+234`` + 10 digits, then optionally renders it in a
requested output format.

Classification on the first character of the cleaned input
-----------------------------------------------------------
``+``        international spelling; must continue with ``234``
``2``        bare country code; must start with ``234``
``0``        local spelling; must be exactly 11 characters
other digit  bare subscriber number; must be exactly 10 characters

A 10-character local number (``0`` + 9 digits) is rejected rather than
repaired, because the missing digit cannot be recovered.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging

from ngphone.telco.constants import (
    CLEANUP_PATTERN,
    COUNTRY_CODE,
    INTERNATIONAL_PREFIX,
    LOCAL_LENGTH,
    MAX_CLEANED_LENGTH,
    MIN_CLEANED_LENGTH,
    SUBSCRIBER_LENGTH,
)
from ngphone.telco.errors import (
    EmptyOrNonStringInputError,
    InvalidCountryCodeError,
    InvalidFormatError,
    InvalidLengthError,
    InvalidLocalNumberError,
    PhoneValidationError,
)
from ngphone.telco.types import PHONE_FORMATS, NormalizedPhone, PhoneFormat, PhoneResult

logger = logging.getLogger(__name__)


def clean(raw: str) -> str:
    """Strip every character except digits and a leading ``+``."""
    cleaned = CLEANUP_PATTERN.sub("", raw)
    if cleaned.startswith("+"):
        return "+" + cleaned[1:].replace("+", "")
    return cleaned.replace("+", "")


def canonicalize(raw: str) -> NormalizedPhone:
    """Return *raw* in canonical ``+234`` form or raise ``PhoneValidationError``.

    This is the single fallible core behind ``normalize_phone`` and
    ``safe_normalize_phone``.
    """
    if not isinstance(raw, str) or len(raw) == 0:
        raise EmptyOrNonStringInputError("Phone number must be a non-empty string")

    cleaned = clean(raw)
    length = len(cleaned)
    if length < MIN_CLEANED_LENGTH or length > MAX_CLEANED_LENGTH:
        raise InvalidLengthError(f"Invalid phone number length: got {length} characters")

    first = cleaned[0]
    if first == "+":
        if not cleaned.startswith(INTERNATIONAL_PREFIX):
            raise InvalidCountryCodeError(
                f"Invalid country code: expected {INTERNATIONAL_PREFIX}"
            )
        candidate = cleaned
    elif first == "2":
        if not cleaned.startswith(COUNTRY_CODE):
            raise InvalidCountryCodeError(f"Invalid country code: expected {COUNTRY_CODE}")
        candidate = "+" + cleaned
    elif first == "0":
        if length == LOCAL_LENGTH:
            candidate = INTERNATIONAL_PREFIX + cleaned[1:]
        elif length == SUBSCRIBER_LENGTH:
            raise InvalidLocalNumberError(
                f"Invalid local number: expected {LOCAL_LENGTH} digits, got {length}"
            )
        else:
            raise InvalidLengthError(f"Invalid phone number length: got {length} characters")
    else:
        if length != SUBSCRIBER_LENGTH:
            raise InvalidFormatError(
                f"Invalid phone number format: expected {SUBSCRIBER_LENGTH} digits, got {length}"
            )
        candidate = INTERNATIONAL_PREFIX + cleaned

    # Final shape check: anything but +234 + 10 digits raises here.
    return NormalizedPhone(candidate)


def convert_format(canonical: NormalizedPhone, fmt: PhoneFormat = "e164") -> str:
    """Render a canonical number in *fmt*.

    ``international`` and ``e164`` are identical for Nigerian numbers.
    Raises ``ValueError`` for an unknown format tag.
    """
    if fmt not in PHONE_FORMATS:
        raise ValueError(f"Unknown phone format {fmt!r}; expected one of {sorted(PHONE_FORMATS)}")
    if fmt == "local":
        return canonical.local
    return str(canonical)


def normalize_phone(raw: str, fmt: PhoneFormat = "e164") -> str:
    """Return *raw* normalized and rendered in *fmt*.

    Raises a ``PhoneValidationError`` subclass when *raw* is not a
    Nigerian mobile number, and ``ValueError`` for an unknown *fmt*.
    """
    return convert_format(canonicalize(raw), fmt)


def safe_normalize_phone(raw: str, fmt: PhoneFormat = "e164") -> PhoneResult[str]:
    """Return a ``PhoneResult`` instead of raising on invalid input."""
    try:
        return PhoneResult.success(normalize_phone(raw, fmt))
    except PhoneValidationError as exc:
        # SAFETY: do not log raw value
        logger.debug("phone_normalizer: rejected input (%s)", exc.code.value)
        return PhoneResult.failure(str(exc))


def detect_input_format(raw: str) -> PhoneFormat:
    """Tag the spelling of *raw* from its leading character."""
    if raw.startswith("+"):
        return "international"
    if raw.startswith("0"):
        return "local"
    return "e164"


def is_normalized_phone(value: object) -> bool:
    """Return True if *value* is already in canonical ``+234`` form."""
    try:
        NormalizedPhone(value)  # type: ignore[arg-type]
    except PhoneValidationError:
        return False
    return True


def is_validated_phone(value: object) -> bool:
    """Return True if *value* normalizes to a Nigerian mobile number."""
    try:
        canonicalize(value)  # type: ignore[arg-type]
    except PhoneValidationError:
        return False
    return True
