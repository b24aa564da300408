"""Derived-info builder: normalization + provider lookup + component split.

``build_info`` never raises.  Normalization failures are absorbed into
``PhoneInfo.is_valid`` with every derived field left empty.
"""
from __future__ import annotations

import logging

from ngphone.telco.errors import PhoneValidationError
from ngphone.telco.normalizer import canonicalize, detect_input_format
from ngphone.telco.prefixes import PrefixIndex
from ngphone.telco.types import NormalizedPhone, PhoneInfo, PhoneParts

logger = logging.getLogger(__name__)


def split_parts(canonical: NormalizedPhone, index: PrefixIndex) -> PhoneParts:
    """Split *canonical* into telco prefix, provider and subscriber digits.

    ``number`` is always the 10 digits after ``+234``, whether a 4- or a
    5-digit prefix matched.  An unallocated prefix yields ``prefix=""``
    and ``provider=None``.
    """
    matched = index.match(canonical.local)
    if matched is None:
        return PhoneParts(prefix="", provider=None, number=canonical.national_number)
    prefix, provider = matched
    return PhoneParts(prefix=prefix, provider=provider, number=canonical.national_number)


def invalid_info(raw: str) -> PhoneInfo:
    return PhoneInfo(
        original=raw,
        normalized="",
        provider=None,
        is_valid=False,
        format="e164",
        prefix="",
        number="",
    )


def build_info(raw: str, index: PrefixIndex) -> PhoneInfo:
    """Return the ``PhoneInfo`` record for *raw*.  Never raises."""
    try:
        canonical = canonicalize(raw)
    except PhoneValidationError as exc:
        # SAFETY: do not log raw value
        logger.debug("phone_info: invalid input (%s)", exc.code.value)
        return invalid_info(raw)

    parts = split_parts(canonical, index)
    return PhoneInfo(
        original=raw,
        normalized=canonical,
        provider=parts.provider,
        is_valid=True,
        format=detect_input_format(raw),
        prefix=parts.prefix,
        number=parts.number,
    )
