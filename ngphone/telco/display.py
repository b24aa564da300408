"""Human-readable rendering of Nigerian numbers.

The engine decides validity; ``phonenumbers`` only supplies the grouping
used for display (``0803 123 4567`` / ``+234 803 123 4567``).

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
from typing import Literal

import phonenumbers

from ngphone.telco.normalizer import canonicalize

logger = logging.getLogger(__name__)

_REGION = "NG"

DisplayStyle = Literal["national", "international"]

_STYLES: dict[str, int] = {
    "national": phonenumbers.PhoneNumberFormat.NATIONAL,
    "international": phonenumbers.PhoneNumberFormat.INTERNATIONAL,
}


def format_for_display(raw: str, style: DisplayStyle = "national") -> str:
    """Return *raw* grouped for display in *style*.

    Raises a ``PhoneValidationError`` subclass when *raw* is not a
    Nigerian mobile number, and ``ValueError`` for an unknown *style*.
    """
    if style not in _STYLES:
        raise ValueError(f"Unknown display style {style!r}; expected one of {sorted(_STYLES)}")

    canonical = canonicalize(raw)
    parsed = phonenumbers.parse(str(canonical), _REGION)
    logger.debug("display: rendering %s style (length=%d)", style, len(canonical))
    return phonenumbers.format_number(parsed, _STYLES[style])
