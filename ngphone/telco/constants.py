"""Nigerian mobile network operators and their allocated number prefixes.

The provider table is static data: built once at import and read-only
thereafter.  Prefixes are 4 or 5 digits in local form (``0803``,
``07025``).  A 5-digit prefix may coexist with a shorter string that is
not itself an entry (``0702`` is unallocated while ``07025`` and ``07026``
belong to MTN), so lookups must try the longer prefix first.

Validation patterns are compiled once here and shared by the engine.
"""
from __future__ import annotations

import re
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Provider(str, Enum):
    MTN = "MTN"
    GLO = "GLO"
    AIRTEL = "AIRTEL"
    NINE_MOBILE = "9MOBILE"


COUNTRY_CODE = "234"
INTERNATIONAL_PREFIX = "+" + COUNTRY_CODE

# Cleaned input must fall inside this closed range of characters.
MIN_CLEANED_LENGTH = 10
MAX_CLEANED_LENGTH = 14

LOCAL_LENGTH = 11
SUBSCRIBER_LENGTH = 10

# ---------------------------------------------------------------------------
# Provider table
# ---------------------------------------------------------------------------

PROVIDER_PREFIXES: Mapping[Provider, tuple[str, ...]] = MappingProxyType({
    Provider.MTN: (
        "0703", "0704", "0706", "07025", "07026",
        "0803", "0806", "0810", "0813", "0814", "0816",
        "0903", "0906", "0913", "0916",
    ),
    Provider.GLO: ("0705", "0805", "0807", "0811", "0815", "0905", "0915"),
    Provider.AIRTEL: (
        "0701", "0708", "0802", "0808", "0812",
        "0901", "0902", "0907", "0912",
    ),
    Provider.NINE_MOBILE: ("0809", "0817", "0818", "0908", "0909"),
})

PROVIDER_DESCRIPTIONS: Mapping[Provider, str] = MappingProxyType({
    Provider.MTN: "MTN Nigeria",
    Provider.GLO: "Globacom Nigeria",
    Provider.AIRTEL: "Airtel Nigeria",
    Provider.NINE_MOBILE: "9mobile Nigeria",
})

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

# Anything that is not a digit or a plus sign; leading-plus handling lives
# in the normalizer.
CLEANUP_PATTERN = re.compile(r"[^\d+]")

E164_PATTERN = re.compile(r"^\+234\d{10}$")
INTERNATIONAL_PATTERN = re.compile(r"^\+234\d{10}$")
LOCAL_PATTERN = re.compile(r"^0\d{10}$")

# Pattern source per output format, compiled lazily by PhoneService.
FORMAT_PATTERNS: Mapping[str, str] = MappingProxyType({
    "local": LOCAL_PATTERN.pattern,
    "international": INTERNATIONAL_PATTERN.pattern,
    "e164": E164_PATTERN.pattern,
})

# Cheap shape checks for form validation; these do not normalize.
VALIDATION_SCHEMAS: Mapping[str, Mapping[str, object]] = MappingProxyType({
    "phone": MappingProxyType({
        "pattern": re.compile(r"^(\+234|234|0)?[789][01]\d{8}$"),
        "message": "Invalid Nigerian phone number format",
    }),
    "prefix": MappingProxyType({
        "pattern": re.compile(r"^0[789][01]\d{1,2}$"),
        "message": "Invalid phone prefix format",
    }),
})
