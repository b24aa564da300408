"""PhoneService: the owned state and public operations of the telco package.

One service instance owns:

* the ``PrefixIndex`` built from the provider table (read-only),
* the ``LRUCache`` of derived ``PhoneInfo`` records,
* a small cache of compiled per-format validation patterns.

Independent instances share nothing, so tests and callers can hold
isolated caches.  ``get_phone_service()`` returns the process-wide
instance configured from settings; ``get_phone_service.cache_clear()``
tears it down.

Cache keying
------------
``cache_key="raw"`` (default) keys the info cache by the raw input, so
``"0803 123 4567"`` and ``"08031234567"`` occupy separate slots.
``cache_key="canonical"`` keys valid inputs by their canonical form
instead; invalid inputs keep their raw key.  A hit for a different
spelling is returned as a copy carrying that spelling in ``original`` and
``format``.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import dataclasses
import logging
import random
import re
import threading
from functools import lru_cache
from typing import Iterable, Literal

from ngphone.core.settings import Settings, get_settings
from ngphone.telco.cache import LRUCache
from ngphone.telco.constants import (
    FORMAT_PATTERNS,
    LOCAL_LENGTH,
    PROVIDER_DESCRIPTIONS,
    PROVIDER_PREFIXES,
    Provider,
)
from ngphone.telco.errors import PhoneValidationError
from ngphone.telco.info import build_info, invalid_info, split_parts
from ngphone.telco.normalizer import (
    canonicalize,
    detect_input_format,
    normalize_phone,
    safe_normalize_phone,
)
from ngphone.telco.prefixes import PrefixIndex
from ngphone.telco.types import (
    PHONE_FORMATS,
    CacheStats,
    NormalizedPhone,
    PhoneFormat,
    PhoneInfo,
    PhoneParts,
    PhoneResult,
    ProviderInfo,
)

logger = logging.getLogger(__name__)

CacheKeyMode = Literal["raw", "canonical"]
_CACHE_KEY_MODES: frozenset[str] = frozenset({"raw", "canonical"})

DEFAULT_CACHE_CAPACITY = 1000


def all_providers() -> tuple[Provider, ...]:
    """Return every known provider in table order."""
    return tuple(PROVIDER_PREFIXES.keys())


def provider_info(provider: Provider | str) -> ProviderInfo:
    """Return prefixes and description for *provider*.

    Accepts the enum, its value (``"9MOBILE"``) or its name
    (``"NINE_MOBILE"``), in any case.  Raises ``KeyError`` for an unknown
    provider.
    """
    if isinstance(provider, Provider):
        key = provider
    else:
        wanted = str(provider).upper()
        try:
            key = Provider(wanted)
        except ValueError:
            try:
                key = Provider[wanted]
            except KeyError:
                raise KeyError(f"Unknown provider: {provider!r}") from None
    return ProviderInfo(
        provider=key,
        prefixes=PROVIDER_PREFIXES[key],
        description=PROVIDER_DESCRIPTIONS[key],
    )


class PhoneService:
    """Normalize, validate, classify and cache Nigerian mobile numbers.

    Parameters
    ----------
    capacity:
        Maximum number of ``PhoneInfo`` records held by the info cache.
    cache_key:
        ``"raw"`` or ``"canonical"``; see the module docstring.
    rng:
        Random source for ``generate_random``.  Defaults to a fresh
        ``random.Random``; pass a seeded one for reproducible output.
    """

    def __init__(
        self,
        *,
        capacity: int = DEFAULT_CACHE_CAPACITY,
        cache_key: CacheKeyMode = "raw",
        rng: random.Random | None = None,
    ) -> None:
        if cache_key not in _CACHE_KEY_MODES:
            raise ValueError(
                f"cache_key must be one of {sorted(_CACHE_KEY_MODES)}; got {cache_key!r}"
            )
        self.index = PrefixIndex()
        self.cache: LRUCache[str, PhoneInfo] = LRUCache(capacity)
        self.cache_key = cache_key
        self._rng = rng or random.Random()
        self._patterns: dict[str, re.Pattern[str]] = {}
        self._patterns_lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> PhoneService:
        settings = settings or get_settings()
        return cls(capacity=settings.cache_capacity, cache_key=settings.cache_key)

    # -- normalization ------------------------------------------------------

    def normalize(self, raw: str, fmt: PhoneFormat = "e164") -> str:
        """Return *raw* in *fmt*; raises ``PhoneValidationError`` on bad input."""
        return normalize_phone(raw, fmt)

    def safe_normalize(self, raw: str, fmt: PhoneFormat = "e164") -> PhoneResult[str]:
        """Like ``normalize`` but returns a ``PhoneResult`` instead of raising."""
        return safe_normalize_phone(raw, fmt)

    def to_local(self, raw: str) -> str:
        return normalize_phone(raw, "local")

    def to_international(self, raw: str) -> str:
        return normalize_phone(raw, "international")

    def is_valid(self, raw: str) -> bool:
        try:
            canonicalize(raw)
        except PhoneValidationError:
            return False
        return True

    def matches_format(self, raw: str, fmt: PhoneFormat) -> bool:
        """Return True if *raw* normalizes and its *fmt* rendering has that shape."""
        result = safe_normalize_phone(raw, fmt)
        if not result.ok or result.value is None:
            return False
        return self._pattern(fmt).match(result.value) is not None

    def _pattern(self, fmt: str) -> re.Pattern[str]:
        if fmt not in PHONE_FORMATS:
            raise ValueError(f"Unknown phone format {fmt!r}; expected one of {sorted(PHONE_FORMATS)}")
        with self._patterns_lock:
            pattern = self._patterns.get(fmt)
            if pattern is None:
                pattern = re.compile(FORMAT_PATTERNS[fmt])
                self._patterns[fmt] = pattern
            return pattern

    # -- classification -----------------------------------------------------

    def detect_provider(self, raw: str) -> Provider | None:
        """Return the provider of *raw*, or ``None``.  Never raises."""
        try:
            canonical = canonicalize(raw)
        except PhoneValidationError:
            return None
        matched = self.index.match(canonical.local)
        return matched[1] if matched else None

    def provider_for_prefix(self, prefix: str) -> Provider | None:
        return self.index.get(prefix)

    def split_parts(self, raw: str) -> PhoneParts:
        """Return prefix, provider and subscriber digits; raises on bad input."""
        return split_parts(canonicalize(raw), self.index)

    def get_info(self, raw: str) -> PhoneInfo:
        """Return the cached ``PhoneInfo`` for *raw*, building it on a miss.

        Never raises.  Repeated calls with the spelling that filled the
        cache slot return the same object.
        """
        if not isinstance(raw, str):
            return invalid_info(raw)
        key = self._info_key(raw)
        info = self.cache.get_or_set(key, lambda: self._build_info(raw))
        if info.original != raw:
            return dataclasses.replace(info, original=raw, format=detect_input_format(raw))
        return info

    def _info_key(self, raw: str) -> str:
        if self.cache_key == "canonical":
            try:
                return str(canonicalize(raw))
            except PhoneValidationError:
                pass
        return raw

    def _build_info(self, raw: str) -> PhoneInfo:
        logger.debug("phone_info: cache miss (length=%d)", len(raw))
        return build_info(raw, self.index)

    # -- generation ---------------------------------------------------------

    def generate_random(self, provider: Provider | str | None = None) -> NormalizedPhone:
        """Return a random valid number, from *provider* when given.

        The provider (if unconstrained), the prefix and every remaining
        digit are each chosen uniformly at random.
        """
        if provider is None:
            chosen = self._rng.choice(all_providers())
        else:
            chosen = provider_info(provider).provider
        prefix = self._rng.choice(self.index.prefixes_for(chosen))
        digits = "".join(
            str(self._rng.randrange(10)) for _ in range(LOCAL_LENGTH - len(prefix))
        )
        return canonicalize(prefix + digits)

    # -- batch --------------------------------------------------------------

    def batch_normalize(
        self,
        raws: Iterable[str],
        fmt: PhoneFormat = "e164",
    ) -> list[PhoneResult[str]]:
        """Safe-normalize each item independently, preserving order."""
        return [safe_normalize_phone(raw, fmt) for raw in raws]

    def batch_detect_provider(self, raws: Iterable[str]) -> list[Provider | None]:
        return [self.detect_provider(raw) for raw in raws]

    def batch_validate(self, raws: Iterable[str]) -> list[bool]:
        return [self.is_valid(raw) for raw in raws]

    # -- diagnostics --------------------------------------------------------

    def cache_stats(self) -> CacheStats:
        with self._patterns_lock:
            pattern_cache_size = len(self._patterns)
        return CacheStats(
            cache_size=self.cache.size,
            cache_capacity=self.cache.capacity,
            pattern_cache_size=pattern_cache_size,
            prefix_map_size=len(self.index),
        )

    def clear_caches(self) -> None:
        """Empty the info cache and the compiled-pattern cache."""
        self.cache.clear()
        with self._patterns_lock:
            self._patterns.clear()
        logger.info("phone_service: caches cleared")


@lru_cache(maxsize=1)
def get_phone_service() -> PhoneService:
    """Return the process-wide ``PhoneService`` configured from settings."""
    return PhoneService.from_settings()
