"""Prefix index: flat prefix -> provider map with longest-prefix matching.

Built once from the provider table.  Lookups never raise; an unknown
prefix simply resolves to ``None``.
"""
from __future__ import annotations

import logging
from typing import Mapping

from ngphone.telco.constants import PROVIDER_PREFIXES, Provider

logger = logging.getLogger(__name__)

# Probe order for longest-prefix matching.
_PREFIX_LENGTHS: tuple[int, ...] = (5, 4)


class PrefixIndex:
    """Read-only mapping from 4/5-digit local prefix to ``Provider``."""

    def __init__(self, table: Mapping[Provider, tuple[str, ...]] = PROVIDER_PREFIXES) -> None:
        prefixes: dict[str, Provider] = {}
        for provider, provider_prefixes in table.items():
            for prefix in provider_prefixes:
                owner = prefixes.get(prefix)
                if owner is not None and owner is not provider:
                    raise ValueError(
                        f"Prefix {prefix!r} declared by both {owner.value} and {provider.value}"
                    )
                prefixes[prefix] = provider
        self._prefixes = prefixes
        self._table = table
        logger.debug("prefix_index: built with %d prefixes", len(prefixes))

    def __len__(self) -> int:
        return len(self._prefixes)

    def __contains__(self, prefix: object) -> bool:
        return prefix in self._prefixes

    def get(self, prefix: str) -> Provider | None:
        """Return the provider that owns exactly *prefix*, or ``None``."""
        return self._prefixes.get(prefix)

    def match(self, local: str) -> tuple[str, Provider] | None:
        """Return ``(prefix, provider)`` for the longest prefix of *local*.

        *local* is a domestic-form number (``0`` + 10 digits).  The
        5-character prefix is probed before the 4-character one.
        """
        for length in _PREFIX_LENGTHS:
            candidate = local[:length]
            provider = self._prefixes.get(candidate)
            if provider is not None:
                return candidate, provider
        return None

    def prefixes_for(self, provider: Provider) -> tuple[str, ...]:
        """Return the declared prefixes of *provider* in table order."""
        return tuple(self._table[Provider(provider)])
