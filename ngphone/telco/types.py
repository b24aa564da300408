"""Value types shared across the telco package.

Field contract for ``PhoneInfo``
--------------------------------
original   : input exactly as supplied by the caller
normalized : canonical ``+234`` form, or ``""`` when the input is invalid
provider   : detected ``Provider`` or ``None``
is_valid   : whether normalization succeeded
format     : format of the original input (``local`` / ``international`` / ``e164``)
prefix     : matched 4- or 5-digit telco prefix, or ``""``
number     : 10 subscriber digits after the country code, or ``""``
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Generic, Literal, TypeVar

from ngphone.telco.constants import E164_PATTERN, INTERNATIONAL_PREFIX, Provider
from ngphone.telco.errors import InvalidNigerianNumberError

PhoneFormat = Literal["local", "international", "e164"]
PHONE_FORMATS: frozenset[str] = frozenset({"local", "international", "e164"})

T = TypeVar("T")


class NormalizedPhone(str):
    """A string proven to be in canonical ``+234`` + 10 digits form.

    The only way to obtain one is through this constructor, which raises
    ``InvalidNigerianNumberError`` for anything else.
    """

    __slots__ = ()

    def __new__(cls, value: str) -> NormalizedPhone:
        if isinstance(value, NormalizedPhone):
            return value
        if not isinstance(value, str) or not E164_PATTERN.match(value):
            raise InvalidNigerianNumberError(
                f"Invalid Nigerian phone number: expected {INTERNATIONAL_PREFIX} "
                "followed by 10 digits"
            )
        return super().__new__(cls, value)

    @property
    def national_number(self) -> str:
        """The 10 subscriber digits after the country code."""
        return str(self[len(INTERNATIONAL_PREFIX):])

    @property
    def local(self) -> str:
        """Domestic dialing form: ``0`` + 10 digits."""
        return "0" + self.national_number


@dataclass(frozen=True)
class PhoneInfo:
    """Derived, read-only description of one raw input."""

    original: str
    normalized: str
    provider: Provider | None
    is_valid: bool
    format: PhoneFormat
    prefix: str
    number: str

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["normalized"] = str(self.normalized)
        data["provider"] = self.provider.value if self.provider else None
        return data


@dataclass(frozen=True)
class PhoneParts:
    """Components of a canonical number."""

    prefix: str
    provider: Provider | None
    number: str


@dataclass(frozen=True)
class PhoneResult(Generic[T]):
    """Tagged outcome of an operation that absorbs validation failures."""

    ok: bool
    value: T | None = None
    error: str | None = None

    @classmethod
    def success(cls, value: T) -> PhoneResult[T]:
        return cls(ok=True, value=value, error=None)

    @classmethod
    def failure(cls, message: str) -> PhoneResult[T]:
        return cls(ok=False, value=None, error=message)


@dataclass(frozen=True)
class ProviderInfo:
    provider: Provider
    prefixes: tuple[str, ...]
    description: str


@dataclass(frozen=True)
class CacheStats:
    """Diagnostic sizes of the service-owned tables."""

    cache_size: int
    cache_capacity: int
    pattern_cache_size: int
    prefix_map_size: int
