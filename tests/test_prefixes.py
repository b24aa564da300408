"""Tests for the provider table and ngphone.telco.prefixes.PrefixIndex.

Covers:
- No prefix is declared by two providers
- Every declared prefix is 4 or 5 digits and matches the prefix schema
- Exact lookup and longest-prefix matching (5-digit before 4-digit)
- Duplicate declarations are rejected at build time
- Provider metadata helpers
"""
from __future__ import annotations

import pytest

from ngphone.telco.constants import (
    PROVIDER_DESCRIPTIONS,
    PROVIDER_PREFIXES,
    VALIDATION_SCHEMAS,
    Provider,
)
from ngphone.telco.prefixes import PrefixIndex
from ngphone.telco.service import all_providers, provider_info

_ALL_PREFIXES = sorted(p for prefixes in PROVIDER_PREFIXES.values() for p in prefixes)


# ===========================================================================
# Provider table invariants
# ===========================================================================


class TestProviderTable:
    def test_prefixes_are_unique_across_providers(self) -> None:
        assert len(_ALL_PREFIXES) == len(set(_ALL_PREFIXES))

    @pytest.mark.parametrize("prefix", _ALL_PREFIXES)
    def test_prefix_is_four_or_five_digits(self, prefix: str) -> None:
        assert prefix.isdigit()
        assert len(prefix) in (4, 5)

    @pytest.mark.parametrize("prefix", _ALL_PREFIXES)
    def test_prefix_matches_schema(self, prefix: str) -> None:
        assert VALIDATION_SCHEMAS["prefix"]["pattern"].match(prefix)

    def test_every_provider_has_a_description(self) -> None:
        assert set(PROVIDER_DESCRIPTIONS) == set(Provider)

    def test_prefix_counts(self) -> None:
        assert len(PROVIDER_PREFIXES[Provider.MTN]) == 15
        assert len(PROVIDER_PREFIXES[Provider.GLO]) == 7
        assert len(PROVIDER_PREFIXES[Provider.AIRTEL]) == 9
        assert len(PROVIDER_PREFIXES[Provider.NINE_MOBILE]) == 5

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            PROVIDER_PREFIXES[Provider.MTN] = ("0800",)  # type: ignore[index]

    def test_nine_mobile_value(self) -> None:
        assert Provider.NINE_MOBILE.value == "9MOBILE"
        assert Provider("9MOBILE") is Provider.NINE_MOBILE


class TestPhoneSchema:
    @pytest.mark.parametrize(
        "value",
        ["08031234567", "+2348031234567", "2348031234567", "8031234567"],
    )
    def test_accepts_common_spellings(self, value: str) -> None:
        assert VALIDATION_SCHEMAS["phone"]["pattern"].match(value)

    def test_rejects_landline_range(self) -> None:
        assert not VALIDATION_SCHEMAS["phone"]["pattern"].match("01234567890")

    def test_messages(self) -> None:
        assert VALIDATION_SCHEMAS["phone"]["message"] == "Invalid Nigerian phone number format"
        assert VALIDATION_SCHEMAS["prefix"]["message"] == "Invalid phone prefix format"


# ===========================================================================
# PrefixIndex
# ===========================================================================


class TestPrefixIndex:
    def setup_method(self) -> None:
        self.index = PrefixIndex()

    def test_size_matches_table(self) -> None:
        assert len(self.index) == len(_ALL_PREFIXES) == 36

    def test_contains(self) -> None:
        assert "07025" in self.index
        assert "0702" not in self.index

    @pytest.mark.parametrize(
        ("prefix", "provider"),
        [
            ("0803", Provider.MTN),
            ("0805", Provider.GLO),
            ("0802", Provider.AIRTEL),
            ("0809", Provider.NINE_MOBILE),
            ("07026", Provider.MTN),
        ],
    )
    def test_get_exact(self, prefix: str, provider: Provider) -> None:
        assert self.index.get(prefix) is provider

    def test_get_unknown(self) -> None:
        assert self.index.get("9999") is None

    def test_match_prefers_five_digit_prefix(self) -> None:
        assert self.index.match("07025123456") == ("07025", Provider.MTN)

    def test_match_falls_back_to_four_digit_prefix(self) -> None:
        assert self.index.match("08031234567") == ("0803", Provider.MTN)

    def test_match_unallocated_four_digit_prefix_under_five_digit_entries(self) -> None:
        assert self.index.match("07021234567") is None

    def test_match_unknown(self) -> None:
        assert self.index.match("08001234567") is None

    def test_five_digit_entry_wins_over_shorter_entry(self) -> None:
        table = {
            Provider.GLO: ("0805",),
            Provider.MTN: ("08059",),
        }
        index = PrefixIndex(table)
        assert index.match("08059123456") == ("08059", Provider.MTN)
        assert index.match("08051234567") == ("0805", Provider.GLO)

    def test_duplicate_prefix_rejected(self) -> None:
        table = {
            Provider.MTN: ("0803",),
            Provider.GLO: ("0803",),
        }
        with pytest.raises(ValueError, match="0803"):
            PrefixIndex(table)

    def test_prefixes_for(self) -> None:
        assert self.index.prefixes_for(Provider.NINE_MOBILE) == (
            "0809", "0817", "0818", "0908", "0909",
        )


# ===========================================================================
# Provider metadata helpers
# ===========================================================================


class TestProviderInfo:
    def test_all_providers(self) -> None:
        assert all_providers() == (
            Provider.MTN, Provider.GLO, Provider.AIRTEL, Provider.NINE_MOBILE,
        )

    def test_info_by_enum(self) -> None:
        info = provider_info(Provider.MTN)
        assert info.provider is Provider.MTN
        assert info.description == "MTN Nigeria"
        assert "0803" in info.prefixes

    def test_info_by_value(self) -> None:
        assert provider_info("9MOBILE").description == "9mobile Nigeria"

    def test_info_by_name(self) -> None:
        assert provider_info("NINE_MOBILE").provider is Provider.NINE_MOBILE

    @pytest.mark.parametrize(
        "given, expected",
        [
            ("mtn", Provider.MTN),
            ("9mobile", Provider.NINE_MOBILE),
            ("nine_mobile", Provider.NINE_MOBILE),
            ("Airtel", Provider.AIRTEL),
        ],
    )
    def test_lookup_ignores_case(self, given: str, expected: Provider) -> None:
        assert provider_info(given).provider is expected

    def test_unknown_provider(self) -> None:
        with pytest.raises(KeyError):
            provider_info("VODAFONE")
