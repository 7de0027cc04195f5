"""
domain-primitives: unit tests for countries

File: tests/unit/domain/geo/test_country.py

Purpose
- Validate ISO country resolution, free-text country names and display names.

What this test file should cover
- Case-insensitive ISO codes resolved against the CLDR/ISO registry.
- Localized display names with English fallback.
- country_of dispatch and JSON decoding of the Country union.
- The cached list of all ISO countries.
- Pluggable name providers.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pytest
from structlog.testing import capture_logs

from domain_primitives import (
    InvalidFormat,
    IsoCountry,
    NamedCountry,
    country_of,
    iso_countries,
)
from domain_primitives.config import get_settings
from domain_primitives.domain.geo.country import (
    country_display_name,
    country_from_json_value,
    resolves_to_country,
    united_states,
)
from tests.support import canonical, invalid


class _StaticNames:
    def __init__(self, names: dict[str, dict[str, str]]) -> None:
        self._names = names

    def iso_codes(self) -> Iterable[str]:
        return sorted({code for by_code in self._names.values() for code in by_code})

    def display_name(self, iso_code: str, locale: str) -> str | None:
        return self._names.get(locale, {}).get(iso_code)


def test_iso_codes_are_upper_cased() -> None:
    assert IsoCountry("fi").iso_code == "FI"
    assert IsoCountry(" Fi ") == IsoCountry("FI")


@pytest.mark.parametrize("raw", ["XX", "ZZ", "FIN", "F", "", "åä", "12"])
def test_unknown_or_malformed_codes_are_rejected(raw: str) -> None:
    with pytest.raises(InvalidFormat, match="invalid ISO country code"):
        IsoCountry(raw)


def test_display_names_are_localized() -> None:
    finland = IsoCountry("FI")
    assert finland.display_name("en") == "Finland"
    assert finland.display_name("de") == "Finnland"
    assert finland.display_name("fi") == "Suomi"
    assert finland.display_name("sv-SE") == "Finland"


def test_display_name_defaults_to_configured_locale(tmp_path: Path) -> None:
    (tmp_path / "domain_primitives.toml").write_text('display_locale = "de"\n', encoding="utf-8")
    get_settings.cache_clear()
    assert IsoCountry("FI").display_name() == "Finnland"


def test_display_name_falls_back_to_english() -> None:
    provider = _StaticNames({"en": {"FI": "Finland"}, "xx": {}})
    assert IsoCountry("FI").display_name("xx", provider=provider) == "Finland"


def test_unknown_display_locale_raises() -> None:
    with pytest.raises(ValueError, match="unknown display locale"):
        IsoCountry("FI").display_name("not-a-locale")


def test_resolution_uses_the_given_provider() -> None:
    provider = _StaticNames({"en": {"FI": "Finland", "QQ": "QQ", "QB": "  "}})
    assert resolves_to_country("FI", provider)
    assert not resolves_to_country("QQ", provider)
    assert not resolves_to_country("QB", provider)
    assert not resolves_to_country("SE", provider)


@pytest.mark.parametrize(("raw", "expected"), canonical("country_name"))
def test_named_countries(raw: str, expected: str) -> None:
    country = NamedCountry(raw)
    assert country.name == expected
    assert country.display_name("de") == expected


@pytest.mark.parametrize("raw", invalid("country_name"))
def test_invalid_named_countries(raw: str) -> None:
    with pytest.raises(InvalidFormat, match="invalid country name"):
        NamedCountry(raw)


def test_country_of_prefers_iso_codes() -> None:
    assert country_of("fi") == IsoCountry("FI")
    assert country_of("Finland") == NamedCountry("Finland")
    assert country_of("åäö") == NamedCountry("åäö")
    with pytest.raises(InvalidFormat, match="invalid country"):
        country_of("123")


@pytest.mark.parametrize("raw", ["FI", "Fi", " se ", "us"])
def test_named_countries_reject_iso_codes(raw: str) -> None:
    with pytest.raises(InvalidFormat, match="invalid country name"):
        NamedCountry(raw)
    assert not NamedCountry.is_valid(raw)
    assert isinstance(country_of(raw), IsoCountry)


def test_named_countries_keep_unknown_two_letter_text() -> None:
    assert NamedCountry("Xq") == country_of("Xq")
    assert NamedCountry("Xq") != IsoCountry("FI")


def test_named_country_json_decodes_to_the_same_variant() -> None:
    for country in (NamedCountry("Atlantis"), NamedCountry("Xq"), IsoCountry("FI")):
        assert country_from_json_value(country.to_json_value()) == country


def test_country_json_decoding() -> None:
    assert country_from_json_value("SE") == IsoCountry("SE")
    assert country_from_json_value("Atlantis") == NamedCountry("Atlantis")
    with pytest.raises(InvalidFormat):
        country_from_json_value(246)
    assert IsoCountry.from_json('"fi"') == IsoCountry("FI")


def test_country_display_name_dispatch() -> None:
    assert country_display_name(IsoCountry("SE"), "en") == "Sweden"
    assert country_display_name(NamedCountry("Atlantis"), "en") == "Atlantis"


def test_iso_countries_is_sorted_cached_and_complete() -> None:
    iso_countries.cache_clear()
    with capture_logs() as logs:
        first = iso_countries()
        second = iso_countries()

    assert first is second
    codes = [country.iso_code for country in first]
    assert codes == sorted(codes)
    assert {"FI", "SE", "US", "DE", "JP"} <= set(codes)
    assert len(codes) > 200
    assert [entry["event"] for entry in logs] == ["iso_country_cache_built"]
    assert logs[0]["country_count"] == len(first)


def test_united_states_constant() -> None:
    assert united_states() == IsoCountry("US")
    assert united_states() is united_states()
