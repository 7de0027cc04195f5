"""
Countries: ISO 3166-1 alpha-2 codes and free-text country names.

An :class:`IsoCountry` only accepts codes that the country name provider knows
and can name. The default provider combines the pycountry registry with CLDR
display names from Babel. A :class:`NamedCountry` holds user-entered text for
places without a usable code; it is checked for length and characters and
must not itself be a known ISO code.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final, Protocol, assert_never

import pycountry
import structlog
from babel import Locale, UnknownLocaleError

from domain_primitives.config import get_settings
from domain_primitives.domain.base import StringPrimitive
from domain_primitives.errors import InvalidFormat
from domain_primitives.validators import is_iso_country_code_shape, is_valid_country_name
from domain_primitives.validators.canonical import (
    canonicalize_iso_country_code,
    strip_whitespace,
)

COUNTRY_KIND: Final[str] = "country"
# Locale that decides whether a code resolves; independent of settings.
RESOLUTION_LOCALE: Final[str] = "en"

_logger = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)


class CountryNameProvider(Protocol):
    """Source of ISO country codes and their localized display names."""

    def iso_codes(self) -> Iterable[str]: ...

    def display_name(self, iso_code: str, locale: str) -> str | None: ...


class CldrCountryNameProvider:
    """Country names from CLDR via Babel, restricted to the ISO 3166-1 registry."""

    def iso_codes(self) -> tuple[str, ...]:
        return tuple(sorted(_registry_codes()))

    def display_name(self, iso_code: str, locale: str) -> str | None:
        if iso_code not in _registry_codes():
            return None
        return _babel_locale(locale).territories.get(iso_code)


@functools.cache
def default_country_name_provider() -> CountryNameProvider:
    return CldrCountryNameProvider()


def resolves_to_country(iso_code: str, provider: CountryNameProvider | None = None) -> bool:
    """Return whether ``iso_code`` has a non-blank display name other than the code itself."""
    active = default_country_name_provider() if provider is None else provider
    name = active.display_name(iso_code, RESOLUTION_LOCALE)
    return bool(name) and not name.isspace() and name != iso_code


@dataclass(frozen=True, slots=True)
class IsoCountry(StringPrimitive):
    """A country identified by its upper-case ISO 3166-1 alpha-2 code."""

    KIND = "ISO country code"

    @classmethod
    def canonicalize(cls, raw: str) -> str:
        return canonicalize_iso_country_code(raw)

    @classmethod
    def validate(cls, canonical: str) -> bool:
        return is_iso_country_code_shape(canonical) and resolves_to_country(canonical)

    @property
    def iso_code(self) -> str:
        return self.value

    def display_name(
        self,
        locale: str | None = None,
        *,
        provider: CountryNameProvider | None = None,
    ) -> str:
        """Return the country name in ``locale``, defaulting to the configured display locale.

        Falls back to the English name when the locale has no name for the
        country.
        """
        active = default_country_name_provider() if provider is None else provider
        resolved_locale = get_settings().display_locale if locale is None else locale
        name = active.display_name(self.value, resolved_locale)
        if name:
            return name
        return active.display_name(self.value, RESOLUTION_LOCALE) or self.value


@dataclass(frozen=True, slots=True)
class NamedCountry(StringPrimitive):
    """A country given as free text, for example a historical or disputed name.

    Text that is also a resolvable ISO code is rejected; such text is an
    :class:`IsoCountry`.
    """

    KIND = "country name"

    @classmethod
    def canonicalize(cls, raw: str) -> str:
        return strip_whitespace(raw)

    @classmethod
    def validate(cls, canonical: str) -> bool:
        return is_valid_country_name(canonical) and not IsoCountry.is_valid(canonical)

    @property
    def name(self) -> str:
        return self.value

    def display_name(self, locale: str | None = None) -> str:
        return self.value


Country = IsoCountry | NamedCountry


def country_of(text: object) -> Country:
    """Return an :class:`IsoCountry` if ``text`` is a known code, else a :class:`NamedCountry`."""
    if IsoCountry.is_valid(text):
        return IsoCountry(text)  # type: ignore[arg-type]
    if NamedCountry.is_valid(text):
        return NamedCountry(text)  # type: ignore[arg-type]
    raise InvalidFormat(COUNTRY_KIND, text)


def country_from_json_value(obj: object) -> Country:
    if not isinstance(obj, str):
        raise InvalidFormat(COUNTRY_KIND, obj)
    return country_of(obj)


def country_display_name(country: Country, locale: str | None = None) -> str:
    match country:
        case IsoCountry():
            return country.display_name(locale)
        case NamedCountry():
            return country.display_name(locale)
        case _:
            assert_never(country)


@functools.cache
def iso_countries() -> tuple[IsoCountry, ...]:
    """Return every resolvable ISO country, sorted by code.

    Built on first use and cached for the life of the process.
    """
    provider = default_country_name_provider()
    countries = tuple(
        IsoCountry(code)
        for code in sorted(provider.iso_codes())
        if resolves_to_country(code, provider)
    )
    _logger.debug("iso_country_cache_built", country_count=len(countries))
    return countries


@functools.cache
def united_states() -> IsoCountry:
    return IsoCountry("US")


@functools.cache
def _registry_codes() -> frozenset[str]:
    return frozenset(country.alpha_2 for country in pycountry.countries)


@functools.lru_cache(maxsize=32)
def _babel_locale(identifier: str) -> Locale:
    try:
        return Locale.parse(identifier.replace("-", "_"))
    except (UnknownLocaleError, ValueError) as exc:
        raise ValueError(f"unknown display locale {identifier!r}") from exc


__all__ = [
    "COUNTRY_KIND",
    "CldrCountryNameProvider",
    "Country",
    "CountryNameProvider",
    "IsoCountry",
    "NamedCountry",
    "RESOLUTION_LOCALE",
    "country_display_name",
    "country_from_json_value",
    "country_of",
    "default_country_name_provider",
    "iso_countries",
    "resolves_to_country",
    "united_states",
]
