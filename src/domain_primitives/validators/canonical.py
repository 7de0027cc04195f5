"""Canonicalizers applied to raw input before validation."""

from __future__ import annotations

from domain_primitives.constants import PHONE_NUMBER_FORMATTING_CHARS


def strip_whitespace(raw: str) -> str:
    """Remove surrounding whitespace from free-text input."""
    return raw.strip()


def sanitize_phone_number(raw: str) -> str:
    """Remove whitespace and common formatting characters from a phone number.

    Any other character, letters included, is kept so that the validator can
    still reject the result.
    """
    return "".join(
        char
        for char in raw
        if not char.isspace() and char not in PHONE_NUMBER_FORMATTING_CHARS
    )


def canonicalize_iso_country_code(raw: str) -> str:
    """Return the upper-case form used to store ISO 3166 alpha-2 codes."""
    return raw.strip().upper()


__all__ = [
    "canonicalize_iso_country_code",
    "sanitize_phone_number",
    "strip_whitespace",
]
