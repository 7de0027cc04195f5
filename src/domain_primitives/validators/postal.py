"""Validators for US postal address fields and country names.

Free-text validators expect input that was already stripped with
:func:`domain_primitives.validators.canonical.strip_whitespace`; zip codes are
validated as given.
"""

from __future__ import annotations

import re
import string
from typing import Final

from domain_primitives.constants import (
    CITY_NAME_MAX_LENGTH,
    COUNTRY_NAME_MAX_LENGTH,
    ISO_COUNTRY_CODE_LENGTH,
    SECONDARY_ADDRESS_DESIGNATOR_MAX_LENGTH,
    STREET_NAME_MAX_LENGTH,
    STREET_NUMBER_MAX_LENGTH,
    ZIP_CODE_MAX_LENGTH,
    ZIP_CODE_MIN_LENGTH,
)

_CITY_NAME_PUNCTUATION: Final[frozenset[str]] = frozenset(" .'")
_STREET_NAME_PUNCTUATION: Final[frozenset[str]] = frozenset(" .'")
_SECONDARY_DESIGNATOR_PUNCTUATION: Final[frozenset[str]] = frozenset(" -.#/")
_COUNTRY_NAME_PUNCTUATION: Final[frozenset[str]] = frozenset(" .'-,()&")
_ASCII_LETTERS: Final[frozenset[str]] = frozenset(string.ascii_letters)

_STREET_NUMBER_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"[0-9]+[a-zA-Z]?"),  # 101A
    re.compile(r"[0-9]+-[0-9]+[a-zA-Z]?"),  # 100-10A
    re.compile(r"[0-9]+[a-zA-Z]?-?[0-9]*"),  # 303-1
)
_ZIP_CODE_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]{5}(?:-[0-9]{4})?")


def is_valid_city_name(raw: object) -> bool:
    if not isinstance(raw, str):
        return False
    if not raw or len(raw) > CITY_NAME_MAX_LENGTH:
        return False
    return all(char.isalpha() or char in _CITY_NAME_PUNCTUATION for char in raw)


def is_valid_street_name(raw: object) -> bool:
    """Return whether ``raw`` is a street name such as ``Main St.`` or ``5th Avenue``.

    Digits are allowed but a name made only of digits is rejected, since that
    is a street number.
    """
    if not isinstance(raw, str):
        return False
    if not raw or len(raw) > STREET_NAME_MAX_LENGTH:
        return False
    if not all(
        char.isalpha() or char.isdecimal() or char in _STREET_NAME_PUNCTUATION for char in raw
    ):
        return False
    return not raw.isdecimal()


def is_valid_street_number(raw: object) -> bool:
    if not isinstance(raw, str):
        return False
    if not raw or len(raw) > STREET_NUMBER_MAX_LENGTH:
        return False
    return any(pattern.fullmatch(raw) is not None for pattern in _STREET_NUMBER_PATTERNS)


def is_valid_secondary_address_designator(raw: object) -> bool:
    """Return whether ``raw`` is a unit designator such as ``Apt 4B`` or ``#3A``."""
    if not isinstance(raw, str):
        return False
    if not raw or len(raw) > SECONDARY_ADDRESS_DESIGNATOR_MAX_LENGTH:
        return False
    return all(
        char.isalpha() or char.isdecimal() or char in _SECONDARY_DESIGNATOR_PUNCTUATION
        for char in raw
    )


def is_valid_zip_code(raw: object) -> bool:
    """Return whether ``raw`` is a ZIP or ZIP+4 code, ``12345`` or ``12345-6789``."""
    if not isinstance(raw, str):
        return False
    if not ZIP_CODE_MIN_LENGTH <= len(raw) <= ZIP_CODE_MAX_LENGTH:
        return False
    return _ZIP_CODE_RE.fullmatch(raw) is not None


def is_valid_country_name(raw: object) -> bool:
    """Return whether ``raw`` is a free-text country name.

    Letters from any script are allowed together with a little punctuation, as
    in ``Bosnia and Herzegovina`` or ``Côte d'Ivoire``. At least one letter is
    required.
    """
    if not isinstance(raw, str):
        return False
    if not raw or len(raw) > COUNTRY_NAME_MAX_LENGTH:
        return False
    if not all(char.isalpha() or char in _COUNTRY_NAME_PUNCTUATION for char in raw):
        return False
    return any(char.isalpha() for char in raw)


def is_iso_country_code_shape(raw: object) -> bool:
    """Return whether ``raw`` looks like an alpha-2 code; registry lookup happens elsewhere."""
    if not isinstance(raw, str) or len(raw) != ISO_COUNTRY_CODE_LENGTH:
        return False
    return all(char in _ASCII_LETTERS for char in raw)


__all__ = [
    "is_iso_country_code_shape",
    "is_valid_city_name",
    "is_valid_country_name",
    "is_valid_secondary_address_designator",
    "is_valid_street_name",
    "is_valid_street_number",
    "is_valid_zip_code",
]
