"""Finnish personal identity code (henkilötunnus) checks."""

from __future__ import annotations

import string
from typing import Final

from domain_primitives.constants import (
    CENTURY_BY_MARKER,
    PERSONAL_IDENTITY_CODE_CHECKSUM_ALPHABET,
    PERSONAL_IDENTITY_CODE_LENGTH,
)

_ASCII_DIGITS: Final[frozenset[str]] = frozenset(string.digits)
_BIRTH_DATE_SLICE: Final[slice] = slice(0, 6)
_CENTURY_MARKER_INDEX: Final[int] = 6
_INDIVIDUAL_NUMBER_SLICE: Final[slice] = slice(7, 10)
_CHECKSUM_INDEX: Final[int] = 10


def personal_identity_code_checksum(birth_date_digits: str, individual_number: str) -> str:
    """Return the check character for ``DDMMYY`` and a three digit individual number."""
    if len(birth_date_digits) != 6 or not _all_ascii_digits(birth_date_digits):
        raise ValueError(f"birth date digits must be DDMMYY, got {birth_date_digits!r}")
    if len(individual_number) != 3 or not _all_ascii_digits(individual_number):
        raise ValueError(f"individual number must be three digits, got {individual_number!r}")
    remainder = int(birth_date_digits + individual_number) % len(
        PERSONAL_IDENTITY_CODE_CHECKSUM_ALPHABET
    )
    return PERSONAL_IDENTITY_CODE_CHECKSUM_ALPHABET[remainder]


def is_valid_personal_identity_code(raw: object) -> bool:
    """Return whether ``raw`` is ``DDMMYYsNNNC`` with a matching checksum.

    Only structure and checksum are verified. The birth date is not checked
    against the calendar.
    """
    if not isinstance(raw, str) or len(raw) != PERSONAL_IDENTITY_CODE_LENGTH:
        return False
    birth_date = raw[_BIRTH_DATE_SLICE]
    individual_number = raw[_INDIVIDUAL_NUMBER_SLICE]
    if not _all_ascii_digits(birth_date) or not _all_ascii_digits(individual_number):
        return False
    if raw[_CENTURY_MARKER_INDEX] not in CENTURY_BY_MARKER:
        return False
    return raw[_CHECKSUM_INDEX] == personal_identity_code_checksum(birth_date, individual_number)


def _all_ascii_digits(text: str) -> bool:
    return all(char in _ASCII_DIGITS for char in text)


__all__ = ["is_valid_personal_identity_code", "personal_identity_code_checksum"]
