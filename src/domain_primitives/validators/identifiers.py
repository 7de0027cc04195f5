"""Validators for identifier primitives and phone numbers."""

from __future__ import annotations

import string
from typing import Final

from domain_primitives.constants import (
    LONG_ID_MAX,
    LONG_ID_MIN,
    NANO_ID_ALPHABET,
    NANO_ID_LENGTH,
    PHONE_NUMBER_MAX_LENGTH,
    USER_ID_EXTRA_CHARS,
    USER_ID_MAX_LENGTH,
)

_ASCII_DIGITS: Final[frozenset[str]] = frozenset(string.digits)
_USER_ID_CHARS: Final[frozenset[str]] = frozenset(string.ascii_letters + string.digits) | USER_ID_EXTRA_CHARS
_NANO_ID_CHARS: Final[frozenset[str]] = frozenset(NANO_ID_ALPHABET)


def is_valid_user_id(raw: object) -> bool:
    """Return whether ``raw`` is 1-100 chars of letters, digits and ``-_.:|``."""
    if not isinstance(raw, str):
        return False
    if not raw or len(raw) > USER_ID_MAX_LENGTH:
        return False
    return all(char in _USER_ID_CHARS for char in raw)


def is_valid_nano_id(raw: object) -> bool:
    if not isinstance(raw, str):
        return False
    if len(raw) != NANO_ID_LENGTH:
        return False
    return all(char in _NANO_ID_CHARS for char in raw)


def is_valid_long_id(raw: object) -> bool:
    """Return whether ``raw`` is an integer that fits a signed 64-bit slot."""
    if isinstance(raw, bool) or not isinstance(raw, int):
        return False
    return LONG_ID_MIN <= raw <= LONG_ID_MAX


def is_valid_phone_number(raw: object) -> bool:
    """Return whether an already sanitized ``raw`` is ``+?[0-9]+``.

    Formatting characters are not accepted here; run
    :func:`domain_primitives.validators.canonical.sanitize_phone_number` first.
    """
    if not isinstance(raw, str):
        return False
    if not raw or len(raw) > PHONE_NUMBER_MAX_LENGTH:
        return False
    digits = raw[1:] if raw.startswith("+") else raw
    if not digits:
        return False
    return all(char in _ASCII_DIGITS for char in digits)


__all__ = [
    "is_valid_long_id",
    "is_valid_nano_id",
    "is_valid_phone_number",
    "is_valid_user_id",
]
