"""Unit tests for identifier and phone number validators."""

from __future__ import annotations

import pytest

from domain_primitives.constants import LONG_ID_MAX, LONG_ID_MIN
from domain_primitives.validators import (
    is_valid_long_id,
    is_valid_nano_id,
    is_valid_phone_number,
    is_valid_user_id,
)
from domain_primitives.validators.canonical import sanitize_phone_number
from tests.support import canonical, invalid, valid


@pytest.mark.parametrize("raw", valid("user_id"))
def test_user_ids_from_common_identity_providers(raw: str) -> None:
    assert is_valid_user_id(raw)


@pytest.mark.parametrize("raw", invalid("user_id"))
def test_invalid_user_ids(raw: str) -> None:
    assert not is_valid_user_id(raw)


def test_user_id_length_limit() -> None:
    assert is_valid_user_id("a" * 100)
    assert not is_valid_user_id("a" * 101)


@pytest.mark.parametrize("raw", valid("nano_id"))
def test_valid_nano_ids(raw: str) -> None:
    assert is_valid_nano_id(raw)


@pytest.mark.parametrize("raw", invalid("nano_id"))
def test_invalid_nano_ids(raw: str) -> None:
    assert not is_valid_nano_id(raw)


def test_long_id_bounds_and_types() -> None:
    assert is_valid_long_id(0)
    assert is_valid_long_id(LONG_ID_MIN)
    assert is_valid_long_id(LONG_ID_MAX)
    assert not is_valid_long_id(LONG_ID_MAX + 1)
    assert not is_valid_long_id(LONG_ID_MIN - 1)
    assert not is_valid_long_id(True)
    assert not is_valid_long_id(1.0)
    assert not is_valid_long_id("1")


@pytest.mark.parametrize(("raw", "expected"), canonical("phone"))
def test_phone_numbers_are_valid_after_sanitizing(raw: str, expected: str) -> None:
    sanitized = sanitize_phone_number(raw)
    assert sanitized == expected
    assert is_valid_phone_number(sanitized)


@pytest.mark.parametrize("raw", invalid("phone"))
def test_invalid_phone_numbers(raw: str) -> None:
    assert not is_valid_phone_number(sanitize_phone_number(raw))


def test_phone_validator_does_not_sanitize() -> None:
    assert not is_valid_phone_number("+358 40 123 456")
    assert is_valid_phone_number("+358401234567890")
    assert len("+358401234567890") == 16


def test_sanitize_keeps_unknown_characters() -> None:
    assert sanitize_phone_number("040-ABC 12") == "040ABC12"
