"""
domain-primitives: unit tests for the personal identity code value type

File: tests/unit/domain/test_finland.py

Purpose
- Validate construction, birth date helpers and personal-data handling.

What this test file should cover
- Century markers map to the right birth year.
- Birth date comparison.
- Errors and repr never expose the full code.
"""

from __future__ import annotations

import pickle
from datetime import date

import pytest

from domain_primitives import InvalidFormat, PersonalIdentityCode
from tests.support import invalid, valid


@pytest.mark.parametrize("raw", valid("personal_identity_code"))
def test_valid_codes(raw: str) -> None:
    assert str(PersonalIdentityCode(raw)) == raw


@pytest.mark.parametrize("raw", invalid("personal_identity_code"))
def test_invalid_codes_do_not_echo_input(raw: str) -> None:
    with pytest.raises(InvalidFormat) as excinfo:
        PersonalIdentityCode(raw)
    assert str(excinfo.value) == "invalid personal identity code"
    assert excinfo.value.sensitive


@pytest.mark.parametrize(
    ("raw", "year"),
    [("010190+925H", 1890), ("010190-935U", 1990), ("010106A973C", 2006)],
)
def test_birth_year_follows_century_marker(raw: str, year: int) -> None:
    assert PersonalIdentityCode(raw).birth_year == year


def test_same_birthdate() -> None:
    code = PersonalIdentityCode("010190-935U")
    assert code.is_same_birthdate_as(date(1990, 1, 1))
    assert not code.is_same_birthdate_as(date(1890, 1, 1))
    assert not code.is_same_birthdate_as(date(1990, 1, 2))
    assert not code.is_same_birthdate_as(date(1990, 2, 1))


def test_repr_masks_individual_part() -> None:
    code = PersonalIdentityCode("010190-935U")
    text = repr(code)
    assert text == "PersonalIdentityCode(value='010190-****')"
    assert "935U" not in text


def test_json_round_trip_keeps_full_code() -> None:
    code = PersonalIdentityCode("010106A973C")
    assert code.to_json() == '"010106A973C"'
    assert PersonalIdentityCode.from_json(code.to_json()) == code


def test_pickled_error_stays_masked() -> None:
    with pytest.raises(InvalidFormat) as excinfo:
        PersonalIdentityCode("010190-935V")
    restored = pickle.loads(pickle.dumps(excinfo.value))
    assert str(restored) == "invalid personal identity code"
    assert restored.kind == "personal identity code"
