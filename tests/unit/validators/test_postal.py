"""Unit tests for US postal field and country name validators."""

from __future__ import annotations

import pytest

from domain_primitives.validators import (
    is_iso_country_code_shape,
    is_valid_city_name,
    is_valid_country_name,
    is_valid_secondary_address_designator,
    is_valid_street_name,
    is_valid_street_number,
    is_valid_zip_code,
)
from domain_primitives.validators.canonical import strip_whitespace
from tests.support import canonical, invalid, valid


@pytest.mark.parametrize(("raw", "expected"), canonical("city"))
def test_city_names(raw: str, expected: str) -> None:
    stripped = strip_whitespace(raw)
    assert stripped == expected
    assert is_valid_city_name(stripped)


@pytest.mark.parametrize("raw", invalid("city"))
def test_invalid_city_names(raw: str) -> None:
    assert not is_valid_city_name(strip_whitespace(raw))


@pytest.mark.parametrize("raw", valid("street_name"))
def test_street_names(raw: str) -> None:
    assert is_valid_street_name(raw)


@pytest.mark.parametrize("raw", invalid("street_name"))
def test_invalid_street_names(raw: str) -> None:
    assert not is_valid_street_name(raw)


@pytest.mark.parametrize("raw", valid("street_number"))
def test_street_numbers(raw: str) -> None:
    assert is_valid_street_number(raw)


@pytest.mark.parametrize("raw", invalid("street_number"))
def test_invalid_street_numbers(raw: str) -> None:
    assert not is_valid_street_number(raw)


@pytest.mark.parametrize("raw", valid("secondary_designator"))
def test_secondary_address_designators(raw: str) -> None:
    assert is_valid_secondary_address_designator(raw)


@pytest.mark.parametrize("raw", invalid("secondary_designator"))
def test_invalid_secondary_address_designators(raw: str) -> None:
    assert not is_valid_secondary_address_designator(raw)


@pytest.mark.parametrize("raw", valid("zip"))
def test_zip_codes(raw: str) -> None:
    assert is_valid_zip_code(raw)


@pytest.mark.parametrize("raw", invalid("zip"))
def test_invalid_zip_codes(raw: str) -> None:
    assert not is_valid_zip_code(raw)


@pytest.mark.parametrize(("raw", "expected"), canonical("country_name"))
def test_country_names(raw: str, expected: str) -> None:
    assert strip_whitespace(raw) == expected
    assert is_valid_country_name(expected)


@pytest.mark.parametrize("raw", invalid("country_name"))
def test_invalid_country_names(raw: str) -> None:
    assert not is_valid_country_name(strip_whitespace(raw))


def test_free_text_length_limits() -> None:
    assert is_valid_city_name("a" * 100)
    assert not is_valid_city_name("a" * 101)
    assert is_valid_street_name("a" * 100)
    assert not is_valid_street_name("a" * 101)
    assert is_valid_country_name("a" * 100)
    assert not is_valid_country_name("a" * 101)
    assert is_valid_secondary_address_designator("a" * 20)


def test_iso_country_code_shape() -> None:
    assert is_iso_country_code_shape("FI")
    assert is_iso_country_code_shape("fi")
    assert not is_iso_country_code_shape("FIN")
    assert not is_iso_country_code_shape("F1")
    assert not is_iso_country_code_shape("åä")
    assert not is_iso_country_code_shape(None)
