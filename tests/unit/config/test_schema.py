"""Unit tests for settings schema validation."""

from __future__ import annotations

import dataclasses

import pytest

from domain_primitives.config import (
    LOG_LEVELS,
    ConfigLoadError,
    ConfigValidationError,
    PrimitivesSettings,
)


def test_defaults_are_valid() -> None:
    settings = PrimitivesSettings()
    assert settings.display_locale == "en"
    assert settings.log_level == "WARNING"
    assert settings.log_json is True
    assert settings.redact_personal_data is True


def test_settings_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        PrimitivesSettings().log_level = "DEBUG"  # type: ignore[misc]


@pytest.mark.parametrize("level", LOG_LEVELS)
def test_known_log_levels(level: str) -> None:
    assert PrimitivesSettings(log_level=level).log_level == level


def test_unknown_log_level_is_rejected() -> None:
    with pytest.raises(ConfigValidationError) as excinfo:
        PrimitivesSettings(log_level="TRACE")
    assert excinfo.value.path == "log_level"
    assert isinstance(excinfo.value, ConfigLoadError)


@pytest.mark.parametrize("locale", ["en", "de", "fi", "sv-SE", "en_US", "zh_Hant_TW"])
def test_locales_babel_can_parse(locale: str) -> None:
    assert PrimitivesSettings(display_locale=locale).display_locale == locale


@pytest.mark.parametrize("locale", ["", "not-a-locale", "xx"])
def test_unknown_locales_are_rejected(locale: str) -> None:
    with pytest.raises(ConfigValidationError, match="display_locale: unknown locale"):
        PrimitivesSettings(display_locale=locale)


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("display_locale", 1),
        ("log_level", None),
        ("log_json", "true"),
        ("redact_personal_data", 1),
    ],
)
def test_wrong_types_name_the_field(field: str, value: object) -> None:
    with pytest.raises(ConfigValidationError, match=f"^{field}: expected"):
        PrimitivesSettings(**{field: value})  # type: ignore[arg-type]


def test_from_mapping_merges_defaults_and_rejects_unknown_keys() -> None:
    settings = PrimitivesSettings.from_mapping({"log_json": False})
    assert settings.log_json is False
    assert settings.log_level == "WARNING"

    with pytest.raises(ConfigValidationError, match="^colour: unknown settings key"):
        PrimitivesSettings.from_mapping({"colour": "blue", "log_json": False})
