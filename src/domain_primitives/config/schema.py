"""
domain-primitives: settings schema.

File: src/domain_primitives/config/schema.py

Purpose
- Define the typed, immutable settings snapshot and its validation rules.

Functional requirements
- Unknown keys and wrong value types are rejected with the offending key in the
  message.
- ``display_locale`` must be a locale identifier Babel can parse.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Final

from babel import Locale, UnknownLocaleError

LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR")

DEFAULT_SETTINGS: Final[Mapping[str, object]] = MappingProxyType(
    {
        "display_locale": "en",
        "log_level": "WARNING",
        "log_json": True,
        "redact_personal_data": True,
    }
)

_FIELD_TYPES: Final[Mapping[str, type]] = MappingProxyType(
    {
        "display_locale": str,
        "log_level": str,
        "log_json": bool,
        "redact_personal_data": bool,
    }
)


class ConfigLoadError(ValueError):
    """Raised when settings cannot be loaded or overrides cannot be coerced."""


class ConfigValidationError(ConfigLoadError):
    """Raised when a settings value is present but invalid."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


@dataclass(frozen=True, slots=True)
class PrimitivesSettings:
    """Effective runtime settings for the library and its CLI."""

    display_locale: str = "en"
    log_level: str = "WARNING"
    log_json: bool = True
    redact_personal_data: bool = True

    def __post_init__(self) -> None:
        for name, expected in _FIELD_TYPES.items():
            _check_type(name, getattr(self, name), expected)
        if self.log_level not in LOG_LEVELS:
            raise ConfigValidationError(
                "log_level", f"expected one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )
        _check_locale(self.display_locale)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, object]) -> PrimitivesSettings:
        unknown = sorted(key for key in payload if key not in _FIELD_TYPES)
        if unknown:
            raise ConfigValidationError(unknown[0], "unknown settings key")
        merged = {**DEFAULT_SETTINGS, **payload}
        return cls(**merged)  # type: ignore[arg-type]

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


def field_types() -> Mapping[str, type]:
    return _FIELD_TYPES


def _check_type(name: str, value: object, expected: type) -> None:
    if expected is bool:
        if not isinstance(value, bool):
            raise ConfigValidationError(name, f"expected boolean, got {type(value).__name__}")
        return
    if not isinstance(value, expected):
        raise ConfigValidationError(
            name, f"expected {expected.__name__}, got {type(value).__name__}"
        )


def _check_locale(identifier: str) -> None:
    try:
        Locale.parse(identifier.replace("-", "_"))
    except (UnknownLocaleError, ValueError) as exc:
        raise ConfigValidationError("display_locale", f"unknown locale {identifier!r}") from exc


__all__ = [
    "ConfigLoadError",
    "ConfigValidationError",
    "DEFAULT_SETTINGS",
    "LOG_LEVELS",
    "PrimitivesSettings",
    "field_types",
]
