"""
domain-primitives config package public API.

File: src/domain_primitives/config/__init__.py

Purpose
- Export settings loading entrypoints and public error types.

Functional requirements
- Support loading from ``domain_primitives.toml`` + ``DOMAIN_PRIMITIVES_`` env overrides.
- Fail fast with clear load and validation errors.
"""

from domain_primitives.config.loader import (
    DEFAULT_CONFIG_FILE,
    ENV_PREFIX,
    env_name_for,
    get_settings,
    load_settings,
)
from domain_primitives.config.schema import (
    DEFAULT_SETTINGS,
    LOG_LEVELS,
    ConfigLoadError,
    ConfigValidationError,
    PrimitivesSettings,
)

__all__ = [
    "ConfigLoadError",
    "ConfigValidationError",
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_SETTINGS",
    "ENV_PREFIX",
    "LOG_LEVELS",
    "PrimitivesSettings",
    "env_name_for",
    "get_settings",
    "load_settings",
]
