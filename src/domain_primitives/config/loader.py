"""
domain-primitives: settings loader.

File: src/domain_primitives/config/loader.py

Purpose
- Load effective settings from defaults, a TOML file, environment variables
  and explicit overrides.

What should be included in this file
- Precedence logic: overrides > env (DOMAIN_PRIMITIVES_) > file > defaults.
- TOML loading via ``tomllib``.
- Deterministic environment variable mapping and coercion.

Non-functional requirements
- Loading has no side effects besides reading the file and the environment.
"""

from __future__ import annotations

import functools
import logging
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

import structlog

from domain_primitives.config.schema import (
    ConfigLoadError,
    PrimitivesSettings,
    field_types,
)

DEFAULT_CONFIG_FILE: Final[str] = "domain_primitives.toml"
ENV_PREFIX: Final[str] = "DOMAIN_PRIMITIVES_"

_BOOLEAN_TRUE: Final[frozenset[str]] = frozenset({"1", "true", "t", "yes", "y", "on"})
_BOOLEAN_FALSE: Final[frozenset[str]] = frozenset({"0", "false", "f", "no", "n", "off"})

_logger = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)


def load_settings(
    config_path: str | Path | None = None,
    *,
    overrides: Mapping[str, object] | None = None,
    environ: Mapping[str, str] | None = None,
) -> PrimitivesSettings:
    """Load settings with deterministic precedence: overrides > env > file > defaults.

    A missing default file is fine; a missing explicit ``config_path`` is an
    error.
    """
    resolved_path = _resolve_config_path(config_path)
    env_map = os.environ if environ is None else environ

    merged: dict[str, Any] = {}
    merged.update(_load_toml_file(resolved_path, required=config_path is not None))
    merged.update(_collect_env_overrides(env_map))
    merged.update(dict(overrides or {}))

    settings = PrimitivesSettings.from_mapping(merged)
    _logger.debug(
        "settings_loaded",
        config_path=str(resolved_path),
        config_file_present=resolved_path.exists(),
        settings=settings.to_dict(),
    )
    return settings


@functools.cache
def get_settings() -> PrimitivesSettings:
    """Return the process-wide settings, loaded once from the working directory."""
    return load_settings()


def env_name_for(key: str) -> str:
    return ENV_PREFIX + key.upper()


def _resolve_config_path(config_path: str | Path | None) -> Path:
    if config_path is None:
        return (Path.cwd() / DEFAULT_CONFIG_FILE).resolve()
    return Path(config_path).expanduser().resolve()


def _load_toml_file(path: Path, *, required: bool) -> dict[str, Any]:
    if not path.exists():
        if required:
            raise ConfigLoadError(f"config file not found: {path}")
        return {}

    try:
        with path.open("rb") as handle:
            parsed = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigLoadError(f"invalid TOML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigLoadError(f"unable to read config file {path}: {exc}") from exc

    return parsed


def _collect_env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for key, value_type in sorted(field_types().items()):
        env_name = env_name_for(key)
        raw = environ.get(env_name)
        if raw is None:
            continue
        overrides[key] = _coerce_env(raw, value_type, env_name, key)
    return overrides


def _coerce_env(raw: str, value_type: type, env_name: str, key: str) -> object:
    value = raw.strip()
    if value_type is not bool:
        return value

    lowered = value.lower()
    if lowered in _BOOLEAN_TRUE:
        return True
    if lowered in _BOOLEAN_FALSE:
        return False
    raise ConfigLoadError(
        f"{env_name} -> {key} must be a boolean (true/false/1/0/yes/no/on/off)"
    )


__all__ = [
    "DEFAULT_CONFIG_FILE",
    "ENV_PREFIX",
    "env_name_for",
    "get_settings",
    "load_settings",
]
