"""Structured logging setup with JSON-lines output and personal-data redaction."""

from __future__ import annotations

import functools
import json
import logging
import re
import sys
from collections.abc import MutableMapping
from typing import IO, Any, Final

import structlog

from domain_primitives.config import PrimitivesSettings, get_settings

_REDACTED_VALUE: Final[str] = "***REDACTED***"
_ROOT_LOGGER_NAME: Final[str] = "domain_primitives"

_SENSITIVE_KEY_TERMS: Final[tuple[str, ...]] = (
    "identity_code",
    "email",
    "phone",
)

_PERSONAL_IDENTITY_CODE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\b[0-9]{6}[-+A][0-9]{3}[0-9A-Y]\b"
)
_EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+@(?:\[[^\]\s]*\]|[A-Za-z0-9.-]+)"
)
_PHONE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\+?[0-9][0-9 ().-]{5,}[0-9]")

_canonical_dumps = functools.partial(
    json.dumps, sort_keys=True, separators=(",", ":"), ensure_ascii=False
)

_active_handler: logging.Handler | None = None


def configure_logging(
    settings: PrimitivesSettings | None = None,
    *,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Route structlog events through the ``domain_primitives`` stdlib logger.

    Replaces the handler installed by a previous call, so it is safe to call
    again after settings change. Returns the installed handler.
    """
    global _active_handler

    active = get_settings() if settings is None else settings
    level = logging.getLevelName(active.log_level)

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.format_exc_info,
    ]
    if active.redact_personal_data:
        processors.append(redact_personal_data)
    # Must follow redaction: ISO timestamps match the phone pattern.
    processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))
    if active.log_json:
        processors.append(structlog.processors.JSONRenderer(serializer=_canonical_dumps))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    if _active_handler is not None:
        root.removeHandler(_active_handler)
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False
    _active_handler = handler
    return handler


def redact_personal_data(
    logger: object, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """structlog processor masking identity codes, e-mail addresses and phone numbers."""
    for key in list(event_dict):
        event_dict[key] = _redact_value(event_dict[key], key_context=key)
    return event_dict


def redact_text(text: str) -> str:
    redacted = _PERSONAL_IDENTITY_CODE_PATTERN.sub(_REDACTED_VALUE, text)
    redacted = _EMAIL_PATTERN.sub(_REDACTED_VALUE, redacted)
    return _PHONE_PATTERN.sub(_REDACTED_VALUE, redacted)


def _redact_value(value: object, *, key_context: str | None) -> object:
    if key_context is not None and _requires_redaction_for_key(key_context):
        return _REDACTED_VALUE

    if isinstance(value, str):
        return redact_text(value)

    if isinstance(value, (list, tuple)):
        return [_redact_value(item, key_context=None) for item in value]

    if isinstance(value, dict):
        return {key: _redact_value(item, key_context=key) for key, item in value.items()}

    return value


def _requires_redaction_for_key(key: str) -> bool:
    key_lower = key.lower()
    return any(term in key_lower for term in _SENSITIVE_KEY_TERMS)


__all__ = ["configure_logging", "redact_personal_data", "redact_text"]
