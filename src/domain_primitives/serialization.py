"""Canonical JSON encoding and strict payload parsing helpers."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import NoReturn

from domain_primitives.errors import InvalidFormat, MissingRequiredField

JSONScalar = str | int | float | bool | None
JSONValue = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]


def canonical_json(value: JSONValue) -> str:
    """Encode ``value`` with sorted keys and compact separators."""
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def decode_json(raw: object, kind: str) -> object:
    """Decode JSON text, reporting failures as :class:`InvalidFormat` for ``kind``."""
    if not isinstance(raw, str):
        fail(kind, raw, f"expected JSON string, got {type(raw).__name__}")
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        fail(kind, raw, f"invalid JSON: {exc}")


def expect_object(
    value: object,
    kind: str,
    *,
    required: set[str],
    optional: set[str] | None = None,
) -> dict[str, object]:
    """Return ``value`` as a plain dict after checking its field names.

    Unknown fields raise :class:`InvalidFormat`. A required field that is
    absent or ``null`` raises :class:`MissingRequiredField`.
    """
    if not isinstance(value, Mapping):
        fail(kind, value, f"expected object, got {type(value).__name__}")

    parsed: dict[str, object] = {}
    for key, item in value.items():
        if not isinstance(key, str):
            fail(kind, value, f"object keys must be strings, got {type(key).__name__}")
        parsed[key] = item

    allowed = required | (optional or set())
    unknown = sorted(key for key in parsed if key not in allowed)
    if unknown:
        fail(kind, value, f"unexpected fields: {unknown}")

    missing = sorted(key for key in required if parsed.get(key) is None)
    if missing:
        raise MissingRequiredField(missing[0])
    return parsed


def expect_mapping(value: object, kind: str) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        fail(kind, value, f"JSON root must be an object, got {type(value).__name__}")
    return value


def expect_tag(parsed: Mapping[str, object], field: str, expected: str, kind: str) -> None:
    """Reject a payload whose optional ``field`` tag names a different type."""
    tag = parsed.get(field)
    if tag is not None and tag != expected:
        fail(kind, tag, f"{field} must be {expected!r}, got {tag!r}")


def fail(kind: str, value: object, detail: str) -> NoReturn:
    raise InvalidFormat(kind, value, detail=detail)


__all__ = [
    "JSONScalar",
    "JSONValue",
    "canonical_json",
    "decode_json",
    "expect_mapping",
    "expect_object",
    "expect_tag",
    "fail",
]
