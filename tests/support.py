"""Shared helpers for loading the YAML validation vectors."""

from __future__ import annotations

import functools
from pathlib import Path
from typing import cast

import yaml

VECTORS_PATH = Path(__file__).resolve().parent / "fixtures" / "vectors.yaml"


@functools.cache
def load_vectors() -> dict[str, dict[str, list[object]]]:
    parsed = cast("object", yaml.safe_load(VECTORS_PATH.read_text(encoding="utf-8")))
    assert isinstance(parsed, dict)
    return parsed


def valid(kind: str) -> list[str]:
    return [str(item) for item in load_vectors()[kind].get("valid", [])]


def invalid(kind: str) -> list[str]:
    return [str(item) for item in load_vectors()[kind].get("invalid", [])]


def canonical(kind: str) -> list[tuple[str, str]]:
    pairs = load_vectors()[kind].get("canonical", [])
    return [(str(raw), str(expected)) for raw, expected in pairs]  # type: ignore[misc]
