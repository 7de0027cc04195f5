"""Phone number value type."""

from __future__ import annotations

from dataclasses import dataclass

from domain_primitives.domain.base import StringPrimitive
from domain_primitives.validators import is_valid_phone_number
from domain_primitives.validators.canonical import sanitize_phone_number


@dataclass(frozen=True, slots=True)
class PhoneNumber(StringPrimitive):
    """A phone number reduced to an optional ``+`` followed by digits.

    Spaces, dashes, dots and parentheses are dropped on construction, so
    ``PhoneNumber("+358 40-123 456")`` stores ``"+35840123456"``.
    """

    KIND = "phone number"

    @classmethod
    def canonicalize(cls, raw: str) -> str:
        return sanitize_phone_number(raw)

    @classmethod
    def validate(cls, canonical: str) -> bool:
        return is_valid_phone_number(canonical)

    @property
    def is_international(self) -> bool:
        return self.value.startswith("+")


__all__ = ["PhoneNumber"]
