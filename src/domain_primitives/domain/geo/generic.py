"""Free-form address that works for any country."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar

from domain_primitives.constants import ADDRESS_FORMAT_FIELD, GENERIC_ADDRESS_FORMAT
from domain_primitives.domain.geo.country import (
    COUNTRY_KIND,
    Country,
    IsoCountry,
    NamedCountry,
    country_from_json_value,
)
from domain_primitives.errors import InvalidFormat, MissingRequiredField
from domain_primitives.serialization import (
    JSONValue,
    canonical_json,
    decode_json,
    expect_mapping,
    expect_object,
    expect_tag,
    fail,
)

_LINE_FIELDS = ("line1", "line2", "line3")


@dataclass(frozen=True, slots=True)
class GenericAddress:
    """Up to three display lines plus a country.

    The lines are not validated. This is the lowest common denominator that
    every structured address can be projected to.
    """

    line1: str | None
    line2: str | None
    line3: str | None
    country: Country

    KIND: ClassVar[str] = "generic address"
    FORMAT: ClassVar[str] = GENERIC_ADDRESS_FORMAT

    def __post_init__(self) -> None:
        for name in _LINE_FIELDS:
            line = getattr(self, name)
            if line is not None and not isinstance(line, str):
                raise InvalidFormat(
                    self.KIND, line, detail=f"{name} must be a string or None"
                )
        if self.country is None:
            raise MissingRequiredField("country")
        if not isinstance(self.country, (IsoCountry, NamedCountry)):
            raise InvalidFormat(COUNTRY_KIND, self.country)

    @property
    def lines(self) -> tuple[str, ...]:
        """Non-empty lines in display order."""
        return tuple(line for line in (self.line1, self.line2, self.line3) if line)

    def to_generic_address(self) -> GenericAddress:
        return self

    def to_dict(self) -> dict[str, JSONValue]:
        return {
            ADDRESS_FORMAT_FIELD: self.FORMAT,
            "line1": self.line1,
            "line2": self.line2,
            "line3": self.line3,
            "country": self.country.to_json_value(),
        }

    def to_json(self) -> str:
        return canonical_json(self.to_dict())

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> GenericAddress:
        parsed = expect_object(
            data,
            cls.KIND,
            required={"country"},
            optional={ADDRESS_FORMAT_FIELD, *_LINE_FIELDS},
        )
        expect_tag(parsed, ADDRESS_FORMAT_FIELD, cls.FORMAT, cls.KIND)
        return cls(
            line1=_as_optional_line(parsed.get("line1"), "line1", cls.KIND),
            line2=_as_optional_line(parsed.get("line2"), "line2", cls.KIND),
            line3=_as_optional_line(parsed.get("line3"), "line3", cls.KIND),
            country=country_from_json_value(parsed["country"]),
        )

    @classmethod
    def from_json(cls, raw: str) -> GenericAddress:
        return cls.from_dict(expect_mapping(decode_json(raw, cls.KIND), cls.KIND))


def _as_optional_line(value: object, name: str, kind: str) -> str | None:
    if value is None or isinstance(value, str):
        return value
    fail(kind, value, f"{name} must be a string or null, got {type(value).__name__}")


__all__ = ["GenericAddress"]
