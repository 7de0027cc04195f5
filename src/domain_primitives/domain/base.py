"""Base classes shared by all validated value types."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Final, TypeVar

from domain_primitives.errors import InvalidFormat
from domain_primitives.serialization import canonical_json, decode_json
from domain_primitives.validators import is_valid_long_id

TString = TypeVar("TString", bound="StringPrimitive")
TLong = TypeVar("TLong", bound="LongId")

_DECIMAL_RE: Final[re.Pattern[str]] = re.compile(r"-?[0-9]+")


@dataclass(frozen=True, slots=True)
class StringPrimitive:
    """Immutable wrapper around a canonical, validated string.

    Construction is the only way to obtain a value: ``__post_init__``
    canonicalizes the raw string, validates the result and stores only the
    canonical form. Equality requires the same concrete class, so two kinds
    holding the same text never compare equal.
    """

    value: str

    KIND: ClassVar[str] = "value"
    SENSITIVE: ClassVar[bool] = False

    def __post_init__(self) -> None:
        cls = type(self)
        raw = self.value
        if not isinstance(raw, str):
            raise InvalidFormat(cls.KIND, raw, sensitive=cls.SENSITIVE)
        canonical = cls.canonicalize(raw)
        if not cls.validate(canonical):
            raise InvalidFormat(cls.KIND, raw, sensitive=cls.SENSITIVE)
        object.__setattr__(self, "value", canonical)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def canonicalize(cls, raw: str) -> str:
        return raw

    @classmethod
    def validate(cls, canonical: str) -> bool:
        raise NotImplementedError(f"{cls.__name__} does not define a validator")

    @classmethod
    def is_valid(cls, raw: object) -> bool:
        """Return whether constructing ``cls(raw)`` would succeed."""
        if not isinstance(raw, str):
            return False
        return cls.validate(cls.canonicalize(raw))

    def to_json_value(self) -> str:
        return self.value

    def to_json(self) -> str:
        return canonical_json(self.value)

    @classmethod
    def from_json_value(cls: type[TString], obj: object) -> TString:
        if not isinstance(obj, str):
            raise InvalidFormat(cls.KIND, obj, sensitive=cls.SENSITIVE)
        return cls(obj)

    @classmethod
    def from_json(cls: type[TString], raw: str) -> TString:
        return cls.from_json_value(decode_json(raw, cls.KIND))


@dataclass(frozen=True, slots=True)
class LongId:
    """Signed 64-bit integer identifier.

    Subclass it once per entity so that IDs of different entities never compare
    equal::

        @dataclass(frozen=True, slots=True)
        class InvoiceId(LongId):
            KIND = "invoice id"
    """

    value: int

    KIND: ClassVar[str] = "long id"

    def __post_init__(self) -> None:
        if not is_valid_long_id(self.value):
            raw = self.value
            out_of_range = isinstance(raw, int) and not isinstance(raw, bool)
            raise InvalidFormat(type(self).KIND, raw, detail=str(raw) if out_of_range else None)

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value

    @classmethod
    def parse(cls: type[TLong], text: str) -> TLong:
        """Build an ID from its decimal string form, as produced by ``str()``."""
        if not isinstance(text, str):
            raise InvalidFormat(cls.KIND, text)
        stripped = text.strip()
        if _DECIMAL_RE.fullmatch(stripped) is None:
            raise InvalidFormat(cls.KIND, text)
        return cls(int(stripped))

    def to_json_value(self) -> int:
        return self.value

    def to_json(self) -> str:
        return canonical_json(self.value)

    @classmethod
    def from_json_value(cls: type[TLong], obj: object) -> TLong:
        if isinstance(obj, bool) or not isinstance(obj, int):
            raise InvalidFormat(cls.KIND, obj)
        return cls(obj)

    @classmethod
    def from_json(cls: type[TLong], raw: str) -> TLong:
        return cls.from_json_value(decode_json(raw, cls.KIND))


__all__ = ["LongId", "StringPrimitive"]
