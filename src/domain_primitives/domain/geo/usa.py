"""
United States postal addresses.

Field types follow USPS addressing conventions loosely: they reject obviously
malformed input but do not verify that an address exists.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, Final, TypeVar

from domain_primitives.constants import ADDRESS_FORMAT_FIELD, US_ADDRESS_FORMAT
from domain_primitives.domain.base import StringPrimitive
from domain_primitives.domain.geo.country import IsoCountry, united_states
from domain_primitives.domain.geo.generic import GenericAddress
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
from domain_primitives.validators import (
    is_valid_city_name,
    is_valid_secondary_address_designator,
    is_valid_street_name,
    is_valid_street_number,
    is_valid_zip_code,
)
from domain_primitives.validators.canonical import strip_whitespace

STATE_KIND: Final[str] = "US state or territory"

TField = TypeVar("TField", bound=StringPrimitive)
TRequired = TypeVar("TRequired")


@dataclass(frozen=True, slots=True)
class CityName(StringPrimitive):
    KIND = "city name"

    @classmethod
    def canonicalize(cls, raw: str) -> str:
        return strip_whitespace(raw)

    @classmethod
    def validate(cls, canonical: str) -> bool:
        return is_valid_city_name(canonical)


@dataclass(frozen=True, slots=True)
class StreetName(StringPrimitive):
    """Street name including its suffix, e.g. ``Main St.`` or ``5th Avenue``."""

    KIND = "street name"

    @classmethod
    def canonicalize(cls, raw: str) -> str:
        return strip_whitespace(raw)

    @classmethod
    def validate(cls, canonical: str) -> bool:
        return is_valid_street_name(canonical)


@dataclass(frozen=True, slots=True)
class StreetNumber(StringPrimitive):
    """House number such as ``101``, ``101A`` or the hyphenated ``100-10A``."""

    KIND = "street number"

    @classmethod
    def canonicalize(cls, raw: str) -> str:
        return strip_whitespace(raw)

    @classmethod
    def validate(cls, canonical: str) -> bool:
        return is_valid_street_number(canonical)


@dataclass(frozen=True, slots=True)
class SecondaryAddressDesignator(StringPrimitive):
    """Apartment, suite or box designator, e.g. ``Apt 4B`` or ``P.O. Box 456``."""

    KIND = "secondary address designator"

    @classmethod
    def canonicalize(cls, raw: str) -> str:
        return strip_whitespace(raw)

    @classmethod
    def validate(cls, canonical: str) -> bool:
        return is_valid_secondary_address_designator(canonical)


@dataclass(frozen=True, slots=True)
class ZipCode(StringPrimitive):
    """Five digit ZIP or ZIP+4 code. Surrounding whitespace is rejected, not stripped."""

    KIND = "ZIP code"

    @classmethod
    def validate(cls, canonical: str) -> bool:
        return is_valid_zip_code(canonical)

    @property
    def base(self) -> str:
        return self.value[:5]

    @property
    def plus_four(self) -> str | None:
        return self.value[6:] if len(self.value) > 5 else None


class USStateAndTerritory(StrEnum):
    """USPS two-letter codes for the states, the District of Columbia and the territories."""

    AL = "AL"
    AK = "AK"
    AZ = "AZ"
    AR = "AR"
    CA = "CA"
    CO = "CO"
    CT = "CT"
    DE = "DE"
    FL = "FL"
    GA = "GA"
    HI = "HI"
    ID = "ID"
    IL = "IL"
    IN = "IN"
    IA = "IA"
    KS = "KS"
    KY = "KY"
    LA = "LA"
    ME = "ME"
    MD = "MD"
    MA = "MA"
    MI = "MI"
    MN = "MN"
    MS = "MS"
    MO = "MO"
    MT = "MT"
    NE = "NE"
    NV = "NV"
    NH = "NH"
    NJ = "NJ"
    NM = "NM"
    NY = "NY"
    NC = "NC"
    ND = "ND"
    OH = "OH"
    OK = "OK"
    OR = "OR"
    PA = "PA"
    RI = "RI"
    SC = "SC"
    SD = "SD"
    TN = "TN"
    TX = "TX"
    UT = "UT"
    VT = "VT"
    VA = "VA"
    WA = "WA"
    WV = "WV"
    WI = "WI"
    WY = "WY"
    DC = "DC"
    PR = "PR"
    GU = "GU"
    VI = "VI"
    AS = "AS"
    MP = "MP"
    FM = "FM"
    MH = "MH"
    PW = "PW"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def is_state(self) -> bool:
        """``False`` for the District of Columbia and the territories."""
        return self not in _NON_STATES

    @classmethod
    def from_code(cls, raw: object) -> USStateAndTerritory:
        """Look up a member by its code, ignoring case and surrounding whitespace."""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            raise InvalidFormat(STATE_KIND, raw)
        try:
            return cls(raw.strip().upper())
        except ValueError:
            raise InvalidFormat(STATE_KIND, raw) from None


_DISPLAY_NAMES: Final[dict[USStateAndTerritory, str]] = {
    USStateAndTerritory.AL: "Alabama",
    USStateAndTerritory.AK: "Alaska",
    USStateAndTerritory.AZ: "Arizona",
    USStateAndTerritory.AR: "Arkansas",
    USStateAndTerritory.CA: "California",
    USStateAndTerritory.CO: "Colorado",
    USStateAndTerritory.CT: "Connecticut",
    USStateAndTerritory.DE: "Delaware",
    USStateAndTerritory.FL: "Florida",
    USStateAndTerritory.GA: "Georgia",
    USStateAndTerritory.HI: "Hawaii",
    USStateAndTerritory.ID: "Idaho",
    USStateAndTerritory.IL: "Illinois",
    USStateAndTerritory.IN: "Indiana",
    USStateAndTerritory.IA: "Iowa",
    USStateAndTerritory.KS: "Kansas",
    USStateAndTerritory.KY: "Kentucky",
    USStateAndTerritory.LA: "Louisiana",
    USStateAndTerritory.ME: "Maine",
    USStateAndTerritory.MD: "Maryland",
    USStateAndTerritory.MA: "Massachusetts",
    USStateAndTerritory.MI: "Michigan",
    USStateAndTerritory.MN: "Minnesota",
    USStateAndTerritory.MS: "Mississippi",
    USStateAndTerritory.MO: "Missouri",
    USStateAndTerritory.MT: "Montana",
    USStateAndTerritory.NE: "Nebraska",
    USStateAndTerritory.NV: "Nevada",
    USStateAndTerritory.NH: "New Hampshire",
    USStateAndTerritory.NJ: "New Jersey",
    USStateAndTerritory.NM: "New Mexico",
    USStateAndTerritory.NY: "New York",
    USStateAndTerritory.NC: "North Carolina",
    USStateAndTerritory.ND: "North Dakota",
    USStateAndTerritory.OH: "Ohio",
    USStateAndTerritory.OK: "Oklahoma",
    USStateAndTerritory.OR: "Oregon",
    USStateAndTerritory.PA: "Pennsylvania",
    USStateAndTerritory.RI: "Rhode Island",
    USStateAndTerritory.SC: "South Carolina",
    USStateAndTerritory.SD: "South Dakota",
    USStateAndTerritory.TN: "Tennessee",
    USStateAndTerritory.TX: "Texas",
    USStateAndTerritory.UT: "Utah",
    USStateAndTerritory.VT: "Vermont",
    USStateAndTerritory.VA: "Virginia",
    USStateAndTerritory.WA: "Washington",
    USStateAndTerritory.WV: "West Virginia",
    USStateAndTerritory.WI: "Wisconsin",
    USStateAndTerritory.WY: "Wyoming",
    USStateAndTerritory.DC: "District of Columbia",
    USStateAndTerritory.PR: "Puerto Rico",
    USStateAndTerritory.GU: "Guam",
    USStateAndTerritory.VI: "U.S. Virgin Islands",
    USStateAndTerritory.AS: "American Samoa",
    USStateAndTerritory.MP: "Northern Mariana Islands",
    USStateAndTerritory.FM: "Federated States of Micronesia",
    USStateAndTerritory.MH: "Marshall Islands",
    USStateAndTerritory.PW: "Palau",
}

_NON_STATES: Final[frozenset[USStateAndTerritory]] = frozenset(
    {
        USStateAndTerritory.DC,
        USStateAndTerritory.PR,
        USStateAndTerritory.GU,
        USStateAndTerritory.VI,
        USStateAndTerritory.AS,
        USStateAndTerritory.MP,
        USStateAndTerritory.FM,
        USStateAndTerritory.MH,
        USStateAndTerritory.PW,
    }
)


@dataclass(frozen=True, slots=True)
class StreetAddress:
    name: StreetName
    number: StreetNumber | None = None

    def __post_init__(self) -> None:
        if self.name is None:
            raise MissingRequiredField("streetName")
        if not isinstance(self.name, StreetName):
            raise InvalidFormat(StreetName.KIND, self.name)
        if self.number is not None and not isinstance(self.number, StreetNumber):
            raise InvalidFormat(StreetNumber.KIND, self.number)

    def __str__(self) -> str:
        if self.number is None:
            return self.name.value
        return f"{self.number} {self.name}"

    def to_dict(self) -> dict[str, JSONValue]:
        return {
            "number": None if self.number is None else self.number.to_json_value(),
            "name": self.name.to_json_value(),
        }


@dataclass(frozen=True, slots=True)
class USPostalAddress:
    """A US postal address. The country is always the United States.

    Build one with :meth:`builder`::

        address = (
            USPostalAddress.builder()
            .street_number("123")
            .street_name("Main St.")
            .city("New York")
            .state(USStateAndTerritory.NY)
            .zip_code("10001")
            .build()
        )
    """

    street_address: StreetAddress
    secondary_address_designator: SecondaryAddressDesignator | None
    city: CityName
    state: USStateAndTerritory
    zip_code: ZipCode

    KIND: ClassVar[str] = "US postal address"
    FORMAT: ClassVar[str] = US_ADDRESS_FORMAT

    def __post_init__(self) -> None:
        for name, expected in (
            ("street_address", StreetAddress),
            ("city", CityName),
            ("state", USStateAndTerritory),
            ("zip_code", ZipCode),
        ):
            value = getattr(self, name)
            if value is None:
                raise MissingRequiredField(name)
            if not isinstance(value, expected):
                raise InvalidFormat(self.KIND, value, detail=f"{name} must be a {expected.__name__}")
        designator = self.secondary_address_designator
        if designator is not None and not isinstance(designator, SecondaryAddressDesignator):
            raise InvalidFormat(SecondaryAddressDesignator.KIND, designator)

    @property
    def country(self) -> IsoCountry:
        return united_states()

    def to_generic_address(self) -> GenericAddress:
        designator = self.secondary_address_designator
        return GenericAddress(
            line1=str(self.street_address),
            line2=None if designator is None else designator.value,
            line3=f"{self.city}, {self.state.value} {self.zip_code}",
            country=self.country,
        )

    def to_dict(self) -> dict[str, JSONValue]:
        designator = self.secondary_address_designator
        return {
            ADDRESS_FORMAT_FIELD: self.FORMAT,
            "streetAddress": self.street_address.to_dict(),
            "secondaryAddressDesignator": None if designator is None else designator.value,
            "city": self.city.to_json_value(),
            "state": self.state.value,
            "zipCode": self.zip_code.to_json_value(),
            "country": self.country.to_json_value(),
        }

    def to_json(self) -> str:
        return canonical_json(self.to_dict())

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> USPostalAddress:
        """Parse the JSON object form. Any ``country`` field is ignored."""
        parsed = expect_object(
            data,
            cls.KIND,
            required={"streetAddress", "city", "state", "zipCode"},
            optional={ADDRESS_FORMAT_FIELD, "secondaryAddressDesignator", "country"},
        )
        expect_tag(parsed, ADDRESS_FORMAT_FIELD, cls.FORMAT, cls.KIND)
        street = expect_object(
            parsed["streetAddress"],
            f"{cls.KIND} street address",
            required={"name"},
            optional={"number"},
        )
        number = street.get("number")
        designator = parsed.get("secondaryAddressDesignator")
        return cls(
            street_address=StreetAddress(
                name=StreetName.from_json_value(street["name"]),
                number=None if number is None else StreetNumber.from_json_value(number),
            ),
            secondary_address_designator=(
                None
                if designator is None
                else SecondaryAddressDesignator.from_json_value(designator)
            ),
            city=CityName.from_json_value(parsed["city"]),
            state=USStateAndTerritory.from_code(parsed["state"]),
            zip_code=ZipCode.from_json_value(parsed["zipCode"]),
        )

    @classmethod
    def from_json(cls, raw: str) -> USPostalAddress:
        return cls.from_dict(expect_mapping(decode_json(raw, cls.KIND), cls.KIND))

    @staticmethod
    def builder(from_: USPostalAddress | None = None) -> USPostalAddressBuilder:
        """Return a new builder, seeded with the fields of ``from_`` when given."""
        if from_ is None:
            return USPostalAddressBuilder()
        if not isinstance(from_, USPostalAddress):
            fail(USPostalAddress.KIND, from_, "builder source must be a USPostalAddress")
        return USPostalAddressBuilder(
            _street_number=from_.street_address.number,
            _street_name=from_.street_address.name,
            _secondary_address_designator=from_.secondary_address_designator,
            _city=from_.city,
            _state=from_.state,
            _zip_code=from_.zip_code,
        )


@dataclass(slots=True)
class USPostalAddressBuilder:
    """Mutable, fluent builder for :class:`USPostalAddress`.

    Setters accept typed values or raw strings, which are validated right away.
    Passing ``None`` clears a field. ``build()`` can be called repeatedly and
    the builder changed in between.
    """

    _street_number: StreetNumber | None = None
    _street_name: StreetName | None = None
    _secondary_address_designator: SecondaryAddressDesignator | None = None
    _city: CityName | None = None
    _state: USStateAndTerritory | None = None
    _zip_code: ZipCode | None = None

    def street_number(self, value: StreetNumber | str | None) -> USPostalAddressBuilder:
        self._street_number = _coerce(StreetNumber, value)
        return self

    def street_name(self, value: StreetName | str | None) -> USPostalAddressBuilder:
        self._street_name = _coerce(StreetName, value)
        return self

    def secondary_address_designator(
        self, value: SecondaryAddressDesignator | str | None
    ) -> USPostalAddressBuilder:
        self._secondary_address_designator = _coerce(SecondaryAddressDesignator, value)
        return self

    def city(self, value: CityName | str | None) -> USPostalAddressBuilder:
        self._city = _coerce(CityName, value)
        return self

    def state(self, value: USStateAndTerritory | str | None) -> USPostalAddressBuilder:
        self._state = None if value is None else USStateAndTerritory.from_code(value)
        return self

    def zip_code(self, value: ZipCode | str | None) -> USPostalAddressBuilder:
        self._zip_code = _coerce(ZipCode, value)
        return self

    def build(self) -> USPostalAddress:
        """Return a new address; raises :class:`MissingRequiredField` for the first absent field."""
        street_name = _require(self._street_name, "streetName")
        city = _require(self._city, "city")
        state = _require(self._state, "state")
        zip_code = _require(self._zip_code, "zipCode")
        return USPostalAddress(
            street_address=StreetAddress(name=street_name, number=self._street_number),
            secondary_address_designator=self._secondary_address_designator,
            city=city,
            state=state,
            zip_code=zip_code,
        )


def _coerce(kind: type[TField], value: TField | str | None) -> TField | None:
    if value is None or isinstance(value, kind):
        return value
    return kind(value)  # type: ignore[arg-type]


def _require(value: TRequired | None, field_name: str) -> TRequired:
    if value is None:
        raise MissingRequiredField(field_name)
    return value


__all__ = [
    "CityName",
    "STATE_KIND",
    "SecondaryAddressDesignator",
    "StreetAddress",
    "StreetName",
    "StreetNumber",
    "USPostalAddress",
    "USPostalAddressBuilder",
    "USStateAndTerritory",
    "ZipCode",
]
