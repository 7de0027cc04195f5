"""
domain-primitives: validated, immutable value types for common domain data.

File: src/domain_primitives/__init__.py

Purpose
- Package root. Defines package metadata and the public API surface.

Functional requirements
- Must not have side effects at import time: no config loading, and the package
  logger only gets a NullHandler.
- Library log events are dropped until `configure_logging` installs a handler.
- Country registries and settings are loaded lazily on first use.
"""

import logging

from domain_primitives.domain import (
    DomainName,
    EmailAddress,
    IpAddress,
    Ipv4,
    Ipv6,
    LongId,
    NanoId,
    PersonalIdentityCode,
    PhoneNumber,
    StringPrimitive,
    UserId,
    VerifiedEmailAddress,
    generate_nano_id,
    ip_address,
)
from domain_primitives.domain.geo import (
    Address,
    CityName,
    Country,
    CountryNameProvider,
    GenericAddress,
    IsoCountry,
    NamedCountry,
    SecondaryAddressDesignator,
    StreetAddress,
    StreetName,
    StreetNumber,
    USPostalAddress,
    USPostalAddressBuilder,
    USStateAndTerritory,
    ZipCode,
    address_from_dict,
    address_from_json,
    country_of,
    iso_countries,
    to_generic_address,
)
from domain_primitives.errors import InvalidFormat, MissingRequiredField, PrimitiveError

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Address",
    "CityName",
    "Country",
    "CountryNameProvider",
    "DomainName",
    "EmailAddress",
    "GenericAddress",
    "InvalidFormat",
    "IpAddress",
    "Ipv4",
    "Ipv6",
    "IsoCountry",
    "LongId",
    "MissingRequiredField",
    "NamedCountry",
    "NanoId",
    "PersonalIdentityCode",
    "PhoneNumber",
    "PrimitiveError",
    "SecondaryAddressDesignator",
    "StreetAddress",
    "StreetName",
    "StreetNumber",
    "StringPrimitive",
    "USPostalAddress",
    "USPostalAddressBuilder",
    "USStateAndTerritory",
    "UserId",
    "VerifiedEmailAddress",
    "ZipCode",
    "__version__",
    "address_from_dict",
    "address_from_json",
    "country_of",
    "generate_nano_id",
    "ip_address",
    "iso_countries",
    "to_generic_address",
]
