"""Countries and postal addresses."""

from domain_primitives.domain.geo.address import (
    Address,
    address_from_dict,
    address_from_json,
    address_to_json,
    to_generic_address,
)
from domain_primitives.domain.geo.country import (
    CldrCountryNameProvider,
    Country,
    CountryNameProvider,
    IsoCountry,
    NamedCountry,
    country_display_name,
    country_from_json_value,
    country_of,
    iso_countries,
    united_states,
)
from domain_primitives.domain.geo.generic import GenericAddress
from domain_primitives.domain.geo.usa import (
    CityName,
    SecondaryAddressDesignator,
    StreetAddress,
    StreetName,
    StreetNumber,
    USPostalAddress,
    USPostalAddressBuilder,
    USStateAndTerritory,
    ZipCode,
)

__all__ = [
    "Address",
    "CityName",
    "CldrCountryNameProvider",
    "Country",
    "CountryNameProvider",
    "GenericAddress",
    "IsoCountry",
    "NamedCountry",
    "SecondaryAddressDesignator",
    "StreetAddress",
    "StreetName",
    "StreetNumber",
    "USPostalAddress",
    "USPostalAddressBuilder",
    "USStateAndTerritory",
    "ZipCode",
    "address_from_dict",
    "address_from_json",
    "address_to_json",
    "country_display_name",
    "country_from_json_value",
    "country_of",
    "iso_countries",
    "to_generic_address",
    "united_states",
]
