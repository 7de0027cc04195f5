"""Address variants and their tagged JSON dispatch."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Final, assert_never

from domain_primitives.constants import (
    ADDRESS_FORMAT_FIELD,
    GENERIC_ADDRESS_FORMAT,
    US_ADDRESS_FORMAT,
)
from domain_primitives.domain.geo.generic import GenericAddress
from domain_primitives.domain.geo.usa import USPostalAddress
from domain_primitives.errors import MissingRequiredField
from domain_primitives.serialization import decode_json, expect_mapping, fail

ADDRESS_KIND: Final[str] = "address"

Address = GenericAddress | USPostalAddress

_PARSERS: Final[Mapping[str, Callable[[Mapping[str, object]], Address]]] = {
    US_ADDRESS_FORMAT: USPostalAddress.from_dict,
    GENERIC_ADDRESS_FORMAT: GenericAddress.from_dict,
}


def address_from_dict(data: Mapping[str, object]) -> Address:
    """Parse an address payload, choosing the variant from its ``format`` tag."""
    payload = expect_mapping(data, ADDRESS_KIND)
    tag = payload.get(ADDRESS_FORMAT_FIELD)
    if tag is None:
        raise MissingRequiredField(ADDRESS_FORMAT_FIELD)
    parser = _PARSERS.get(tag) if isinstance(tag, str) else None
    if parser is None:
        fail(
            ADDRESS_KIND,
            tag,
            f"unknown {ADDRESS_FORMAT_FIELD} {tag!r}; expected one of: {', '.join(sorted(_PARSERS))}",
        )
    return parser(payload)


def address_from_json(raw: str) -> Address:
    return address_from_dict(expect_mapping(decode_json(raw, ADDRESS_KIND), ADDRESS_KIND))


def address_to_json(address: Address) -> str:
    match address:
        case USPostalAddress():
            return address.to_json()
        case GenericAddress():
            return address.to_json()
        case _:
            assert_never(address)


def to_generic_address(address: Address) -> GenericAddress:
    """Project any address variant onto three display lines and a country."""
    match address:
        case USPostalAddress():
            return address.to_generic_address()
        case GenericAddress():
            return address
        case _:
            assert_never(address)


__all__ = [
    "ADDRESS_KIND",
    "Address",
    "address_from_dict",
    "address_from_json",
    "address_to_json",
    "to_generic_address",
]
