"""E-mail address, domain name and IP address value types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import assert_never

from domain_primitives.domain.base import StringPrimitive
from domain_primitives.errors import InvalidFormat
from domain_primitives.validators import (
    is_valid_domain_name,
    is_valid_email_address,
    is_valid_ipv4,
    is_valid_ipv6,
)


@dataclass(frozen=True, slots=True)
class DomainName(StringPrimitive):
    """A domain name such as ``example.com``; nothing is resolved."""

    KIND = "domain name"

    @classmethod
    def validate(cls, canonical: str) -> bool:
        return is_valid_domain_name(canonical)

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(self.value.split("."))


@dataclass(frozen=True, slots=True)
class EmailAddress(StringPrimitive):
    """An e-mail address kept exactly as given.

    Case is preserved in both parts; no normalization is applied.
    """

    KIND = "email address"

    @classmethod
    def validate(cls, canonical: str) -> bool:
        return is_valid_email_address(canonical)

    @property
    def local_part(self) -> str:
        return self.value.partition("@")[0]

    @property
    def domain(self) -> str:
        return self.value.partition("@")[2]

    def to_verified(self) -> VerifiedEmailAddress:
        """Mark this address as verified, for example after a confirmation link was used."""
        if isinstance(self, VerifiedEmailAddress):
            return self
        return VerifiedEmailAddress(self.value)

    def to_unverified(self) -> EmailAddress:
        if type(self) is EmailAddress:
            return self
        return EmailAddress(self.value)


@dataclass(frozen=True, slots=True)
class VerifiedEmailAddress(EmailAddress):
    """An e-mail address whose ownership has been confirmed.

    Never equal to an :class:`EmailAddress` with the same text, so the two
    cannot be mixed up in sets or as mapping keys.
    """

    KIND = "verified email address"


@dataclass(frozen=True, slots=True)
class Ipv4(StringPrimitive):
    KIND = "IPv4 address"

    @classmethod
    def validate(cls, canonical: str) -> bool:
        return is_valid_ipv4(canonical)

    @property
    def version(self) -> int:
        return 4


@dataclass(frozen=True, slots=True)
class Ipv6(StringPrimitive):
    """An IPv6 address in the textual form it was given, compression included."""

    KIND = "IPv6 address"

    @classmethod
    def validate(cls, canonical: str) -> bool:
        return is_valid_ipv6(canonical)

    @property
    def version(self) -> int:
        return 6


IpAddress = Ipv4 | Ipv6

IP_ADDRESS_KIND = "IP address"


def ip_address(raw: object) -> IpAddress:
    """Return an :class:`Ipv4` or :class:`Ipv6` depending on the form of ``raw``."""
    if is_valid_ipv4(raw):
        return Ipv4(raw)  # type: ignore[arg-type]
    if is_valid_ipv6(raw):
        return Ipv6(raw)  # type: ignore[arg-type]
    raise InvalidFormat(IP_ADDRESS_KIND, raw)


def ip_address_from_json_value(obj: object) -> IpAddress:
    if not isinstance(obj, str):
        raise InvalidFormat(IP_ADDRESS_KIND, obj)
    return ip_address(obj)


def ip_address_literal(address: IpAddress) -> str:
    """Return ``address`` in the bracketed form used as an e-mail domain."""
    match address:
        case Ipv4():
            return f"[{address.value}]"
        case Ipv6():
            return f"[IPv6:{address.value}]"
        case _:
            assert_never(address)


__all__ = [
    "DomainName",
    "EmailAddress",
    "IP_ADDRESS_KIND",
    "IpAddress",
    "Ipv4",
    "Ipv6",
    "VerifiedEmailAddress",
    "ip_address",
    "ip_address_from_json_value",
    "ip_address_literal",
]
