"""
domain-primitives: value types.

File: src/domain_primitives/domain/__init__.py

Purpose
- Re-export the immutable value types for convenience.

Functional requirements
- Every value is validated on construction and never changes afterwards.
- The domain layer performs no I/O.
"""

from domain_primitives.domain.base import LongId, StringPrimitive
from domain_primitives.domain.contact import PhoneNumber
from domain_primitives.domain.finland import PersonalIdentityCode
from domain_primitives.domain.ids import NanoId, UserId, generate_nano_id
from domain_primitives.domain.network import (
    DomainName,
    EmailAddress,
    IpAddress,
    Ipv4,
    Ipv6,
    VerifiedEmailAddress,
    ip_address,
    ip_address_from_json_value,
    ip_address_literal,
)

__all__ = [
    "DomainName",
    "EmailAddress",
    "IpAddress",
    "Ipv4",
    "Ipv6",
    "LongId",
    "NanoId",
    "PersonalIdentityCode",
    "PhoneNumber",
    "StringPrimitive",
    "UserId",
    "VerifiedEmailAddress",
    "generate_nano_id",
    "ip_address",
    "ip_address_from_json_value",
    "ip_address_literal",
]
