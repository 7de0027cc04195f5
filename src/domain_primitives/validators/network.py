"""Validators for domain names, IP addresses and e-mail addresses."""

from __future__ import annotations

import re
import string
from typing import Final

from domain_primitives.constants import (
    DOMAIN_LABEL_MAX_LENGTH,
    DOMAIN_NAME_MAX_LENGTH,
    EMAIL_DOMAIN_MAX_LENGTH,
    EMAIL_IPV6_LITERAL_PREFIX,
    EMAIL_LOCAL_PART_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    IPV4_MAX_LENGTH,
    IPV4_MIN_LENGTH,
    IPV6_MAX_GROUPS,
    IPV6_MAX_HEXTET_LENGTH,
    IPV6_MAX_LENGTH,
    IPV6_MIN_GROUPS,
    IPV6_MIN_LENGTH,
)

_ASCII_DIGITS: Final[frozenset[str]] = frozenset(string.digits)
_HEX_DIGITS: Final[frozenset[str]] = frozenset(string.hexdigits)
_DOMAIN_LABEL_CHARS: Final[frozenset[str]] = frozenset(string.ascii_letters + string.digits + "-")
_IPV4_OCTET_MAX: Final[int] = 255
_IPV4_OCTET_MAX_DIGITS: Final[int] = 3
_COMPRESSION: Final[str] = "::"

# Comments and quoted local parts are not supported.
_EMAIL_LOCAL_PART_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+")


def is_valid_domain_name(raw: object) -> bool:
    """Return whether ``raw`` is a syntactically valid domain name.

    The name is not resolved; only its label structure is checked.
    """
    if not isinstance(raw, str):
        return False
    if not raw or len(raw) > DOMAIN_NAME_MAX_LENGTH:
        return False
    return all(_is_valid_domain_label(label) for label in raw.split("."))


def is_valid_ipv4(raw: object) -> bool:
    """Return whether ``raw`` is a dotted-quad IPv4 address."""
    if not isinstance(raw, str):
        return False
    if not IPV4_MIN_LENGTH <= len(raw) <= IPV4_MAX_LENGTH:
        return False
    octets = raw.split(".")
    if len(octets) != 4:
        return False
    return all(_is_valid_ipv4_octet(octet) for octet in octets)


def is_valid_ipv6(raw: object) -> bool:
    """Return whether ``raw`` is an IPv6 address in colon-hextet notation.

    At most one ``::`` compression is allowed. Without compression exactly eight
    hextets are required. An empty first or last hextet is only allowed when it
    belongs to a leading or trailing ``::``.
    """
    if not isinstance(raw, str):
        return False
    if not IPV6_MIN_LENGTH <= len(raw) <= IPV6_MAX_LENGTH:
        return False

    groups = raw.split(":")
    if not IPV6_MIN_GROUPS <= len(groups) <= IPV6_MAX_GROUPS:
        return False
    for group in groups:
        if not group:
            continue
        if len(group) > IPV6_MAX_HEXTET_LENGTH:
            return False
        if any(char not in _HEX_DIGITS for char in group):
            return False

    compression = raw.find(_COMPRESSION)
    if compression == -1:
        if len(groups) != IPV6_MAX_GROUPS:
            return False
    elif raw.find(_COMPRESSION, compression + 1) != -1:
        return False

    if not raw.startswith(_COMPRESSION) and not groups[0]:
        return False
    if not raw.endswith(_COMPRESSION) and not groups[-1]:
        return False
    return True


def is_valid_ip_address(raw: object) -> bool:
    """Return whether ``raw`` is either a valid IPv4 or a valid IPv6 address."""
    return is_valid_ipv4(raw) or is_valid_ipv6(raw)


def is_valid_email_address(raw: object) -> bool:
    """Return whether ``raw`` is a valid ``local@domain`` e-mail address.

    The domain is a domain name, a bracketed IPv4 literal such as
    ``[192.0.2.1]`` or a bracketed and prefixed IPv6 literal such as
    ``[IPv6:2001:db8::1]``.
    """
    if not isinstance(raw, str):
        return False
    if not raw or len(raw) > EMAIL_MAX_LENGTH:
        return False
    parts = raw.split("@")
    if len(parts) != 2:
        return False
    local_part, domain = parts
    return _is_valid_local_part(local_part) and _is_valid_email_domain(domain)


def _is_valid_domain_label(label: str) -> bool:
    if not label or len(label) > DOMAIN_LABEL_MAX_LENGTH:
        return False
    if any(char not in _DOMAIN_LABEL_CHARS for char in label):
        return False
    return label[0] != "-" and label[-1] != "-"


def _is_valid_ipv4_octet(octet: str) -> bool:
    if not octet or len(octet) > _IPV4_OCTET_MAX_DIGITS:
        return False
    if any(char not in _ASCII_DIGITS for char in octet):
        return False
    return int(octet) <= _IPV4_OCTET_MAX


def _is_valid_local_part(local_part: str) -> bool:
    if not local_part or len(local_part) > EMAIL_LOCAL_PART_MAX_LENGTH:
        return False
    if _EMAIL_LOCAL_PART_RE.fullmatch(local_part) is None:
        return False
    if ".." in local_part:
        return False
    return not local_part.startswith(".") and not local_part.endswith(".")


def _is_valid_email_domain(domain: str) -> bool:
    if not domain or len(domain) > EMAIL_DOMAIN_MAX_LENGTH:
        return False
    if not domain.startswith("["):
        return is_valid_domain_name(domain)
    if len(domain) < 2 or not domain.endswith("]"):
        return False
    literal = domain[1:-1]
    if literal.startswith(EMAIL_IPV6_LITERAL_PREFIX):
        return is_valid_ipv6(literal[len(EMAIL_IPV6_LITERAL_PREFIX) :])
    return is_valid_ipv4(literal)


__all__ = [
    "is_valid_domain_name",
    "is_valid_email_address",
    "is_valid_ip_address",
    "is_valid_ipv4",
    "is_valid_ipv6",
]
