"""Stable limits and alphabets shared by validators and value types."""

from __future__ import annotations

from typing import Final

# E-mail: local part 64, "@" 1, domain 255.
EMAIL_MAX_LENGTH: Final[int] = 320
EMAIL_LOCAL_PART_MAX_LENGTH: Final[int] = 64
EMAIL_DOMAIN_MAX_LENGTH: Final[int] = 255
EMAIL_IPV6_LITERAL_PREFIX: Final[str] = "IPv6:"

DOMAIN_NAME_MAX_LENGTH: Final[int] = 253
DOMAIN_LABEL_MAX_LENGTH: Final[int] = 63

PHONE_NUMBER_MAX_LENGTH: Final[int] = 16
PHONE_NUMBER_FORMATTING_CHARS: Final[frozenset[str]] = frozenset({"-", "(", ")", "."})

IPV4_MIN_LENGTH: Final[int] = 7  # 0.0.0.0
IPV4_MAX_LENGTH: Final[int] = 15  # 255.255.255.255
IPV6_MIN_LENGTH: Final[int] = 2  # ::
IPV6_MAX_LENGTH: Final[int] = 39  # 2001:0db8:85a3:0000:0000:8a2e:0370:7334
IPV6_MIN_GROUPS: Final[int] = 3
IPV6_MAX_GROUPS: Final[int] = 8
IPV6_MAX_HEXTET_LENGTH: Final[int] = 4

USER_ID_MAX_LENGTH: Final[int] = 100
USER_ID_EXTRA_CHARS: Final[frozenset[str]] = frozenset({"-", "_", ".", ":", "|"})

NANO_ID_LENGTH: Final[int] = 21
# URL-safe symbols without "-".
NANO_ID_ALPHABET: Final[str] = "_0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

LONG_ID_MIN: Final[int] = -(1 << 63)
LONG_ID_MAX: Final[int] = (1 << 63) - 1

PERSONAL_IDENTITY_CODE_LENGTH: Final[int] = 11
PERSONAL_IDENTITY_CODE_CHECKSUM_ALPHABET: Final[str] = "0123456789ABCDEFHJKLMNPRSTUVWXY"
CENTURY_BY_MARKER: Final[dict[str, int]] = {"+": 1800, "-": 1900, "A": 2000}

CITY_NAME_MAX_LENGTH: Final[int] = 100
STREET_NAME_MAX_LENGTH: Final[int] = 100
STREET_NUMBER_MAX_LENGTH: Final[int] = 10
SECONDARY_ADDRESS_DESIGNATOR_MAX_LENGTH: Final[int] = 20
ZIP_CODE_MIN_LENGTH: Final[int] = 5
ZIP_CODE_MAX_LENGTH: Final[int] = 10

COUNTRY_NAME_MAX_LENGTH: Final[int] = 100
ISO_COUNTRY_CODE_LENGTH: Final[int] = 2

# Address discriminator values.
US_ADDRESS_FORMAT: Final[str] = "US"
GENERIC_ADDRESS_FORMAT: Final[str] = "GenericAddress"
ADDRESS_FORMAT_FIELD: Final[str] = "format"

__all__ = [
    "ADDRESS_FORMAT_FIELD",
    "CENTURY_BY_MARKER",
    "CITY_NAME_MAX_LENGTH",
    "COUNTRY_NAME_MAX_LENGTH",
    "DOMAIN_LABEL_MAX_LENGTH",
    "DOMAIN_NAME_MAX_LENGTH",
    "EMAIL_DOMAIN_MAX_LENGTH",
    "EMAIL_IPV6_LITERAL_PREFIX",
    "EMAIL_LOCAL_PART_MAX_LENGTH",
    "EMAIL_MAX_LENGTH",
    "GENERIC_ADDRESS_FORMAT",
    "IPV4_MAX_LENGTH",
    "IPV4_MIN_LENGTH",
    "IPV6_MAX_GROUPS",
    "IPV6_MAX_HEXTET_LENGTH",
    "IPV6_MAX_LENGTH",
    "IPV6_MIN_GROUPS",
    "IPV6_MIN_LENGTH",
    "ISO_COUNTRY_CODE_LENGTH",
    "LONG_ID_MAX",
    "LONG_ID_MIN",
    "NANO_ID_ALPHABET",
    "NANO_ID_LENGTH",
    "PERSONAL_IDENTITY_CODE_CHECKSUM_ALPHABET",
    "PERSONAL_IDENTITY_CODE_LENGTH",
    "PHONE_NUMBER_FORMATTING_CHARS",
    "PHONE_NUMBER_MAX_LENGTH",
    "SECONDARY_ADDRESS_DESIGNATOR_MAX_LENGTH",
    "STREET_NAME_MAX_LENGTH",
    "STREET_NUMBER_MAX_LENGTH",
    "USER_ID_EXTRA_CHARS",
    "USER_ID_MAX_LENGTH",
    "US_ADDRESS_FORMAT",
    "ZIP_CODE_MAX_LENGTH",
    "ZIP_CODE_MIN_LENGTH",
]
