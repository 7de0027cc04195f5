"""
domain-primitives validators public API.

File: src/domain_primitives/validators/__init__.py

Purpose
- Export the pure ``is_valid_<kind>`` predicates used by every value type.

Functional requirements
- Validators are total: any object is accepted and non-strings return ``False``.
- Validators never raise and never log.
"""

from domain_primitives.validators.finland import (
    is_valid_personal_identity_code,
    personal_identity_code_checksum,
)
from domain_primitives.validators.identifiers import (
    is_valid_long_id,
    is_valid_nano_id,
    is_valid_phone_number,
    is_valid_user_id,
)
from domain_primitives.validators.network import (
    is_valid_domain_name,
    is_valid_email_address,
    is_valid_ip_address,
    is_valid_ipv4,
    is_valid_ipv6,
)
from domain_primitives.validators.postal import (
    is_iso_country_code_shape,
    is_valid_city_name,
    is_valid_country_name,
    is_valid_secondary_address_designator,
    is_valid_street_name,
    is_valid_street_number,
    is_valid_zip_code,
)

__all__ = [
    "is_iso_country_code_shape",
    "is_valid_city_name",
    "is_valid_country_name",
    "is_valid_domain_name",
    "is_valid_email_address",
    "is_valid_ip_address",
    "is_valid_ipv4",
    "is_valid_ipv6",
    "is_valid_long_id",
    "is_valid_nano_id",
    "is_valid_personal_identity_code",
    "is_valid_phone_number",
    "is_valid_secondary_address_designator",
    "is_valid_street_name",
    "is_valid_street_number",
    "is_valid_user_id",
    "is_valid_zip_code",
    "personal_identity_code_checksum",
]
