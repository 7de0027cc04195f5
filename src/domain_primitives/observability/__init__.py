"""Public observability primitives: structured logging with personal-data redaction."""

from domain_primitives.observability.logging import (
    configure_logging,
    redact_personal_data,
    redact_text,
)

__all__ = ["configure_logging", "redact_personal_data", "redact_text"]
