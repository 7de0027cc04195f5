"""Error taxonomy raised by domain primitive factories."""

from __future__ import annotations

from typing import Final

_MAX_ECHO_LENGTH: Final[int] = 64


class PrimitiveError(ValueError):
    """Base class for all domain primitive construction failures."""


class InvalidFormat(PrimitiveError):
    """Raised when a raw value fails the validator of a primitive kind.

    ``kind`` names the primitive that rejected the value and ``input`` keeps the
    rejected raw value for callers that need it. Sensitive kinds never echo the
    raw value in the message. ``detail`` replaces the echoed value when the
    failure is structural, for example a JSON payload with unexpected fields.
    """

    def __init__(
        self,
        kind: str,
        input: object,  # noqa: A002
        *,
        sensitive: bool = False,
        detail: str | None = None,
    ) -> None:
        self.kind = kind
        self.input = input
        self.sensitive = sensitive
        self.detail = detail
        super().__init__(_format_message(kind, input, sensitive=sensitive, detail=detail))

    def __reduce__(self) -> tuple[object, ...]:
        return (
            _rebuild_invalid_format,
            (self.kind, self.input, self.sensitive, self.detail),
        )


class MissingRequiredField(PrimitiveError):
    """Raised when a multi-field value is finalized without a required field."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"{field_name} is missing")

    def __reduce__(self) -> tuple[object, ...]:
        return (MissingRequiredField, (self.field_name,))


def _rebuild_invalid_format(
    kind: str,
    input: object,  # noqa: A002
    sensitive: bool,
    detail: str | None,
) -> InvalidFormat:
    return InvalidFormat(kind, input, sensitive=sensitive, detail=detail)


def _format_message(kind: str, value: object, *, sensitive: bool, detail: str | None) -> str:
    if detail is not None:
        return f"invalid {kind}: {detail}"
    if sensitive:
        return f"invalid {kind}"
    if not isinstance(value, str):
        return f"invalid {kind}: unsupported value of type {type(value).__name__}"
    shown = value if len(value) <= _MAX_ECHO_LENGTH else value[:_MAX_ECHO_LENGTH] + "..."
    return f"invalid {kind}: {shown!r}"


__all__ = ["InvalidFormat", "MissingRequiredField", "PrimitiveError"]
