"""Finnish personal identity code value type."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from domain_primitives.constants import CENTURY_BY_MARKER
from domain_primitives.domain.base import StringPrimitive
from domain_primitives.validators import is_valid_personal_identity_code


@dataclass(frozen=True, slots=True, repr=False)
class PersonalIdentityCode(StringPrimitive):
    """A Finnish personal identity code in ``DDMMYYsNNNC`` form, e.g. ``010190-935U``.

    The code is personal data. It is never echoed in error messages and
    ``repr()`` masks everything after the birth date. ``str()`` still returns
    the full code since storage and transport need it.
    """

    KIND = "personal identity code"
    SENSITIVE = True

    @classmethod
    def validate(cls, canonical: str) -> bool:
        return is_valid_personal_identity_code(canonical)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value='{self.value[:7]}****')"

    @property
    def birth_year(self) -> int:
        return CENTURY_BY_MARKER[self.value[6]] + int(self.value[4:6])

    def is_same_birthdate_as(self, birth_date: date) -> bool:
        """Return whether the holder of this code was born on ``birth_date``."""
        return (
            birth_date.day == int(self.value[0:2])
            and birth_date.month == int(self.value[2:4])
            and birth_date.year == self.birth_year
        )


__all__ = ["PersonalIdentityCode"]
