"""
User and NanoID identifiers, with cryptographically strong NanoID generation.

NanoIDs are drawn from a 63-symbol URL-safe alphabet without ``-``. The
generator uses the usual mask-and-step rejection sampling: random bytes are
masked to the smallest power-of-two range covering the alphabet and values
outside the alphabet are discarded, which keeps every symbol equally likely.
"""

from __future__ import annotations

import logging
import math
import random
import secrets
from collections.abc import Callable
from dataclasses import dataclass
from typing import Final, TypeVar

import structlog

from domain_primitives.constants import NANO_ID_ALPHABET, NANO_ID_LENGTH
from domain_primitives.domain.base import StringPrimitive
from domain_primitives.validators import is_valid_nano_id, is_valid_user_id

_RandBytes = Callable[[int], bytes]

TNanoId = TypeVar("TNanoId", bound="NanoId")

_MASK: Final[int] = (2 << int(math.log2(len(NANO_ID_ALPHABET) - 1))) - 1
_STEP: Final[int] = math.ceil(1.6 * _MASK * NANO_ID_LENGTH / len(NANO_ID_ALPHABET))

_logger = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)
_weak_random = random.Random()


@dataclass(frozen=True, slots=True)
class UserId(StringPrimitive):
    """Identifier of a user in an external identity system.

    Use the stable subject identifier of the identity provider, not a username
    or an e-mail address, since those can change.
    """

    KIND = "user id"

    @classmethod
    def validate(cls, canonical: str) -> bool:
        return is_valid_user_id(canonical)

    @property
    def name(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class NanoId(StringPrimitive):
    """A 21 character NanoID.

    Subclass it for typed IDs; ``random()`` returns an instance of the class it
    is called on and IDs of different classes never compare equal.
    """

    KIND = "nano id"

    @classmethod
    def validate(cls, canonical: str) -> bool:
        return is_valid_nano_id(canonical)

    @classmethod
    def random(cls: type[TNanoId], *, randbytes: _RandBytes | None = None) -> TNanoId:
        return cls(generate_nano_id(randbytes=randbytes))


def generate_nano_id(*, randbytes: _RandBytes | None = None) -> str:
    """Generate a new NanoID string.

    ``randbytes`` replaces the entropy source, mainly for tests. Without it
    :func:`secrets.token_bytes` is used, falling back to a non-cryptographic
    generator when the platform provides no strong source.
    """
    provider = _strong_random_bytes if randbytes is None else randbytes
    alphabet_size = len(NANO_ID_ALPHABET)
    chars: list[str] = []
    while True:
        chunk = _checked_bytes(provider(_STEP))
        for byte in chunk:
            index = byte & _MASK
            if index < alphabet_size:
                chars.append(NANO_ID_ALPHABET[index])
                if len(chars) == NANO_ID_LENGTH:
                    return "".join(chars)


def _strong_random_bytes(count: int) -> bytes:
    try:
        return secrets.token_bytes(count)
    except NotImplementedError:
        _logger.warning("nano_id_weak_random_fallback", requested_bytes=count)
        return _weak_random.randbytes(count)


def _checked_bytes(raw: object) -> bytes:
    if not isinstance(raw, (bytes, bytearray, memoryview)):
        raise ValueError("randbytes must return a bytes-like object")
    as_bytes = bytes(raw)
    if len(as_bytes) != _STEP:
        raise ValueError(f"randbytes must return exactly {_STEP} bytes")
    return as_bytes


__all__ = ["NanoId", "UserId", "generate_nano_id"]
