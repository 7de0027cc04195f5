"""
domain-primitives: property tests for value type laws

File: tests/unit/domain/test_properties.py

Purpose
- Check laws every value type must obey, over generated inputs.

What this test file should cover
- Canonicalization is idempotent: rebuilding from the stored value is a no-op.
- Free-text address fields store the stripped text.
- Equal values hash equal.
- JSON encoding decodes back to an equal value.

Non-functional requirements
- Deterministic (derandomized) and fast.
"""

from __future__ import annotations

import string

from hypothesis import given, settings
from hypothesis import strategies as st

from domain_primitives import (
    CityName,
    DomainName,
    Ipv4,
    Ipv6,
    LongId,
    NanoId,
    PersonalIdentityCode,
    PhoneNumber,
    SecondaryAddressDesignator,
    StreetName,
    StreetNumber,
    StringPrimitive,
    UserId,
)
from domain_primitives.constants import (
    CENTURY_BY_MARKER,
    LONG_ID_MAX,
    LONG_ID_MIN,
    NANO_ID_ALPHABET,
    NANO_ID_LENGTH,
)
from domain_primitives.validators import personal_identity_code_checksum

_NANO_IDS = st.text(alphabet=NANO_ID_ALPHABET, min_size=NANO_ID_LENGTH, max_size=NANO_ID_LENGTH)
_USER_IDS = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_.:|",
    min_size=1,
    max_size=100,
)
_IPV4 = st.tuples(*[st.integers(min_value=0, max_value=255)] * 4).map(
    lambda octets: ".".join(str(octet) for octet in octets)
)


@st.composite
def _formatted_phone_numbers(draw: st.DrawFn) -> tuple[str, str]:
    international = draw(st.booleans())
    digits = draw(st.text(alphabet="0123456789", min_size=1, max_size=15))
    formatted = []
    for char in digits:
        formatted.append(draw(st.sampled_from(["", " ", "-", ".", "(", ")"])))
        formatted.append(char)
    prefix = "+" if international else ""
    return prefix + "".join(formatted), prefix + digits


_SETTINGS = settings(max_examples=75, derandomize=True, deadline=None)


@given(raw=_NANO_IDS)
@_SETTINGS
def test_property_nano_id_laws(raw: str) -> None:
    value = NanoId(raw)
    assert NanoId(value.value) == value
    assert hash(NanoId(raw)) == hash(value)
    assert NanoId.from_json(value.to_json()) == value


@given(raw=_USER_IDS)
@_SETTINGS
def test_property_user_id_laws(raw: str) -> None:
    value = UserId(raw)
    assert UserId(value.value) == value
    assert UserId.from_json(value.to_json()) == value


@given(pair=_formatted_phone_numbers())
@_SETTINGS
def test_property_phone_canonicalization_is_idempotent(pair: tuple[str, str]) -> None:
    formatted, expected = pair
    value = PhoneNumber(formatted)
    assert value.value == expected
    assert PhoneNumber(value.value) == value
    assert hash(PhoneNumber(expected)) == hash(value)


@given(raw=_IPV4)
@_SETTINGS
def test_property_ipv4_laws(raw: str) -> None:
    value = Ipv4(raw)
    assert value.value == raw
    assert Ipv4.from_json(value.to_json()) == value


@given(number=st.integers(min_value=LONG_ID_MIN, max_value=LONG_ID_MAX))
@_SETTINGS
def test_property_long_id_laws(number: int) -> None:
    value = LongId(number)
    assert LongId.parse(str(value)) == value
    assert LongId.from_json(value.to_json()) == value
    assert hash(LongId(number)) == hash(value)


_LETTERS = string.ascii_letters + "äöåéñ"
_PADDING = st.text(alphabet=" \t\n", max_size=3)


def _stripped_text(alphabet: str, max_size: int) -> st.SearchStrategy[str]:
    return st.text(alphabet=alphabet, min_size=1, max_size=max_size).map(str.strip).filter(bool)


_FREE_TEXT_FIELDS: list[tuple[type[StringPrimitive], st.SearchStrategy[str]]] = [
    (CityName, _stripped_text(_LETTERS + " .'", 80)),
    (
        StreetName,
        _stripped_text(_LETTERS + string.digits + " .'", 80).filter(
            lambda text: not text.isdecimal()
        ),
    ),
    (SecondaryAddressDesignator, _stripped_text(_LETTERS + string.digits + " -.#/", 20)),
    (StreetNumber, st.from_regex(r"[0-9]{1,4}[A-Z]?(-[0-9]{1,3})?", fullmatch=True)),
]


@st.composite
def _padded_free_text(draw: st.DrawFn) -> tuple[type[StringPrimitive], str, str]:
    field_type, core_strategy = draw(st.sampled_from(_FREE_TEXT_FIELDS))
    core = draw(core_strategy)
    return field_type, draw(_PADDING) + core + draw(_PADDING), core


_DOMAIN_LABELS = st.from_regex(r"[A-Za-z0-9]([A-Za-z0-9-]{0,10}[A-Za-z0-9])?", fullmatch=True)
_DOMAIN_NAMES = st.lists(_DOMAIN_LABELS, min_size=1, max_size=4).map(".".join)
_HEXTETS = st.text(alphabet=string.hexdigits, min_size=1, max_size=4)


@st.composite
def _ipv6_addresses(draw: st.DrawFn) -> str:
    groups = draw(st.lists(_HEXTETS, min_size=8, max_size=8))
    if not draw(st.booleans()):
        return ":".join(groups)
    compressed = draw(st.integers(min_value=2, max_value=8))
    start = draw(st.integers(min_value=0, max_value=8 - compressed))
    return ":".join(groups[:start]) + "::" + ":".join(groups[start + compressed :])


@st.composite
def _personal_identity_codes(draw: st.DrawFn) -> str:
    birth_date = draw(st.from_regex(r"[0-9]{6}", fullmatch=True))
    individual = draw(st.from_regex(r"[0-9]{3}", fullmatch=True))
    marker = draw(st.sampled_from(sorted(CENTURY_BY_MARKER)))
    check = personal_identity_code_checksum(birth_date, individual)
    return f"{birth_date}{marker}{individual}{check}"


@given(case=_padded_free_text())
@_SETTINGS
def test_property_free_text_fields_store_stripped_text(
    case: tuple[type[StringPrimitive], str, str],
) -> None:
    field_type, raw, core = case
    value = field_type(raw)
    assert value.value == core
    assert field_type(value.value) == value
    assert hash(field_type(core)) == hash(value)
    assert field_type.from_json(value.to_json()) == value


@given(raw=_DOMAIN_NAMES)
@_SETTINGS
def test_property_domain_name_laws(raw: str) -> None:
    value = DomainName(raw)
    assert value.value == raw
    assert DomainName(value.value) == value
    assert hash(DomainName(raw)) == hash(value)
    assert DomainName.from_json(value.to_json()) == value


@given(raw=_ipv6_addresses())
@_SETTINGS
def test_property_ipv6_laws(raw: str) -> None:
    value = Ipv6(raw)
    assert value.value == raw
    assert Ipv6(value.value) == value
    assert hash(Ipv6(raw)) == hash(value)
    assert Ipv6.from_json(value.to_json()) == value


@given(raw=_personal_identity_codes())
@_SETTINGS
def test_property_personal_identity_code_laws(raw: str) -> None:
    value = PersonalIdentityCode(raw)
    assert value.value == raw
    assert PersonalIdentityCode(value.value) == value
    assert hash(PersonalIdentityCode(raw)) == hash(value)
    assert PersonalIdentityCode.from_json(value.to_json()) == value
