"""argparse command router for the ``domain-primitives`` CLI."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Final

from domain_primitives.config import PrimitivesSettings, load_settings
from domain_primitives.domain import (
    DomainName,
    EmailAddress,
    Ipv4,
    Ipv6,
    LongId,
    NanoId,
    PersonalIdentityCode,
    PhoneNumber,
    UserId,
    VerifiedEmailAddress,
    ip_address,
)
from domain_primitives.domain.geo import (
    CityName,
    IsoCountry,
    NamedCountry,
    SecondaryAddressDesignator,
    StreetName,
    StreetNumber,
    USStateAndTerritory,
    ZipCode,
    address_from_json,
    country_display_name,
    country_of,
    iso_countries,
    to_generic_address,
)
from domain_primitives.errors import PrimitiveError
from domain_primitives.observability import configure_logging

_MAX_GENERATE_COUNT: Final[int] = 10_000


@dataclass(frozen=True, slots=True)
class CLIError(RuntimeError):
    """Typed CLI failure with an explicit process exit code."""

    message: str
    exit_code: int = 1

    def __str__(self) -> str:
        return self.message


def _canonical(factory: Callable[[str], object]) -> Callable[[str], str]:
    return lambda raw: str(factory(raw))


VALIDATORS: Final[Mapping[str, Callable[[str], str]]] = {
    "city": _canonical(CityName),
    "country": _canonical(country_of),
    "domain": _canonical(DomainName),
    "email": _canonical(EmailAddress),
    "ip": _canonical(ip_address),
    "ipv4": _canonical(Ipv4),
    "ipv6": _canonical(Ipv6),
    "iso-country": _canonical(IsoCountry),
    "long-id": _canonical(LongId.parse),
    "nano-id": _canonical(NanoId),
    "country-name": _canonical(NamedCountry),
    "personal-identity-code": _canonical(PersonalIdentityCode),
    "phone": _canonical(PhoneNumber),
    "secondary-designator": _canonical(SecondaryAddressDesignator),
    "state": lambda raw: USStateAndTerritory.from_code(raw).value,
    "street-name": _canonical(StreetName),
    "street-number": _canonical(StreetNumber),
    "user-id": _canonical(UserId),
    "verified-email": _canonical(VerifiedEmailAddress),
    "zip": _canonical(ZipCode),
}


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse command router for all supported CLI workflows."""

    parser = argparse.ArgumentParser(
        prog="domain-primitives",
        description=(
            "domain-primitives: validate, canonicalize and generate domain values.\n\n"
            "Common workflows:\n"
            "  domain-primitives validate phone '+358 40 123 456'\n"
            "  domain-primitives generate nanoid --count 3\n"
            "  domain-primitives countries --locale de\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Path to a settings TOML file (default: ./domain_primitives.toml if present).",
    )
    common.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Emit machine-readable JSON.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser(
        "validate",
        parents=[common],
        help="Validate a value and print its canonical form.",
    )
    validate_parser.add_argument("kind", choices=sorted(VALIDATORS))
    validate_parser.add_argument("value")
    validate_parser.set_defaults(handler=_cmd_validate)

    generate_parser = subparsers.add_parser(
        "generate",
        parents=[common],
        help="Generate random identifiers.",
    )
    generate_parser.add_argument("kind", choices=["nanoid"])
    generate_parser.add_argument("--count", type=int, default=1)
    generate_parser.set_defaults(handler=_cmd_generate)

    countries_parser = subparsers.add_parser(
        "countries",
        parents=[common],
        help="List ISO 3166-1 countries with display names.",
    )
    countries_parser.add_argument(
        "--locale",
        default=None,
        help="Display locale (default: the configured display_locale).",
    )
    countries_parser.set_defaults(handler=_cmd_countries)

    address_parser = subparsers.add_parser(
        "address",
        parents=[common],
        help="Print the generic display lines of an address JSON payload.",
    )
    address_parser.add_argument("payload", help="Address JSON with a 'format' field.")
    address_parser.set_defaults(handler=_cmd_address)

    return parser


# ---------------------------------------------------------------------------
# Entrypoints
# ---------------------------------------------------------------------------


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Parse argv, route to a command handler, and return process exit code."""

    parser = build_parser()
    namespace = parser.parse_args(list(argv) if argv is not None else None)
    handler = getattr(namespace, "handler", None)
    if not callable(handler):
        parser.print_help(sys.stderr)
        return 2

    # Route events emitted while loading settings through the default handler.
    configure_logging(PrimitivesSettings())
    settings = load_settings(namespace.config_path)
    configure_logging(settings)

    try:
        result = handler(namespace, settings)
    except CLIError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return exc.exit_code
    except PrimitiveError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return int(result)


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _cmd_validate(args: argparse.Namespace, settings: PrimitivesSettings) -> int:
    canonical = VALIDATORS[args.kind](args.value)
    if args.json:
        _emit_json({"command": "validate", "kind": args.kind, "canonical": canonical})
    else:
        print(canonical)
    return 0


def _cmd_generate(args: argparse.Namespace, settings: PrimitivesSettings) -> int:
    count = args.count
    if not 1 <= count <= _MAX_GENERATE_COUNT:
        raise CLIError(f"--count must be between 1 and {_MAX_GENERATE_COUNT}", exit_code=2)
    values = [str(NanoId.random()) for _ in range(count)]
    if args.json:
        _emit_json({"command": "generate", "kind": args.kind, "values": values})
    else:
        for value in values:
            print(value)
    return 0


def _cmd_countries(args: argparse.Namespace, settings: PrimitivesSettings) -> int:
    locale = settings.display_locale if args.locale is None else args.locale
    try:
        rows = [(country.iso_code, country.display_name(locale)) for country in iso_countries()]
    except ValueError as exc:
        raise CLIError(str(exc), exit_code=2) from exc
    if args.json:
        _emit_json(
            {
                "command": "countries",
                "locale": locale,
                "countries": [{"code": code, "name": name} for code, name in rows],
            }
        )
    else:
        for code, name in rows:
            print(f"{code}\t{name}")
    return 0


def _cmd_address(args: argparse.Namespace, settings: PrimitivesSettings) -> int:
    generic = to_generic_address(address_from_json(args.payload))
    if args.json:
        _emit_json({"command": "address", "address": generic.to_dict()})
        return 0
    for line in generic.lines:
        print(line)
    print(country_display_name(generic.country, settings.display_locale))
    return 0


# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------


def _emit_json(payload: Mapping[str, object]) -> None:
    """Emit a JSON payload to stdout with deterministic formatting."""

    print(json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False))


__all__ = ["CLIError", "VALIDATORS", "build_parser", "run_cli"]
