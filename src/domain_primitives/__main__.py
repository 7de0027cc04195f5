"""Module entrypoint for ``python -m domain_primitives``."""

from __future__ import annotations

from domain_primitives.main import cli_entrypoint

if __name__ == "__main__":
    raise SystemExit(cli_entrypoint())
