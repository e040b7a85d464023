"""Run the importer with ``python -m contact_importer``."""
from __future__ import annotations

import sys

from . import cli


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if args:
        return cli.main(args)

    # Without a paste source there is nothing to import; show usage instead.
    cli.build_parser(prog="python -m contact_importer").print_help()
    return 2


if __name__ == "__main__":  # pragma: no cover - module entry point
    sys.exit(main())
