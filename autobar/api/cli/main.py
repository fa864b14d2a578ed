"""Entry point for the `autobar` console script."""

from __future__ import annotations

import sys

from autobar.api.cli.commands.resolve import configure_logging, resolve_command
from autobar.api.cli.parsers.autobar_parser import create_parser


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args)
    return resolve_command(args)


if __name__ == "__main__":
    sys.exit(main())
