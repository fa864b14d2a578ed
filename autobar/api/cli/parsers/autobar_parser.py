"""autobar command argument parser."""

import argparse
from pathlib import Path

from autobar.core.config.bar_config import BarConfig


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add arguments common to all commands.

    Args:
        parser: Argument parser to add common arguments to
    """
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Configuration file path (YAML or JSON)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the `autobar` command."""
    parser = argparse.ArgumentParser(
        prog="autobar",
        description=(
            "Derive navbar and sidebar config for a documentation site from "
            "its directory layout and page front matter."
        ),
    )

    parser.add_argument(
        "root_dir",
        metavar="root-dir",
        type=Path,
        help="Root directory of the markdown documentation tree.",
    )

    parser.add_argument(
        "--out",
        "-o",
        type=Path,
        default=None,
        help="Write the JSON config to this file instead of stdout.",
    )

    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2).",
    )

    add_common_arguments(parser)
    BarConfig.add_cli_arguments(parser)
    return parser
