"""autobar config resolution command module."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from autobar.api.cli.utils.rich_output import RichOutputFormatter
from autobar.core.config.bar_config import BarConfig
from autobar.core.errors import ConfigurationError
from autobar.navigation.generator import get_config

from .autobar_errors import AutobarCLIExitError


def configure_logging(args: argparse.Namespace) -> None:
    level = "WARNING"
    if getattr(args, "debug", False):
        level = "DEBUG"
    elif getattr(args, "verbose", False):
        level = "INFO"
    logger.remove()
    logger.add(sys.stderr, level=level)


def _render_exit(formatter: RichOutputFormatter, exc: AutobarCLIExitError) -> None:
    for message in exc.infos:
        formatter.info(message)
    for message in exc.warnings:
        formatter.warning(message)
    for message in exc.errors:
        formatter.error(message)


def _load_options(args: argparse.Namespace) -> BarConfig:
    config_file: Path | None = getattr(args, "config", None)
    if config_file is not None and not config_file.is_file():
        raise AutobarCLIExitError(
            exit_code=1, errors=(f"Config file not found: {config_file}",)
        )
    try:
        return BarConfig.from_sources(config_file=config_file, args=args)
    except (ValidationError, ValueError, yaml.YAMLError) as exc:
        raise AutobarCLIExitError(
            exit_code=1, errors=(f"Invalid configuration: {exc}",)
        ) from exc


def resolve_command(args: argparse.Namespace) -> int:
    """Resolve the navigation config of a docs tree and emit it as JSON."""
    formatter = RichOutputFormatter(verbose=bool(getattr(args, "verbose", False)))
    root_dir = Path(args.root_dir).resolve()

    try:
        options = _load_options(args)
        formatter.info(f"Options: {options!r}")
        try:
            config = get_config(root_dir, options)
        except ConfigurationError as exc:
            raise AutobarCLIExitError(exit_code=1, errors=(str(exc),)) from exc

        payload = json.dumps(
            config.to_dict(), ensure_ascii=False, indent=args.indent or None
        )
        out_path: Path | None = getattr(args, "out", None)
        if out_path is None:
            sys.stdout.write(payload + "\n")
        else:
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(payload + "\n", encoding="utf-8")
            formatter.success(f"Navigation config written to {out_path}")
        return 0
    except AutobarCLIExitError as exc:
        _render_exit(formatter, exc)
        return exc.exit_code
