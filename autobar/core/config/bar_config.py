"""
Navigation resolution configuration for autobar.

This module provides the immutable options snapshot passed through every
recursive navbar/sidebar call, with support for multiple configuration
sources (environment variables, config files, CLI arguments).
"""

import argparse
import json
import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_CAMEL_BOUNDARY_RE = re.compile(r"(?<!^)(?=[A-Z])")

# camelCase keys that do not map 1:1 onto snake_case field names.
_KEY_ALIASES = {
    "add_read_me_to_first_group": "add_readme_to_first_group",
}


def _to_field_name(key: str) -> str:
    snake = _CAMEL_BOUNDARY_RE.sub("_", key).replace("-", "_").lower()
    return _KEY_ALIASES.get(snake, snake)


class BarConfig(BaseSettings):
    """
    Options for deriving navbar and sidebar config from a docs tree.

    Configuration Sources (in order of precedence):
    1. CLI arguments
    2. Environment variables (AUTOBAR_*)
    3. Config files
    4. Default values

    Environment Variables:
        AUTOBAR_MAX_LEVEL=2
        AUTOBAR_NAV_PREFIX=nav
        AUTOBAR_MULTIPLE_SIDE_BAR=true
        AUTOBAR_PINYIN_NAV=false
    """

    model_config = SettingsConfigDict(
        env_prefix="AUTOBAR_",
        case_sensitive=False,
        validate_default=True,
        frozen=True,
        extra="ignore",  # Ignore unknown fields for forward compatibility
    )

    strip_numbers: bool = Field(
        default=True,
        description="Remove leading ordering numbers (e.g. '01-') from titles",
    )

    max_level: int = Field(
        default=2,
        ge=1,
        description=(
            "Deepest directory level rendered as a sidebar group; deeper "
            "pages are flattened into their ancestor group"
        ),
    )

    nav_prefix: str = Field(
        default="nav",
        description=(
            "Directory name prefix marking navbar sections (empty string "
            "disables the navbar)"
        ),
    )

    skip_empty_sidebar: bool = Field(
        default=True,
        description="Drop sidebar groups and sidebars without any page",
    )

    skip_empty_navbar: bool = Field(
        default=True,
        description=(
            "Silently drop navbar leaves without README.md instead of failing"
        ),
    )

    multiple_side_bar: bool = Field(
        default=True,
        description="Build one sidebar per navbar link instead of a global one",
    )

    add_readme_to_first_group: bool = Field(
        default=True,
        description="Move the root README page into the first sidebar group",
    )

    mix_directories_and_files_alphabetically: bool = Field(
        default=True,
        description=(
            "Interleave sidebar groups among pages by name instead of "
            "appending them after all pages"
        ),
    )

    pinyin_nav: bool = Field(
        default=False,
        description="Transliterate navbar links into URL-safe slugs",
    )

    @field_validator("nav_prefix")
    def validate_nav_prefix(cls, value: str) -> str:  # noqa: N805
        """Normalize surrounding whitespace in the navbar prefix."""
        return value.strip()

    @property
    def has_navbar(self) -> bool:
        """True when a navbar prefix is configured."""
        return bool(self.nav_prefix)

    @classmethod
    def add_cli_arguments(cls, parser: argparse.ArgumentParser) -> None:
        """Add navigation option CLI arguments."""
        parser.add_argument(
            "--max-level",
            type=int,
            help="Deepest directory level rendered as a sidebar group (default: 2)",
        )

        parser.add_argument(
            "--nav-prefix",
            type=str,
            help=(
                "Directory prefix marking navbar sections (default: 'nav'; "
                "pass '' to disable the navbar)"
            ),
        )

        parser.add_argument(
            "--no-strip-numbers",
            action="store_true",
            help="Keep leading ordering numbers in titles",
        )

        parser.add_argument(
            "--keep-empty-sidebar",
            action="store_true",
            help="Keep sidebar groups that contain no pages",
        )

        parser.add_argument(
            "--keep-empty-navbar",
            action="store_true",
            help="Fail on navbar directories without README.md instead of skipping",
        )

        parser.add_argument(
            "--single-sidebar",
            action="store_true",
            help="Build a single global sidebar even when a navbar exists",
        )

        parser.add_argument(
            "--readme-on-top",
            action="store_true",
            help="Keep the root README as a top-level sidebar link",
        )

        parser.add_argument(
            "--no-mix",
            action="store_true",
            help="Append sidebar groups after pages instead of sorting them in",
        )

        parser.add_argument(
            "--pinyin-nav",
            action="store_true",
            help="Transliterate navbar links into URL-safe slugs",
        )

    @classmethod
    def load_from_env(cls) -> dict[str, Any]:
        """Load navigation options from environment variables."""
        config: dict[str, Any] = {}
        for name in cls.model_fields:
            value = os.getenv(f"AUTOBAR_{name.upper()}")
            if value is not None:
                config[name] = value
        return config

    @classmethod
    def load_from_file(cls, path: Path) -> dict[str, Any]:
        """Load navigation options from a YAML or JSON mapping file.

        camelCase keys (``maxLevel``, ``skipEmptyNavbar``) are accepted next
        to snake_case ones. Unknown keys are dropped.
        """
        text = Path(path).read_text(encoding="utf-8")
        if Path(path).suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")

        config: dict[str, Any] = {}
        for key, value in data.items():
            name = _to_field_name(str(key))
            if name in cls.model_fields:
                config[name] = value
        return config

    @classmethod
    def extract_cli_overrides(cls, args: Any) -> dict[str, Any]:
        """Extract navigation options from CLI arguments."""
        overrides: dict[str, Any] = {}

        if getattr(args, "max_level", None) is not None:
            overrides["max_level"] = args.max_level
        if getattr(args, "nav_prefix", None) is not None:
            overrides["nav_prefix"] = args.nav_prefix
        if getattr(args, "no_strip_numbers", False):
            overrides["strip_numbers"] = False
        if getattr(args, "keep_empty_sidebar", False):
            overrides["skip_empty_sidebar"] = False
        if getattr(args, "keep_empty_navbar", False):
            overrides["skip_empty_navbar"] = False
        if getattr(args, "single_sidebar", False):
            overrides["multiple_side_bar"] = False
        if getattr(args, "readme_on_top", False):
            overrides["add_readme_to_first_group"] = False
        if getattr(args, "no_mix", False):
            overrides["mix_directories_and_files_alphabetically"] = False
        if getattr(args, "pinyin_nav", False):
            overrides["pinyin_nav"] = True

        return overrides

    @classmethod
    def from_sources(
        cls, config_file: Path | None = None, args: Any = None
    ) -> "BarConfig":
        """Build options from config file, environment and CLI, in that order."""
        merged: dict[str, Any] = {}
        if config_file is not None:
            merged.update(cls.load_from_file(config_file))
        merged.update(cls.load_from_env())
        if args is not None:
            merged.update(cls.extract_cli_overrides(args))
        return cls(**merged)

    def __repr__(self) -> str:
        """String representation of navigation options."""
        return (
            f"BarConfig("
            f"nav_prefix={self.nav_prefix!r}, "
            f"max_level={self.max_level}, "
            f"strip_numbers={self.strip_numbers}, "
            f"multiple_side_bar={self.multiple_side_bar}, "
            f"skip_empty_sidebar={self.skip_empty_sidebar}, "
            f"skip_empty_navbar={self.skip_empty_navbar})"
        )
