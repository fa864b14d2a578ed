from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

import yaml
from loguru import logger

OrderExtractor = Callable[[str], int | float | None]

_FRONT_MATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL
)


def parse_front_matter(text: str) -> dict[str, Any]:
    """Return the YAML front matter mapping at the top of a markdown file.

    Files without front matter, with empty front matter or with front matter
    that is not a mapping yield ``{}``. Invalid YAML is logged and treated
    the same way.
    """
    text = text.lstrip("\ufeff")
    match = _FRONT_MATTER_RE.match(text)
    if not match:
        return {}
    try:
        meta = yaml.safe_load(match.group(1))
    except yaml.YAMLError as exc:
        logger.warning(f"Failed to parse front matter: {exc}")
        return {}
    if not isinstance(meta, dict):
        return {}
    return meta


def extract_order(text: str) -> int | float | None:
    """Return the numeric ``order`` front matter value, if any."""
    order = parse_front_matter(text).get("order")
    if order is None:
        return None
    if isinstance(order, bool) or not isinstance(order, (int, float)):
        logger.warning(f"Ignoring non-numeric front matter order: {order!r}")
        return None
    return order
