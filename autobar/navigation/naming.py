"""Directory and file name parsing.

A raw segment such as ``"nav.02-api--nc,d3"`` carries up to four pieces of
information: a navbar prefix (``nav``), an ordering number (``02``), the
display name (``api``) and inline sidebar parameters after the last
``--`` (``nc,d3``). The functions here split those apart without touching
the filesystem.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from loguru import logger

from autobar.core.utils.path_utils import last_segment
from autobar.utils.text import start_case

INLINE_ARGS_DELIMITER = "--"
_SEPARATORS = ".-_ "
_NUMBER_PREFIX_RE = re.compile(rf"^(\d+)[{re.escape(_SEPARATORS)}]?")
_DEPTH_TOKEN_RE = re.compile(r"^d(\d+)$")


@dataclass(frozen=True)
class SegmentParams:
    collapsable: bool | None = None
    sidebar_depth: int | None = None


@dataclass(frozen=True)
class PathSegment:
    raw: str
    order_prefix: int | None
    base_name: str
    display_title: str
    inline_args: str | None


def split_inline_args(name: str) -> tuple[str, str | None]:
    """Split ``name`` at the last ``--`` into (name, inline args)."""
    idx = name.rfind(INLINE_ARGS_DELIMITER)
    if idx == -1:
        return name, None
    return name[:idx], name[idx + len(INLINE_ARGS_DELIMITER) :]


def _strip_nav_prefix(name: str, nav_prefix: str) -> str:
    if not nav_prefix or not name.startswith(nav_prefix):
        return name
    rest = name[len(nav_prefix) :]
    if rest[:1] and rest[0] in _SEPARATORS:
        rest = rest[1:]
    return rest


def parse_segment(
    segment: str, *, nav_prefix: str = "", strip_numbers: bool = True
) -> PathSegment:
    """Parse a raw directory or file name (extension already removed)."""
    raw = last_segment(segment)
    name, inline_args = split_inline_args(raw)
    name = _strip_nav_prefix(name, nav_prefix)

    order_prefix: int | None = None
    match = _NUMBER_PREFIX_RE.match(name)
    if match:
        order_prefix = int(match.group(1))
        if strip_numbers:
            name = name[match.end() :]

    return PathSegment(
        raw=raw,
        order_prefix=order_prefix,
        base_name=name,
        display_title=start_case(name),
        inline_args=inline_args,
    )


def resolve_name(
    segment: str, *, nav_prefix: str = "", strip_numbers: bool = True
) -> str:
    """Return the human display title for a directory or file name.

    >>> resolve_name("nav.01-getting-started", nav_prefix="nav")
    'Getting Started'
    """
    return parse_segment(
        segment, nav_prefix=nav_prefix, strip_numbers=strip_numbers
    ).display_title


def parse_params(segment: str) -> SegmentParams:
    """Parse inline sidebar parameters (``--nc,d2``) from a folder name.

    ``nc`` marks the group as not collapsable and ``d<N>`` sets its sidebar
    depth. Unknown tokens are ignored.
    """
    _, inline_args = split_inline_args(last_segment(segment))
    if inline_args is None:
        return SegmentParams()

    collapsable: bool | None = None
    sidebar_depth: int | None = None
    for token in inline_args.split(","):
        token = token.strip()
        if not token:
            continue
        if token == "nc":
            collapsable = False
            continue
        depth = _DEPTH_TOKEN_RE.match(token)
        if depth:
            sidebar_depth = int(depth.group(1))
            continue
        logger.debug(f"Ignoring unknown inline parameter {token!r} in {segment!r}")

    return SegmentParams(collapsable=collapsable, sidebar_depth=sidebar_depth)

