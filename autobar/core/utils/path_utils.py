"""Path utility functions for autobar.

Relative paths handed around the traversal are posix strings so that page
identifiers and navbar links look the same on every platform.
"""

import posixpath
from pathlib import Path, PurePosixPath


def normalize_root(root_dir: str | Path) -> Path:
    """Normalize the corpus root (``~`` expanded, trailing separators removed).

    Args:
        root_dir: Absolute or resolvable directory path

    Returns:
        Normalized root path
    """
    return Path(root_dir).expanduser()


def join_relative(relative_dir: str, name: str) -> str:
    """Join a relative posix directory with a child name.

    Leading slashes are kept, so ``join_relative("/", "nav-a")`` gives
    ``"/nav-a"`` and ``join_relative("", "guide")`` gives ``"guide"``.
    """
    if not relative_dir:
        return name
    return posixpath.join(relative_dir, name)


def resolve_under_root(root_dir: Path, relative_dir: str) -> Path:
    """Map a relative posix directory (possibly starting with ``/``) below root."""
    stripped = relative_dir.strip("/")
    if not stripped:
        return root_dir
    return root_dir.joinpath(*PurePosixPath(stripped).parts)


def get_relative_posix(path: Path, base_dir: Path) -> str:
    """Get the posix path of ``path`` relative to ``base_dir``.

    Args:
        path: File path below base_dir
        base_dir: Base directory for relative path calculation

    Returns:
        Relative path with forward slashes

    Raises:
        ValueError: If path is not under base_dir
    """
    try:
        return path.relative_to(base_dir).as_posix()
    except ValueError:
        raise ValueError(
            f"Path {path} is not under base directory {base_dir}. "
            f"This indicates a traversal issue."
        )


def last_segment(path: str) -> str:
    """Return the last non-empty component of a posix or native path."""
    stripped = path.replace("\\", "/").rstrip("/")
    return stripped.rsplit("/", 1)[-1]
