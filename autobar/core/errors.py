"""Error types raised while resolving navigation config."""

from __future__ import annotations

from pathlib import Path


class ConfigurationError(Exception):
    """Raised when the directory layout cannot produce a usable config.

    The main case is a navbar leaf directory without an index page
    (``README.md``): the site would answer that navbar link with a 404.
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        return self.message


def missing_index_error(directory: Path) -> ConfigurationError:
    return ConfigurationError(
        f"README.md file cannot be found in {directory}. "
        "The site would return 404 for that navbar link.",
        path=directory,
    )
