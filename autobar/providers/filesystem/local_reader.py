"""Local filesystem implementation of the directory reader."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from loguru import logger

from autobar.interfaces.directory_reader import DirectoryReader


class LocalDirectoryReader(DirectoryReader):
    """DirectoryReader backed by the local filesystem.

    Symlinked directories are reported as regular entries (``lstat``) so a
    link cycle cannot send the traversal into an endless loop.
    """

    def list_entries(self, path: Path) -> list[str]:
        try:
            return sorted(os.listdir(path))
        except FileNotFoundError:
            logger.debug(f"Directory not found while listing: {path}")
            return []

    def is_directory(self, path: Path) -> bool:
        try:
            return stat.S_ISDIR(path.lstat().st_mode)
        except FileNotFoundError:
            return False

    def exists(self, path: Path) -> bool:
        return path.exists()

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8", errors="replace")
