"""Filesystem-backed directory readers."""

from .local_reader import LocalDirectoryReader

__all__ = ["LocalDirectoryReader"]
