"""Directory reader interface for autobar navigation resolution."""

from abc import ABC, abstractmethod
from pathlib import Path


class DirectoryReader(ABC):
    """Read-only view of a documentation tree.

    Navigation builders only ever list, test and read; they never write
    back. Implementations may be backed by the local filesystem or by an
    in-memory tree in tests.
    """

    @abstractmethod
    def list_entries(self, path: Path) -> list[str]:
        """Return the names of the entries directly inside ``path``."""
        ...

    @abstractmethod
    def is_directory(self, path: Path) -> bool:
        """Return True when ``path`` is a directory."""
        ...

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Return True when ``path`` exists."""
        ...

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Return the UTF-8 decoded content of the file at ``path``.

        Invalid byte sequences are replaced rather than raising.
        """
        ...

    def list_directories(self, path: Path) -> list[str]:
        """Return the sorted names of the subdirectories of ``path``."""
        return sorted(
            name for name in self.list_entries(path) if self.is_directory(path / name)
        )
