"""Helpers for building documentation trees in tests."""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from autobar.interfaces.directory_reader import DirectoryReader


def page(order: int | float | None = None, title: str | None = None) -> str:
    """Markdown text with optional front matter."""
    meta: list[str] = []
    if order is not None:
        meta.append(f"order: {order}")
    if title is not None:
        meta.append(f"title: {title}")
    body = f"# {title or 'Page'}\n\nSome text.\n"
    if not meta:
        return body
    return "---\n" + "\n".join(meta) + "\n---\n\n" + body


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create ``files`` below ``root``; keys ending in ``/`` create directories."""
    root.mkdir(parents=True, exist_ok=True)
    for rel, content in files.items():
        path = root / rel
        if rel.endswith("/"):
            path.mkdir(parents=True, exist_ok=True)
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


class MemoryDirectoryReader(DirectoryReader):
    """In-memory tree keyed by posix paths relative to ``root``."""

    def __init__(self, root: Path, files: dict[str, str]) -> None:
        self.root = root
        self.files = {
            key: value for key, value in files.items() if not key.endswith("/")
        }
        self.dirs = {""}
        for key in files:
            parts = PurePosixPath(key.rstrip("/")).parts
            upto = len(parts) if key.endswith("/") else len(parts) - 1
            for idx in range(1, upto + 1):
                self.dirs.add("/".join(parts[:idx]))
        self.reads: list[str] = []

    def _rel(self, path: Path) -> str:
        rel = path.relative_to(self.root).as_posix()
        return "" if rel == "." else rel

    def list_entries(self, path: Path) -> list[str]:
        rel = self._rel(path)
        prefix = f"{rel}/" if rel else ""
        names = set()
        for key in [*self.files, *self.dirs]:
            if key and key.startswith(prefix):
                names.add(key[len(prefix) :].split("/", 1)[0])
        return sorted(names)

    def is_directory(self, path: Path) -> bool:
        return self._rel(path) in self.dirs

    def exists(self, path: Path) -> bool:
        rel = self._rel(path)
        return rel in self.dirs or rel in self.files

    def read_text(self, path: Path) -> str:
        rel = self._rel(path)
        self.reads.append(rel)
        return self.files[rel]


