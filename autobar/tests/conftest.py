from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from tree_helpers import write_tree


@pytest.fixture(autouse=True)
def _isolate_autobar_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.upper().startswith("AUTOBAR_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def docs_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    def _make(files: dict[str, str]) -> Path:
        return write_tree(tmp_path / "docs", files)

    return _make
