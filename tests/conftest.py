from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep developer ``.env`` values and data directories out of the tests."""

    for name in list(os.environ):
        if name.startswith("ETHISCAN_"):
            monkeypatch.delenv(name)
    monkeypatch.setenv("ETHISCAN_DATA_DIR", str(tmp_path / "ethiscan-data"))
