from __future__ import annotations

from pathlib import Path

import pytest

DATA_DIR = Path(__file__).resolve().parent.parent.parent / "data"


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def write_puzzle(tmp_path: Path):
    """Write puzzle text to a temporary file and return its path."""

    def _write(text: str, name: str = "puzzle.txt") -> Path:
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write
