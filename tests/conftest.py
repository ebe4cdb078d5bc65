from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

import pytest

from pics.organiser import FileOrganiser


def make_file(directory: Path, name: str, modified: datetime | None = None, content: str = "test") -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(content, encoding="utf-8")
    if modified is not None:
        ts = modified.timestamp()
        os.utime(path, (ts, ts))
    return path


def names(directory: Path) -> list[str]:
    return sorted(p.name for p in directory.iterdir())


@pytest.fixture
def organiser() -> FileOrganiser:
    return FileOrganiser()


@pytest.fixture
def dirs(tmp_path: Path) -> tuple[Path, Path]:
    source = tmp_path / "source"
    target = tmp_path / "target"
    source.mkdir()
    return source, target
