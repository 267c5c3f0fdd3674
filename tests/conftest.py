"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path


@pytest.fixture
def sample_file_names():
    """Sample file names covering the extension edge cases."""
    return [
        "a.txt",
        "b.TXT",
        "c.jpg",
        "README",
        ".gitignore",
        "archive.tar.gz",
    ]


@pytest.fixture
def scenario_dir(tmp_path):
    """Base directory with a.txt, b.TXT, c.jpg, README and a sub/ directory."""
    base = tmp_path / "base"
    base.mkdir()
    (base / "a.txt").write_text("a")
    (base / "b.TXT").write_text("b")
    (base / "c.jpg").write_bytes(b"\xff\xd8\xff")
    (base / "README").write_text("readme")
    (base / "sub").mkdir()
    (base / "sub" / "inner.txt").write_text("inner")
    return base


@pytest.fixture
def empty_dir(tmp_path):
    """An empty base directory."""
    base = tmp_path / "empty"
    base.mkdir()
    return base


@pytest.fixture
def snapshot():
    """Return a function listing every file under a directory, relative to it."""
    def _snapshot(base: Path):
        return {p.relative_to(base).as_posix() for p in base.rglob("*") if p.is_file()}
    return _snapshot
