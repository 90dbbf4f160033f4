"""Shared fixtures for partsplit tests."""

import os

import pytest


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from an empty working directory."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def make_source(tmp_path):
    """Create a source file of `size` random bytes."""

    def _make(size: int, name: str = "movie.mkv"):
        source_dir = tmp_path / "src"
        source_dir.mkdir(exist_ok=True)
        path = source_dir / name
        path.write_bytes(os.urandom(size))
        return path

    return _make
