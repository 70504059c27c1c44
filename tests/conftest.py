"""Pytest configuration and fixtures for nameit tests"""
import os
import tempfile
from pathlib import Path
from typing import Iterable

import pytest

from nameit.generator import RandomSource


class SequenceRandomSource(RandomSource):
    """Deterministic RandomSource that replays a fixed list of indexes.

    Each value is reduced modulo the requested upper bound; the sequence
    wraps around when exhausted.
    """

    def __init__(self, values: Iterable[int]):
        self.values = list(values) or [0]
        self.calls = []
        self._pos = 0

    def index(self, upper: int) -> int:
        self.calls.append(upper)
        value = self.values[self._pos % len(self.values)] % upper
        self._pos += 1
        return value


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for test files"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_env(temp_dir, monkeypatch):
    """Point HOME at a temp dir and clear NAMEIT_* variables"""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in list(os.environ):
        if key.startswith("NAMEIT_"):
            monkeypatch.delenv(key, raising=False)
    return home


@pytest.fixture
def seq_rng():
    """Factory for deterministic random sources"""
    return SequenceRandomSource


@pytest.fixture
def adjectives_file(temp_dir):
    """Word file with padding and blank lines"""
    path = temp_dir / "adjectives.txt"
    path.write_text("  quiet \n\nbrave\n   \nsilent\n", encoding="utf-8")
    return path


@pytest.fixture
def nouns_file(temp_dir):
    """Word file with a single noun"""
    path = temp_dir / "nouns.txt"
    path.write_text("forest\n", encoding="utf-8")
    return path
