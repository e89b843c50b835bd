"""Shared test fixtures and configuration."""

import logging
import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Drop any LITTLE_SEARCH_* variables so settings start from defaults."""
    for key in list(os.environ):
        if key.upper().startswith("LITTLE_SEARCH_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def preserve_root_logging():
    """configure_logging replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    """Two-document corpus with an empty noise-word list."""
    (tmp_path / "D1").write_text("apple apple banana\n", encoding="utf-8")
    (tmp_path / "D2").write_text("banana banana cherry\n", encoding="utf-8")
    (tmp_path / "docs.txt").write_text("D1\nD2\n", encoding="utf-8")
    (tmp_path / "noisewords.txt").write_text("", encoding="utf-8")
    return tmp_path


@pytest.fixture
def story_dir(tmp_path: Path) -> Path:
    """Small prose corpus with noise words, punctuation and mixed case."""
    docs = {
        "deer.txt": "The deer ran. A deer, a DEER! Deer deer; the train whistled.",
        "train.txt": "Train after train: the train left. Deer? No deer here.",
        "forest.txt": "Forest paths (quiet) wind through the forest and the deer sleep.",
        "station.txt": "The station clock said noon. A train, then another train.",
    }
    for name, text in docs.items():
        (tmp_path / name).write_text(text, encoding="utf-8")
    (tmp_path / "docs.txt").write_text("\n".join(docs) + "\n", encoding="utf-8")
    (tmp_path / "noisewords.txt").write_text("a\nthe\nand\nno\nthen\n", encoding="utf-8")
    return tmp_path
