"""Shared fixtures: run every test in an empty working directory with an isolated home."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty cwd for simple.txt; HOME points elsewhere so no real global config is read."""
    home = tmp_path / "home"
    home.mkdir()
    cwd = tmp_path / "work"
    cwd.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(cwd)
    return cwd


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging so they do not outlive the test's stderr."""
    yield
    logger = logging.getLogger("simplefile")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
