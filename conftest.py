"""Pytest configuration for node-targets tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest


@pytest.fixture
def clean_input_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove ``INPUT_*`` variables inherited from a surrounding workflow."""
    for key in list(os.environ):
        if key.startswith(("INPUT_", "INPUT-")):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def github_output(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``GITHUB_OUTPUT`` at a fresh file under ``tmp_path``."""
    path = tmp_path / "github_output"
    monkeypatch.setenv("GITHUB_OUTPUT", str(path))
    return path
