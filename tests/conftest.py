"""Shared pytest fixtures.

`import src...` works through the `pythonpath` option in `pyproject.toml`; no install is needed.
"""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Clear settings variables and run from an empty directory (no local `.env`)."""

    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("OUTPUT_FORMAT", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
