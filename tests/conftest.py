"""Pytest configuration and fixtures for findup testing."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("FINDUP_CONFIG_DIR", str(tmp_path / "home"))
    monkeypatch.delenv("FINDUP_TYPE", raising=False)
    monkeypatch.delenv("FINDUP_STOP_AT", raising=False)
    return tmp_path / "home" / ".findup"


@pytest.fixture
def tree(tmp_path) -> Path:
    """tmp_path/a/b/c with a file at tmp_path/a/config.json."""
    (tmp_path / "a" / "b" / "c").mkdir(parents=True)
    (tmp_path / "a" / "config.json").write_text("{}")
    return tmp_path
