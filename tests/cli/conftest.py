"""Shared fixtures for CLI tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Typer CliRunner instance for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolate_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None]:
    """Run from an empty directory with no credentials and restore logging."""
    monkeypatch.chdir(tmp_path)
    for var in (
        "OPENAI_API_KEY",
        "OPENAI_BASE_URL",
        "MAFPOOL_OPENAI_API_KEY",
        "MAFPOOL_OPENAI_ENDPOINT",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("MAFPOOL_LOG_FORMAT", "text")
    monkeypatch.setenv("MAFPOOL_LOG_LEVEL", "WARNING")

    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    yield
    root.handlers.clear()
    root.handlers.extend(original_handlers)
    root.setLevel(original_level)
