"""Fixtures for CLI command tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run each command from an empty directory with no panquery env vars.

    The root group reconfigures logging on every invocation; restore the
    root logger afterwards so later tests do not write to a closed stream.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PANQUERY_CONFIG", raising=False)
    monkeypatch.delenv("PANQUERY_GRAPH__PATH", raising=False)
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
