"""Pytest configuration and fixtures."""

from __future__ import annotations

import io
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from testexport.config import get_settings
from testexport.logging import configure_logging
from tests.factories import RecordingClient


@pytest.fixture(autouse=True)
def quiet_logging() -> Iterator[io.StringIO]:
    """Route structlog output to a buffer so tests stay silent."""
    stream = io.StringIO()
    configure_logging(log_level="DEBUG", json_format=True, stream=stream)
    yield stream


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Isolate tests from TESTEXPORT_* variables and any local .env file."""
    for name in ("API_KEY", "URL", "LOG_LEVEL", "LOG_JSON", "REQUEST_TIMEOUT"):
        monkeypatch.delenv(f"TESTEXPORT_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a file below tmp_path and return its path."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def recording_client() -> RecordingClient:
    return RecordingClient()
