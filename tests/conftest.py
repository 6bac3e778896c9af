"""Shared pytest fixtures for cssmixins tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
import structlog
from click.testing import CliRunner

from cssmixins.config.settings import CssMixinsSettings, reset_settings, use_settings


@pytest.fixture(autouse=True)
def _isolated_runtime(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test in development mode with pristine logging state."""
    monkeypatch.delenv("CSSMIXINS_MODE", raising=False)
    monkeypatch.delenv("CSSMIXINS_CONFIG", raising=False)
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("cssmixins")
    pkg_level = pkg.level
    use_settings(CssMixinsSettings(mode="development"))
    yield
    reset_settings()
    structlog.reset_defaults()
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def production_mode() -> None:
    """Switch the active settings to production (validation disabled)."""
    use_settings(CssMixinsSettings(mode="production"))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()
