"""Shared test fixtures for the page detection test suite.

Provides isolated settings and a default heuristics config so tests never
depend on the developer's environment or .env file.
"""

from __future__ import annotations

import pytest

from src.core.config import Settings, get_settings
from src.pagedetection.detector import _default_detector
from src.pagedetection.heuristics import HeuristicsConfig


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Clear PAGEDETECT_* variables and cached singletons around each test."""
    for name in ("PAGEDETECT_LOG_LEVEL", "PAGEDETECT_HEURISTICS_CONFIG_PATH", "PAGEDETECT_USE_INTENT_HINT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    _default_detector.cache_clear()
    yield
    get_settings.cache_clear()
    _default_detector.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings that ignore any .env file."""
    return Settings(
        app_env="testing",
        log_level="DEBUG",
        _env_file=None,  # type: ignore[call-arg]
    )


@pytest.fixture
def heuristics() -> HeuristicsConfig:
    """Default heuristics."""
    return HeuristicsConfig()
