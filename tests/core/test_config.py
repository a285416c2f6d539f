"""Tests for the configuration module."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.core.config import Settings, get_settings


class TestSettings:
    """Test suite for application Settings."""

    def test_default_values(self) -> None:
        """Settings should have sensible defaults."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(
                _env_file=None,  # type: ignore[call-arg]
            )
        assert settings.app_name == "PageDetect"
        assert settings.app_env == "development"
        assert settings.log_level == "INFO"
        assert settings.heuristics_config_path is None
        assert settings.use_intent_hint is False

    def test_values_read_from_prefixed_env(self) -> None:
        env = {
            "PAGEDETECT_LOG_LEVEL": "debug",
            "PAGEDETECT_HEURISTICS_CONFIG_PATH": "/etc/pagedetect/heuristics.yaml",
            "PAGEDETECT_USE_INTENT_HINT": "true",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(
                _env_file=None,  # type: ignore[call-arg]
            )
        assert settings.log_level == "DEBUG"
        assert settings.heuristics_config_path == "/etc/pagedetect/heuristics.yaml"
        assert settings.use_intent_hint is True

    def test_log_level_value(self) -> None:
        settings = Settings(
            log_level="warning",
            _env_file=None,  # type: ignore[call-arg]
        )
        assert settings.log_level_value == logging.WARNING

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(
                log_level="verbose",
                _env_file=None,  # type: ignore[call-arg]
            )


class TestGetSettings:
    def test_returns_cached_instance(self) -> None:
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
