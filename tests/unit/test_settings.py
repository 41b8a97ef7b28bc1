"""
Unit Tests for Settings and Logging
===================================
"""

import pytest
from pydantic import ValidationError

import docrender.config.settings as settings_module
from docrender.config.logging import get_logger, get_logging_config
from docrender.config.settings import Settings, get_settings, reload_settings


class TestSettings:
    """Test settings validation and loading."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DOCRENDER_ENVIRONMENT", raising=False)
        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.qualified_lookup is True
        assert settings.log_unknown_tags is True
        assert settings.default_lang == "en"

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            Settings(environment="staging")

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="verbose")

    def test_env_prefix(self, monkeypatch):
        """Test values are read from DOCRENDER_ variables."""
        monkeypatch.setenv("DOCRENDER_QUALIFIED_LOOKUP", "false")
        monkeypatch.setenv("DOCRENDER_DEFAULT_LANG", "de")

        settings = Settings(_env_file=None)

        assert settings.qualified_lookup is False
        assert settings.default_lang == "de"

    def test_get_settings_returns_installed_instance(self, test_settings):
        assert get_settings() is test_settings

    def test_reload_settings(self, monkeypatch):
        monkeypatch.setenv("DOCRENDER_LOG_UNKNOWN_TAGS", "false")

        reloaded = reload_settings()

        assert settings_module.settings is reloaded
        assert reloaded.log_unknown_tags is False


class TestLoggingConfig:
    """Test logging configuration."""

    def test_package_logger_configured(self, test_settings):
        config = get_logging_config(test_settings)

        assert config["loggers"]["docrender"]["level"] == "DEBUG"
        assert config["handlers"]["console"]["formatter"] == "standard"

    def test_production_uses_json(self):
        config = get_logging_config(Settings(environment="production", _env_file=None))

        assert config["handlers"]["console"]["formatter"] == "json"

    def test_get_logger(self):
        assert get_logger("docrender.test") is not None

    def test_json_formatter_path(self):
        config = get_logging_config(Settings(environment="production", _env_file=None))

        assert config["formatters"]["json"]["()"] == "pythonjsonlogger.json.JsonFormatter"
