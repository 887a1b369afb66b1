"""
Unit tests for pydantic-settings configuration.
"""

import pytest

from solid_notify.config.settings import DEFAULT_LOG_FORMAT, Settings, get_settings


class TestSettings:
    """Tests for Settings defaults and environment loading."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Default log level keeps diagnostics quiet."""
        monkeypatch.delenv("SOLID_NOTIFY_LOG_LEVEL", raising=False)
        monkeypatch.delenv("SOLID_NOTIFY_LOG_FORMAT", raising=False)
        settings = Settings()
        assert settings.log_level == "WARNING"
        assert "%(message)s" in settings.log_format

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Prefixed environment variables override defaults."""
        monkeypatch.setenv("SOLID_NOTIFY_LOG_LEVEL", "debug")
        assert Settings().log_level == "DEBUG"

    @pytest.mark.parametrize("value", ["chatty", "verbose", ""])
    def test_unknown_level_falls_back(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        """Unknown log levels fall back to WARNING instead of failing."""
        monkeypatch.setenv("SOLID_NOTIFY_LOG_LEVEL", value)
        assert Settings().log_level == "WARNING"

    def test_custom_format_kept(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A valid %-style format is used as given."""
        monkeypatch.setenv("SOLID_NOTIFY_LOG_FORMAT", "%(levelname)s %(message)s")
        assert Settings().log_format == "%(levelname)s %(message)s"

    def test_unusable_format_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A format logging cannot use falls back to the default."""
        monkeypatch.setenv("SOLID_NOTIFY_LOG_FORMAT", "no fields here")
        assert Settings().log_format == DEFAULT_LOG_FORMAT

    def test_get_settings_is_cached(self) -> None:
        """get_settings returns the same instance."""
        assert get_settings() is get_settings()
