"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from pwnedcheck.config import Settings, get_settings, reset_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        """Defaults point at the public range API."""
        settings = Settings()
        assert settings.api_base_url == "https://api.pwnedpasswords.com"
        assert settings.timeout == 30.0
        assert settings.add_padding is True
        assert settings.log_level == "WARNING"

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables override defaults."""
        monkeypatch.setenv("PWNEDCHECK_API_BASE_URL", "http://double.local")
        monkeypatch.setenv("PWNEDCHECK_TIMEOUT", "4.5")
        monkeypatch.setenv("PWNEDCHECK_ADD_PADDING", "false")
        monkeypatch.setenv("PWNEDCHECK_LOG_LEVEL", "DEBUG")

        settings = Settings()
        assert settings.api_base_url == "http://double.local"
        assert settings.timeout == 4.5
        assert settings.add_padding is False
        assert settings.log_level == "DEBUG"

    def test_invalid_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Non-positive timeout is rejected."""
        monkeypatch.setenv("PWNEDCHECK_TIMEOUT", "0")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Unknown log level is rejected."""
        monkeypatch.setenv("PWNEDCHECK_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            Settings()


class TestGetSettings:
    """Tests for the global settings instance."""

    def test_cached(self) -> None:
        """get_settings returns the same instance."""
        assert get_settings() is get_settings()

    def test_reset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """reset_settings reloads from the environment."""
        first = get_settings()
        monkeypatch.setenv("PWNEDCHECK_API_BASE_URL", "http://other.local")
        reset_settings()

        second = get_settings()
        assert second is not first
        assert second.api_base_url == "http://other.local"
