"""Tests for the shared settings."""

import pytest
from pydantic import ValidationError

from flashlib.core.settings import FlashSettings, configure_settings, get_settings, reset_settings


class TestFlashSettings:
    """Test FlashSettings defaults, environment and validation."""

    def test_defaults(self):
        settings = FlashSettings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.poll_interval_seconds == 5.0
        assert settings.poll_max_attempts == 60
        assert settings.exa_api_key is None

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("FLASH_EXA_API_KEY", "shared-exa")
        monkeypatch.setenv("FLASH_POLL_MAX_ATTEMPTS", "3")

        settings = FlashSettings(_env_file=None)
        assert settings.exa_api_key == "shared-exa"
        assert settings.poll_max_attempts == 3

    def test_log_level_normalized(self):
        assert FlashSettings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            FlashSettings(_env_file=None, log_level="LOUD")

    def test_invalid_poll_values(self):
        with pytest.raises(ValidationError):
            FlashSettings(_env_file=None, poll_max_attempts=0)
        with pytest.raises(ValidationError):
            FlashSettings(_env_file=None, poll_interval_seconds=-1)


class TestSettingsAccess:
    """Test the process-wide settings accessors."""

    def test_configure_and_get(self):
        settings = FlashSettings(_env_file=None, poll_max_attempts=7)
        assert configure_settings(settings) is settings
        assert get_settings() is settings

    def test_reset_reloads(self, monkeypatch):
        configure_settings(FlashSettings(_env_file=None, poll_max_attempts=7))
        reset_settings()
        monkeypatch.setenv("FLASH_POLL_MAX_ATTEMPTS", "9")
        assert get_settings().poll_max_attempts == 9
