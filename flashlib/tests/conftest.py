"""Global pytest configuration and fixtures."""

import pytest

from flashlib.actions.registry import reset_default_registry
from flashlib.core.settings import FlashSettings, configure_settings, reset_settings
from flashlib.providers.core.config import reset_all_instances

PROVIDER_ENV_VARS = (
    "HEYGEN_API_KEY",
    "ELEVENLABS_API_KEY",
    "BROWSER_USE_API_KEY",
    "BROWSER_USE_BASE_URL",
    "PERPLEXITY_API_KEY",
    "EXA_API_KEY",
    "HYPERBOLIC_API_KEY",
    "GOOGLE_TOKEN",
    "ALCHEMY_API_KEY",
    "COINGECKO_API_KEY",
)

SETTINGS_FIELDS = (
    "log_level",
    "exa_api_key",
    "hyperbolic_api_key",
    "google_token",
    "alchemy_api_key",
    "poll_interval_seconds",
    "poll_max_attempts",
    "request_timeout_seconds",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Start every test without credentials, singletons or a default registry.

    Polling sleeps are disabled through the shared settings.
    """
    for name in PROVIDER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    for field in SETTINGS_FIELDS:
        monkeypatch.delenv(field.upper(), raising=False)
        monkeypatch.delenv(f"FLASH_{field.upper()}", raising=False)

    reset_all_instances()
    reset_default_registry()
    configure_settings(FlashSettings(_env_file=None, poll_interval_seconds=0))
    yield
    reset_all_instances()
    reset_default_registry()
    reset_settings()
