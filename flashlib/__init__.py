"""Flashlib.

A catalog of actions wrapping third-party web APIs (video and speech
generation, browser automation, web search, GPU rental, calendars and mail,
chain and market data) for use as tools by LLM agent frameworks.

Key pieces:
1. ``Action``: a named, described, schema-validated async function
2. Per-provider configuration singletons resolving credentials from
   parameters, the environment and shared settings
3. ``ActionTool`` / ``ActionToolkit``: adapters that never raise into the host
4. ``JobPoller``: fixed-interval polling for long-running provider jobs
"""

from flashlib.actions.base import Action
from flashlib.actions.polling import JobPoller, PollOutcome, wait_for_job
from flashlib.actions.registry import (
    PROVIDER_ACTION_SETS,
    ActionRegistry,
    build_action_registry,
    get_default_registry,
    reset_default_registry,
)
from flashlib.adapters import ActionTool, ActionToolkit
from flashlib.core.errors import BaseError, ConfigurationError, ProviderError, ValidationError
from flashlib.core.log_config import configure_logging
from flashlib.core.settings import FlashSettings, configure_settings, get_settings
from flashlib.providers.core.config import ProviderConfig, reset_all_instances

__version__ = "0.1.0"

__all__ = [
    # Actions
    "Action",
    "ActionRegistry",
    "PROVIDER_ACTION_SETS",
    "build_action_registry",
    "get_default_registry",
    "reset_default_registry",

    # Polling
    "JobPoller",
    "PollOutcome",
    "wait_for_job",

    # Adapters
    "ActionTool",
    "ActionToolkit",

    # Errors
    "BaseError",
    "ConfigurationError",
    "ProviderError",
    "ValidationError",

    # Configuration
    "FlashSettings",
    "ProviderConfig",
    "configure_logging",
    "configure_settings",
    "get_settings",
    "reset_all_instances",
]
