"""Core infrastructure: models, errors, settings, registries and logging."""

from .errors import BaseError, ConfigurationError, ProviderError, ValidationError
from .models import ActionParameters, MutableStrictBaseModel, ProviderRecord, StrictBaseModel
from .settings import FlashSettings, configure_settings, get_settings, reset_settings

__all__ = [
    "BaseError",
    "ConfigurationError",
    "ProviderError",
    "ValidationError",
    "ActionParameters",
    "MutableStrictBaseModel",
    "ProviderRecord",
    "StrictBaseModel",
    "FlashSettings",
    "configure_settings",
    "get_settings",
    "reset_settings",
]
