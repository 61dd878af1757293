"""Structured error hierarchy for flashlib."""

from .errors import (
    BaseError,
    ConfigurationError,
    ErrorContext,
    ProviderError,
    ValidationError,
    validation_details,
)
from .models import (
    ConfigurationErrorContext,
    ErrorContextData,
    ProviderErrorContext,
    ValidationErrorDetail,
)

__all__ = [
    "BaseError",
    "ConfigurationError",
    "ErrorContext",
    "ProviderError",
    "ValidationError",
    "validation_details",
    "ConfigurationErrorContext",
    "ErrorContextData",
    "ProviderErrorContext",
    "ValidationErrorDetail",
]
