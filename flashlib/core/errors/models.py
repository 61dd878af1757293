"""Strict Pydantic models for error handling."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from flashlib.core.models import StrictBaseModel


class ErrorContextData(StrictBaseModel):
    """Error context data attached to every flashlib error."""

    action_name: str = Field(..., description="Name of the action where the error occurred")
    error_type: str = Field(..., description="Type of error")
    error_location: str = Field(..., description="Location in code where error occurred")
    timestamp: datetime = Field(default_factory=datetime.now, description="When error occurred")

    component: str = Field(..., description="Component that raised the error")
    operation: str = Field(..., description="Operation being performed")


class ValidationErrorDetail(StrictBaseModel):
    """Single validation problem."""

    location: str = Field(..., description="Field or location of validation error")
    message: str = Field(..., description="Validation error message")
    error_type: str = Field(..., description="Type of validation error")


class ProviderErrorContext(StrictBaseModel):
    """Context for a failed call to a third-party API."""

    provider_name: str = Field(..., description="Name of the provider")
    operation: str = Field(..., description="Operation that failed")
    status_code: Optional[int] = Field(default=None, description="HTTP status code, if a response was received")
    response_payload: Optional[str] = Field(default=None, description="Response body, if any")


class ConfigurationErrorContext(StrictBaseModel):
    """Context for a missing or invalid provider credential."""

    provider_name: str = Field(..., description="Provider whose configuration failed")
    config_key: str = Field(..., description="Configuration key that failed")
    env_var: Optional[str] = Field(default=None, description="Environment variable consulted for the key")
