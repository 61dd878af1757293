"""Base error classes with structured error context.

Every error raised by flashlib carries an ``ErrorContext`` describing where
it happened. Tool adapters flatten these into plain strings for the host
framework, so ``message`` must always be human readable on its own.
"""

import logging
import traceback
from datetime import datetime
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .models import (
    ConfigurationErrorContext,
    ErrorContextData,
    ProviderErrorContext,
    ValidationErrorDetail,
)

logger = logging.getLogger(__name__)


class ErrorContext:
    """Structured context information for errors."""

    def __init__(self, context_data: ErrorContextData):
        """Initialize error context.

        Args:
            context_data: Required error context data
        """
        self._data = context_data

    @classmethod
    def create(
        cls, action_name: str, error_type: str, error_location: str, component: str, operation: str
    ) -> "ErrorContext":
        """Create a new error context with required data.

        Args:
            action_name: Name of the action
            error_type: Type of error
            error_location: Location in code
            component: Component raising error
            operation: Operation being performed

        Returns:
            New ErrorContext instance
        """
        context_data = ErrorContextData(
            action_name=action_name,
            error_type=error_type,
            error_location=error_location,
            component=component,
            operation=operation,
        )
        return cls(context_data)

    @property
    def data(self) -> ErrorContextData:
        """Get the context data."""
        return self._data

    @property
    def timestamp(self) -> datetime:
        """Get the context creation timestamp."""
        return self._data.timestamp

    def __str__(self) -> str:
        return f"ErrorContext({self._data.model_dump()})"


class BaseError(Exception):
    """Base class for all flashlib errors.

    ``str(error)`` yields the bare message so host-facing error strings stay
    readable; ``to_dict()`` carries the full structured context for logging.
    """

    def __init__(self, message: str, context: ErrorContext, cause: Exception | None = None):
        """Initialize error.

        Args:
            message: Error message
            context: Required error context
            cause: Optional cause exception
        """
        self.message = message
        self.context = context
        self.cause = cause
        self.timestamp = datetime.now()
        self.traceback = self._capture_traceback()

        super().__init__(message)

    def _capture_traceback(self) -> str:
        return traceback.format_exc()

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary.

        Returns:
            Dictionary representation of error
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
            "context": self.context.data.model_dump(),
            "cause": str(self.cause) if self.cause else None,
            "traceback": self.traceback,
        }

    def __str__(self) -> str:
        return self.message


class ValidationError(BaseError):
    """Error raised when action input fails validation."""

    def __init__(
        self,
        message: str,
        validation_errors: list[ValidationErrorDetail],
        context: ErrorContext,
        cause: Exception | None = None,
    ):
        """Initialize validation error.

        Args:
            message: Error message
            validation_errors: List of validation error details
            context: Required error context
            cause: Optional cause exception
        """
        self.validation_errors = validation_errors
        super().__init__(message, context, cause)

    @classmethod
    def from_pydantic(
        cls, error: PydanticValidationError, action_name: str, component: str
    ) -> "ValidationError":
        """Build a validation error from a pydantic ``ValidationError``.

        Args:
            error: The pydantic error
            action_name: Action whose input was rejected
            component: Component performing the validation

        Returns:
            New ValidationError with one detail per pydantic error
        """
        details = validation_details(error)
        summary = "; ".join(f"{d.location}: {d.message}" for d in details[:3])
        if len(details) > 3:
            summary += f" (and {len(details) - 3} more)"
        context = ErrorContext.create(
            action_name=action_name,
            error_type="ValidationError",
            error_location=f"{component}.validate",
            component=component,
            operation="validate",
        )
        return cls(
            message=f"Invalid input for {action_name}: {summary}",
            validation_errors=details,
            context=context,
            cause=error,
        )

    @classmethod
    def for_field(
        cls, location: str, message: str, action_name: str, component: str, error_type: str = "missing"
    ) -> "ValidationError":
        """Build a validation error for a single rejected field.

        Used by provider functions that check their arguments themselves.
        """
        context = ErrorContext.create(
            action_name=action_name,
            error_type="ValidationError",
            error_location=f"{component}.{action_name}",
            component=component,
            operation=action_name,
        )
        return cls(
            message=message,
            validation_errors=[
                ValidationErrorDetail(location=location, message=message, error_type=error_type)
            ],
            context=context,
        )


class ConfigurationError(BaseError):
    """Error raised when a provider credential is missing or invalid."""

    def __init__(
        self,
        message: str,
        context: ErrorContext,
        config_context: ConfigurationErrorContext,
        cause: Exception | None = None,
    ):
        """Initialize configuration error.

        Args:
            message: Error message
            context: Required error context
            config_context: Required configuration error context
            cause: Optional cause exception
        """
        self.config_context = config_context
        super().__init__(message, context, cause)


class ProviderError(BaseError):
    """Error raised when a third-party API call fails."""

    def __init__(
        self,
        message: str,
        context: ErrorContext,
        provider_context: ProviderErrorContext,
        cause: Exception | None = None,
    ):
        """Initialize provider error.

        Args:
            message: Error message
            context: Required error context
            provider_context: Required provider error context
            cause: Optional cause exception
        """
        self.provider_context = provider_context
        super().__init__(message, context, cause)

    @property
    def status_code(self) -> int | None:
        """HTTP status of the failed response, if any."""
        return self.provider_context.status_code

    def with_prefix(self, prefix: str) -> "ProviderError":
        """Return a copy of this error whose message starts with ``prefix``."""
        return ProviderError(
            message=f"{prefix}: {self.message}",
            context=self.context,
            provider_context=self.provider_context,
            cause=self,
        )


def validation_details(error: PydanticValidationError) -> list[ValidationErrorDetail]:
    """Flatten a pydantic ``ValidationError`` into detail records."""
    return [
        ValidationErrorDetail(
            location=".".join(str(part) for part in item["loc"]) or "<root>",
            message=item["msg"],
            error_type=item["type"],
        )
        for item in error.errors()
    ]
