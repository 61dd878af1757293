"""Tests for the structured error hierarchy."""

import pytest
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from flashlib.core.errors import (
    BaseError,
    ConfigurationError,
    ConfigurationErrorContext,
    ErrorContext,
    ProviderError,
    ProviderErrorContext,
    ValidationError,
    validation_details,
)


class Sample(BaseModel):
    name: str = Field(..., min_length=1)
    count: int


def _context() -> ErrorContext:
    return ErrorContext.create(
        action_name="sample",
        error_type="TestError",
        error_location="tests.sample",
        component="tests",
        operation="run",
    )


def _pydantic_error(data) -> PydanticValidationError:
    with pytest.raises(PydanticValidationError) as exc_info:
        Sample.model_validate(data)
    return exc_info.value


class TestErrorContext:
    """Test ErrorContext creation."""

    def test_create(self):
        context = _context()
        assert context.data.action_name == "sample"
        assert context.data.component == "tests"
        assert context.timestamp is not None

    def test_str_includes_data(self):
        assert "sample" in str(_context())


class TestBaseError:
    """Test the BaseError behaviour shared by every error."""

    def test_str_is_message(self):
        error = BaseError("Something broke", _context())
        assert str(error) == "Something broke"

    def test_to_dict(self):
        cause = RuntimeError("root cause")
        error = BaseError("Something broke", _context(), cause=cause)
        data = error.to_dict()

        assert data["error_type"] == "BaseError"
        assert data["message"] == "Something broke"
        assert data["cause"] == "root cause"
        assert data["context"]["operation"] == "run"

    def test_empty_message(self):
        assert str(BaseError("", _context())) == ""


class TestValidationError:
    """Test conversion from pydantic validation errors."""

    def test_validation_details(self):
        details = validation_details(_pydantic_error({"name": ""}))
        locations = {detail.location for detail in details}
        assert locations == {"name", "count"}

    def test_from_pydantic(self):
        error = ValidationError.from_pydantic(_pydantic_error({}), action_name="sample", component="Tests")

        assert error.message.startswith("Invalid input for sample: ")
        assert len(error.validation_errors) == 2
        assert isinstance(error.cause, PydanticValidationError)
        assert error.context.data.error_location == "Tests.validate"

    def test_from_pydantic_summarizes_many_errors(self):
        class Wide(BaseModel):
            a: int
            b: int
            c: int
            d: int
            e: int

        with pytest.raises(PydanticValidationError) as exc_info:
            Wide.model_validate({})
        error = ValidationError.from_pydantic(exc_info.value, action_name="wide", component="Tests")
        assert error.message.endswith("(and 2 more)")


class TestProviderError:
    """Test provider errors and their HTTP details."""

    def _error(self, status=None):
        return ProviderError(
            message="API Error (500): boom",
            context=_context(),
            provider_context=ProviderErrorContext(provider_name="exa", operation="search", status_code=status),
        )

    def test_status_code(self):
        assert self._error(500).status_code == 500
        assert self._error().status_code is None

    def test_with_prefix(self):
        original = self._error(500)
        prefixed = original.with_prefix("Exa search failed")

        assert str(prefixed) == "Exa search failed: API Error (500): boom"
        assert prefixed.status_code == 500
        assert prefixed.cause is original


class TestConfigurationError:
    """Test configuration errors."""

    def test_carries_config_context(self):
        error = ConfigurationError(
            message="missing",
            context=_context(),
            config_context=ConfigurationErrorContext(provider_name="exa", config_key="api_key", env_var="EXA_API_KEY"),
        )
        assert error.config_context.env_var == "EXA_API_KEY"
        assert isinstance(error, BaseError)
