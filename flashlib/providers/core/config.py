"""Per-provider configuration singletons.

Each provider declares a ``ProviderConfig`` subclass naming its credential
field, the environment variable that backs it and, optionally, the attribute
of the shared ``FlashSettings`` used as a last fallback. Every field resolves
in this order: explicit parameter, process environment, shared settings,
absent. Values are captured when the instance is built; later environment
changes are not observed until the instance is reset.

Providers come in two policies:

- fail-fast: building the instance without a credential raises
  ``ConfigurationError`` and so does reading the missing credential.
- fail-soft: building always succeeds, the credential accessor returns
  ``None`` and the action raises before performing any I/O.
"""

import logging
import os
from typing import Any, Callable, ClassVar, Dict, Optional, Type, TypeVar

from flashlib.core.errors import ConfigurationError, ConfigurationErrorContext, ErrorContext
from flashlib.core.models import MutableStrictBaseModel
from flashlib.core.settings import get_settings

logger = logging.getLogger(__name__)

C = TypeVar("C", bound="ProviderConfig")

# One resolved instance per config class, process-wide.
_instances: Dict[Type["ProviderConfig"], "ProviderConfig"] = {}


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


class ProviderConfig(MutableStrictBaseModel):
    """Base class for provider configurations."""

    provider_name: ClassVar[str] = "provider"
    display_name: ClassVar[str] = "Provider"
    fail_fast: ClassVar[bool] = False
    credential_field: ClassVar[str] = "api_key"
    credential_label: ClassVar[str] = "API key"
    env_vars: ClassVar[Dict[str, str]] = {}
    shared_fields: ClassVar[Dict[str, str]] = {}

    def __init__(self, **data: Any):
        super().__init__(**self._resolve_sources(data))
        if self.fail_fast and _is_empty(getattr(self, self.credential_field)):
            raise self.missing_credential_error()

    @classmethod
    def _resolve_sources(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """Fill empty fields from the environment, then from shared settings."""
        resolved = {key: value for key, value in data.items() if not _is_empty(value)}
        for field, env_var in cls.env_vars.items():
            if field in resolved:
                continue
            env_value = os.environ.get(env_var)
            if not _is_empty(env_value):
                resolved[field] = env_value
                continue
            shared_attr = cls.shared_fields.get(field)
            if shared_attr:
                shared_value = getattr(get_settings(), shared_attr, None)
                if not _is_empty(shared_value):
                    resolved[field] = shared_value
        return resolved

    @classmethod
    def get_instance(cls: Type[C], **params: Any) -> C:
        """Get the provider singleton, creating it on first use.

        When the instance already exists, each non-empty parameter replaces
        the matching field; empty parameters leave fields untouched.

        Args:
            **params: Explicit field values

        Returns:
            The provider configuration

        Raises:
            ConfigurationError: If a fail-fast provider has no credential
        """
        instance = _instances.get(cls)
        if instance is None:
            instance = cls(**params)
            _instances[cls] = instance
            logger.debug(f"Created {cls.provider_name} configuration")
            return instance  # type: ignore[return-value]

        for field, value in params.items():
            if not _is_empty(value):
                setattr(instance, field, value)
        return instance  # type: ignore[return-value]

    @classmethod
    def reset_instance(cls) -> None:
        """Discard the provider singleton. Safe to call repeatedly."""
        if _instances.pop(cls, None) is not None:
            logger.debug(f"Reset {cls.provider_name} configuration")

    @classmethod
    def has_instance(cls) -> bool:
        return cls in _instances

    @classmethod
    def install(cls: Type[C], config: C) -> C:
        """Replace the singleton with one built from an explicit configuration.

        Args:
            config: Configuration whose values become the new singleton

        Returns:
            The new singleton instance
        """
        cls.reset_instance()
        return cls.get_instance(**config.model_dump())

    @classmethod
    def resolver(cls: Type[C], config: Optional[C] = None) -> Callable[[], C]:
        """Return a callable that yields the configuration an action should use.

        With an explicit configuration the singleton is re-created from it and
        that instance is pinned. Without one the singleton is looked up on
        every call so a missing credential only surfaces when an action runs.
        """
        if config is not None:
            pinned = cls.install(config)
            return lambda: pinned
        return cls.get_instance

    @property
    def credential(self) -> Optional[str]:
        return getattr(self, self.credential_field)

    def get_api_key(self) -> Optional[str]:
        """Get the credential.

        Returns:
            The credential, or None for a fail-soft provider without one

        Raises:
            ConfigurationError: If a fail-fast provider has no credential
        """
        value = self.credential
        if _is_empty(value):
            if self.fail_fast:
                raise self.missing_credential_error()
            return None
        return value

    def require_api_key(self) -> str:
        """Get the credential, raising if it is missing regardless of policy."""
        value = self.credential
        if _is_empty(value):
            raise self.missing_credential_error()
        return value  # type: ignore[return-value]

    @classmethod
    def missing_credential_error(cls) -> ConfigurationError:
        """Build the error raised when the credential is missing."""
        env_var = cls.env_vars.get(cls.credential_field)
        if cls.fail_fast:
            message = (
                f"{cls.display_name} {cls.credential_label} not found. Please provide it "
                f"via constructor or set {env_var} environment variable."
            )
        else:
            message = (
                f"{cls.display_name} {cls.credential_label} not found. Please set it in "
                f"your configuration or as {env_var} environment variable."
            )
        context = ErrorContext.create(
            action_name=cls.provider_name,
            error_type="MissingCredential",
            error_location=f"{cls.__name__}.{cls.credential_field}",
            component=cls.__name__,
            operation="resolve_credential",
        )
        return ConfigurationError(
            message=message,
            context=context,
            config_context=ConfigurationErrorContext(
                provider_name=cls.provider_name,
                config_key=cls.credential_field,
                env_var=env_var,
            ),
        )


def reset_all_instances() -> None:
    """Discard every provider singleton."""
    _instances.clear()
