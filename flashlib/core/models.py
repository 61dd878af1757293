"""Pydantic base models shared across flashlib.

Internal records use the strict variants. Action input schemas use
``ActionParameters`` which coerces JSON-ish values the way agent hosts
produce them, and provider payloads use ``ProviderRecord`` which tolerates
fields the remote API adds over time.
"""

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """Immutable model with strict validation.

    - strict=True: no type coercion
    - extra="forbid": unknown fields are rejected
    - frozen=True: instances cannot be mutated after creation
    """

    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        validate_assignment=True,
        frozen=True,
        validate_default=True,
        use_enum_values=False,
        arbitrary_types_allowed=False,
    )


class MutableStrictBaseModel(BaseModel):
    """Mutable version of StrictBaseModel for cases requiring updates."""

    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        validate_assignment=True,
        frozen=False,
        validate_default=True,
        use_enum_values=False,
        arbitrary_types_allowed=False,
    )


class ActionParameters(BaseModel):
    """Base class for action input schemas.

    Unknown fields are rejected so the generated JSON schema reports
    ``additionalProperties: false``. Enum members are dumped as their values
    so validated arguments can be sent straight to an HTTP API.
    """

    model_config = ConfigDict(
        extra="forbid",
        use_enum_values=True,
        populate_by_name=True,
    )


class ProviderRecord(BaseModel):
    """Lenient record for data returned by a third-party API."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


__all__ = [
    "StrictBaseModel",
    "MutableStrictBaseModel",
    "ActionParameters",
    "ProviderRecord",
]
