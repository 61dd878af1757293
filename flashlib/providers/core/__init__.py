"""Shared provider infrastructure: configuration resolution and HTTP."""

from .config import ProviderConfig, reset_all_instances
from .http import (
    bearer,
    parse_record,
    parse_records,
    provider_error,
    query_params,
    request_bytes,
    request_json,
)

__all__ = [
    "ProviderConfig",
    "reset_all_instances",
    "bearer",
    "parse_record",
    "parse_records",
    "provider_error",
    "query_params",
    "request_bytes",
    "request_json",
]
