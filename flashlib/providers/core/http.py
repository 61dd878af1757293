"""HTTP helpers shared by provider actions.

Every provider call goes through ``request_json`` (or ``request_bytes`` for
binary payloads) so that non-2xx responses and transport failures surface
uniformly as ``ProviderError``.
"""

import asyncio
import json as jsonlib
import logging
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

import aiohttp
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from flashlib.core.errors import ErrorContext, ProviderError, ProviderErrorContext
from flashlib.core.settings import get_settings

logger = logging.getLogger(__name__)

_ERROR_DETAIL_KEYS = ("message", "detail", "error", "error_message")

RecordT = TypeVar("RecordT", bound=BaseModel)


def query_params(**values: Any) -> Dict[str, str]:
    """Build query parameters, dropping ``None`` and rendering booleans as JSON."""
    params: Dict[str, str] = {}
    for key, value in values.items():
        if value is None:
            continue
        if isinstance(value, bool):
            params[key] = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            params[key] = ",".join(str(item) for item in value)
        else:
            params[key] = str(value)
    return params


def bearer(token: str) -> Dict[str, str]:
    """Authorization header for bearer-token APIs."""
    return {"Authorization": f"Bearer {token}"}


def _error_detail(body: str) -> str:
    try:
        payload = jsonlib.loads(body)
    except ValueError:
        return body.strip() or "No response body"
    if isinstance(payload, dict):
        for key in _ERROR_DETAIL_KEYS:
            detail = payload.get(key)
            if isinstance(detail, dict):
                detail = detail.get("message") or detail
            if detail:
                return detail if isinstance(detail, str) else jsonlib.dumps(detail)
    return jsonlib.dumps(payload)


def provider_error(
    message: str,
    provider: str,
    operation: str,
    status: Optional[int] = None,
    payload: Optional[str] = None,
    cause: Optional[Exception] = None,
    error_type: Optional[str] = None,
) -> ProviderError:
    """Build a ``ProviderError`` carrying the provider, operation and HTTP details."""
    context = ErrorContext.create(
        action_name=operation,
        error_type=error_type or ("HTTPError" if status is not None else "TransportError"),
        error_location=f"{provider}.{operation}",
        component=provider,
        operation=operation,
    )
    return ProviderError(
        message=message,
        context=context,
        provider_context=ProviderErrorContext(
            provider_name=provider,
            operation=operation,
            status_code=status,
            response_payload=payload,
        ),
        cause=cause,
    )


def _describe_errors(error: PydanticValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in detail['loc']) or 'response'}: {detail['msg']}"
        for detail in error.errors()
    )


def parse_record(model: Type[RecordT], data: Any, *, provider: str, operation: str) -> RecordT:
    """Validate a decoded response body against a record model.

    Raises:
        ProviderError: If the body does not have the expected shape
    """
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise provider_error(
            f"Invalid response format: {_describe_errors(e)}",
            provider,
            operation,
            payload=str(data)[:500],
            error_type="ResponseFormatError",
            cause=e,
        ) from e


def parse_records(model: Type[RecordT], items: Any, *, provider: str, operation: str) -> List[RecordT]:
    """Validate a list of response items; ``None`` is an empty list.

    Raises:
        ProviderError: If ``items`` is not a list or an item has the wrong shape
    """
    if items is None:
        return []
    if not isinstance(items, list):
        raise provider_error(
            f"Invalid response format: expected a list, got {type(items).__name__}",
            provider,
            operation,
            payload=str(items)[:500],
            error_type="ResponseFormatError",
        )
    return [parse_record(model, item, provider=provider, operation=operation) for item in items]


async def _send(
    method: str,
    url: str,
    *,
    provider: str,
    operation: str,
    headers: Optional[Mapping[str, str]] = None,
    params: Optional[Mapping[str, str]] = None,
    json: Any = None,
    data: Any = None,
) -> bytes:
    timeout = aiohttp.ClientTimeout(total=get_settings().request_timeout_seconds)
    logger.debug(f"{provider}.{operation}: {method} {url}")
    try:
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.request(
                method, url, headers=dict(headers or {}), params=params, json=json, data=data
            ) as response:
                body = await response.read()
                if response.status >= 400:
                    text = body.decode("utf-8", errors="replace")
                    raise provider_error(
                        f"API Error ({response.status}): {_error_detail(text)}",
                        provider,
                        operation,
                        status=response.status,
                        payload=text,
                    )
                return body
    except aiohttp.ClientError as e:
        raise provider_error(f"Request to {provider} failed: {e}", provider, operation, cause=e) from e
    except asyncio.TimeoutError as e:
        raise provider_error(f"Request to {provider} timed out", provider, operation, cause=e) from e


async def request_json(
    method: str,
    url: str,
    *,
    provider: str,
    operation: str,
    headers: Optional[Mapping[str, str]] = None,
    params: Optional[Mapping[str, str]] = None,
    json: Any = None,
    data: Any = None,
) -> Any:
    """Send a request and decode the JSON response.

    Args:
        method: HTTP method
        url: Absolute URL
        provider: Provider name for error context
        operation: Operation name for error context
        headers: Request headers
        params: Query parameters
        json: JSON request body
        data: Form or raw request body

    Returns:
        Decoded JSON body, or an empty dict for an empty body

    Raises:
        ProviderError: On transport failure, non-2xx status or invalid JSON
    """
    body = await _send(
        method, url, provider=provider, operation=operation, headers=headers, params=params, json=json, data=data
    )
    if not body.strip():
        return {}
    try:
        return jsonlib.loads(body)
    except ValueError as e:
        raise provider_error(
            f"Invalid JSON response from {provider}",
            provider,
            operation,
            payload=body[:500].decode("utf-8", errors="replace"),
            cause=e,
        ) from e


async def request_bytes(
    method: str,
    url: str,
    *,
    provider: str,
    operation: str,
    headers: Optional[Mapping[str, str]] = None,
    params: Optional[Mapping[str, str]] = None,
    json: Any = None,
    data: Any = None,
) -> bytes:
    """Send a request and return the raw response body.

    Raises:
        ProviderError: On transport failure or non-2xx status
    """
    return await _send(
        method, url, provider=provider, operation=operation, headers=headers, params=params, json=json, data=data
    )
