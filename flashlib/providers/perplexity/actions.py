"""Perplexity chat completion action."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from flashlib.actions.base import Action, bind_config
from flashlib.core.errors import ProviderError
from flashlib.providers.core.http import bearer, parse_record, request_json

from .config import PerplexityConfig
from .models import ChatCompletion, PerplexityChatParams
from .prompts import PERPLEXITY_CHAT_PROMPT

logger = logging.getLogger(__name__)

PROVIDER = "perplexity"

_DEFAULTS: Dict[str, Any] = {
    "model": "sonar",
    "temperature": 0.2,
    "top_p": 0.9,
    "return_images": False,
    "return_related_questions": False,
    "top_k": 0,
    "presence_penalty": 0,
    "frequency_penalty": 1,
}


def build_request(args: Dict[str, Any]) -> Dict[str, Any]:
    """Fill defaults and drop unset optional fields."""
    body = {**_DEFAULTS, **{key: value for key, value in args.items() if value is not None}}
    return body


def format_completion(completion: ChatCompletion) -> str:
    result = ""
    if completion.choices:
        choice = completion.choices[0]
        content = choice.message.content if choice.message else None
        result += f"{content or ''}\n\n"
        if choice.finish_reason:
            result += f"Finish reason: {choice.finish_reason}\n\n"
    if completion.citations:
        result += "**Sources:**\n"
        for index, citation in enumerate(completion.citations, start=1):
            result += f"{index}. {citation}\n"
        result += "\n"
    if completion.related_questions:
        result += "**Related questions:**\n"
        for index, question in enumerate(completion.related_questions, start=1):
            result += f"{index}. {question}\n"
        result += "\n"
    created = (
        datetime.fromtimestamp(completion.created, tz=timezone.utc).isoformat()
        if completion.created is not None
        else "unknown"
    )
    result += f"Model: {completion.model} | Created: {created}"
    return result.strip()


async def perplexity_chat(config: PerplexityConfig, args: Dict[str, Any]) -> str:
    """Send a chat completion request and format the answer with its sources."""
    headers = {**bearer(config.require_api_key()), "Content-Type": "application/json"}
    try:
        data = await request_json(
            "POST",
            f"{config.base_url}/chat/completions",
            provider=PROVIDER,
            operation="chat_completions",
            headers=headers,
            json=build_request(args),
        )
    except ProviderError as e:
        raise e.with_prefix("Perplexity API error")
    return format_completion(parse_record(ChatCompletion, data, provider=PROVIDER, operation="chat_completions"))


def get_perplexity_actions(config: Optional[PerplexityConfig] = None) -> List[Action]:
    """Build the Perplexity action set."""
    resolve = PerplexityConfig.resolver(config)
    return [
        Action("perplexity_chat", PERPLEXITY_CHAT_PROMPT, PerplexityChatParams, bind_config(perplexity_chat, resolve)),
    ]
