"""Exa web search action."""

import logging
from typing import Any, Dict, List, Optional

from flashlib.actions.base import Action, bind_config
from flashlib.core.errors import ProviderError
from flashlib.providers.core.http import parse_record, request_json

from .config import ExaConfig
from .models import ExaSearchParams, SearchResponse

logger = logging.getLogger(__name__)

PROVIDER = "exa"
CONTENT_PREVIEW_CHARS = 300

EXA_SEARCH_PROMPT = """
This tool searches the web using Exa AI and returns relevant content for a query.

Required inputs:
- query: The search query (at least 1 character)

Optional inputs:
- limit: Maximum number of results to return (default: 5)
- include_domains: Domains to include in the search (e.g. ["example.com", "example.org"])
- exclude_domains: Domains to exclude from the search (e.g. ["example.net"])
- retrieve_content: Whether to retrieve the content of each result (default: true)

Examples:
- Basic search: { "query": "climate change solutions" }
- Limited search: { "query": "machine learning tutorials", "limit": 3 }
- Domain-specific search: { "query": "javascript frameworks", "include_domains": ["dev.to", "medium.com"] }

More specific queries yield better results. Content retrieval may increase response time.
"""


def content_preview(text: str) -> str:
    if len(text) > CONTENT_PREVIEW_CHARS:
        return text[:CONTENT_PREVIEW_CHARS] + "..."
    return text


def format_results(query: str, response: SearchResponse, retrieve_content: bool) -> str:
    if not response.results:
        return "No results found for your query."
    text = f'Found {len(response.results)} results for "{query}":\n\n'
    for index, result in enumerate(response.results, start=1):
        text += f"{index}. {result.title}\n"
        text += f"   URL: {result.url}\n"
        if retrieve_content and result.text:
            text += f"   Content: {content_preview(result.text)}\n"
        text += "\n"
    return text


async def exa_search(config: ExaConfig, args: Dict[str, Any]) -> str:
    """Search the web and summarize the results."""
    query = args.get("query")
    retrieve_content = args.get("retrieve_content")
    if retrieve_content is None:
        retrieve_content = True

    body: Dict[str, Any] = {"query": query, "numResults": args.get("limit") or 5}
    if args.get("include_domains"):
        body["includeDomains"] = args["include_domains"]
    if args.get("exclude_domains"):
        body["excludeDomains"] = args["exclude_domains"]
    if retrieve_content:
        body["contents"] = {"text": True}

    try:
        data = await request_json(
            "POST",
            f"{config.base_url}/search",
            provider=PROVIDER,
            operation="search",
            headers={"x-api-key": config.get_api_key(), "Content-Type": "application/json"},
            json=body,
        )
    except ProviderError as e:
        raise e.with_prefix("Exa search failed")
    response = parse_record(SearchResponse, data, provider=PROVIDER, operation="search")
    return format_results(query, response, retrieve_content)


def get_exa_actions(config: Optional[ExaConfig] = None) -> List[Action]:
    """Build the Exa action set."""
    resolve = ExaConfig.resolver(config)
    return [
        Action("exa_search", EXA_SEARCH_PROMPT, ExaSearchParams, bind_config(exa_search, resolve)),
    ]
