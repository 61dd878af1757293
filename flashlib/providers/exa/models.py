"""Exa search schema and response records."""

from typing import List, Optional

from pydantic import Field

from flashlib.core.models import ActionParameters, ProviderRecord


class ExaSearchParams(ActionParameters):
    query: str = Field(..., min_length=1, description="The search query to find relevant content")
    limit: int = Field(default=5, gt=0, description="Maximum number of results to return")
    include_domains: Optional[List[str]] = Field(default=None, description="List of domains to include in search")
    exclude_domains: Optional[List[str]] = Field(default=None, description="List of domains to exclude from search")
    retrieve_content: bool = Field(default=True, description="Whether to retrieve full content of search results")


class SearchResult(ProviderRecord):
    title: Optional[str] = None
    url: Optional[str] = None
    text: Optional[str] = None
    published_date: Optional[str] = Field(default=None, alias="publishedDate")


class SearchResponse(ProviderRecord):
    results: List[SearchResult] = Field(default_factory=list)
