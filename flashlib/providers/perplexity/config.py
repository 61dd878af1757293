"""Perplexity configuration."""

from typing import ClassVar, Dict, Optional

from pydantic import Field

from flashlib.providers.core.config import ProviderConfig

PERPLEXITY_API_URL = "https://api.perplexity.ai"


class PerplexityConfig(ProviderConfig):
    """Perplexity API configuration. Fail-soft."""

    provider_name: ClassVar[str] = "perplexity"
    display_name: ClassVar[str] = "Perplexity"
    env_vars: ClassVar[Dict[str, str]] = {"api_key": "PERPLEXITY_API_KEY"}

    api_key: Optional[str] = Field(default=None, description="Perplexity API key")
    base_url: str = Field(default=PERPLEXITY_API_URL, description="Perplexity API base URL")
