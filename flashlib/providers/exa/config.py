"""Exa configuration."""

from typing import ClassVar, Dict, Optional

from pydantic import Field

from flashlib.providers.core.config import ProviderConfig

EXA_API_URL = "https://api.exa.ai"


class ExaConfig(ProviderConfig):
    """Exa API configuration. Fail-fast, with a shared-settings fallback."""

    provider_name: ClassVar[str] = "exa"
    display_name: ClassVar[str] = "Exa"
    fail_fast: ClassVar[bool] = True
    env_vars: ClassVar[Dict[str, str]] = {"api_key": "EXA_API_KEY"}
    shared_fields: ClassVar[Dict[str, str]] = {"api_key": "exa_api_key"}

    api_key: Optional[str] = Field(default=None, description="Exa API key")
    base_url: str = Field(default=EXA_API_URL, description="Exa API base URL")
