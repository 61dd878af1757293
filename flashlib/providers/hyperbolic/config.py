"""Hyperbolic configuration."""

from typing import ClassVar, Dict, Optional

from pydantic import Field

from flashlib.providers.core.config import ProviderConfig
from flashlib.providers.core.http import bearer

HYPERBOLIC_API_URL = "https://api.hyperbolic.xyz/v1"
HYPERBOLIC_ACCOUNT_URL = "https://api.hyperbolic.xyz"


class HyperbolicConfig(ProviderConfig):
    """Hyperbolic API configuration. Fail-fast, with a shared-settings fallback."""

    provider_name: ClassVar[str] = "hyperbolic"
    display_name: ClassVar[str] = "Hyperbolic"
    fail_fast: ClassVar[bool] = True
    env_vars: ClassVar[Dict[str, str]] = {"api_key": "HYPERBOLIC_API_KEY"}
    shared_fields: ClassVar[Dict[str, str]] = {"api_key": "hyperbolic_api_key"}

    api_key: Optional[str] = Field(default=None, description="Hyperbolic API key")
    base_url: str = Field(default=HYPERBOLIC_API_URL, description="Hyperbolic API base URL")
    account_url: str = Field(default=HYPERBOLIC_ACCOUNT_URL, description="Hyperbolic account settings base URL")

    def headers(self) -> Dict[str, str]:
        return {**bearer(self.get_api_key()), "Content-Type": "application/json"}
