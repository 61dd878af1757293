"""CoinGecko configuration."""

from typing import ClassVar, Dict, Optional

from pydantic import Field

from flashlib.providers.core.config import ProviderConfig

COINGECKO_API_URL = "https://api.coingecko.com/api/v3"


class CoinGeckoConfig(ProviderConfig):
    """CoinGecko configuration. The key is optional and only raises rate limits."""

    provider_name: ClassVar[str] = "coingecko"
    display_name: ClassVar[str] = "CoinGecko"
    env_vars: ClassVar[Dict[str, str]] = {"api_key": "COINGECKO_API_KEY"}

    api_key: Optional[str] = Field(default=None, description="CoinGecko API key")
    base_url: str = Field(default=COINGECKO_API_URL, description="CoinGecko API base URL")

    def has_api_key(self) -> bool:
        return bool(self.api_key)

    def headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.has_api_key():
            headers["x-cg-pro-api-key"] = self.api_key  # type: ignore[assignment]
        return headers
