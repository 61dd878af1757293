"""Browser Use configuration."""

from typing import ClassVar, Dict, Optional

from pydantic import Field

from flashlib.providers.core.config import ProviderConfig
from flashlib.providers.core.http import bearer

BROWSER_USE_API_URL = "https://api.browser-use.com/api/v1"


class BrowserUseConfig(ProviderConfig):
    """Browser Use API configuration. Fail-soft."""

    provider_name: ClassVar[str] = "browser_use"
    display_name: ClassVar[str] = "Browser Use"
    env_vars: ClassVar[Dict[str, str]] = {
        "api_key": "BROWSER_USE_API_KEY",
        "base_url": "BROWSER_USE_BASE_URL",
    }

    api_key: Optional[str] = Field(default=None, description="Browser Use API key")
    base_url: str = Field(default=BROWSER_USE_API_URL, description="Browser Use API base URL")

    def headers(self, json_body: bool = False) -> Dict[str, str]:
        headers = bearer(self.require_api_key())
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers
