"""HeyGen configuration."""

from typing import ClassVar, Dict, Optional

from pydantic import Field

from flashlib.providers.core.config import ProviderConfig

HEYGEN_API_URL = "https://api.heygen.com"
HEYGEN_UPLOAD_URL = "https://upload.heygen.com"


class HeyGenConfig(ProviderConfig):
    """HeyGen API configuration. Fail-soft: actions check the key themselves."""

    provider_name: ClassVar[str] = "heygen"
    display_name: ClassVar[str] = "HeyGen"
    env_vars: ClassVar[Dict[str, str]] = {"api_key": "HEYGEN_API_KEY"}

    api_key: Optional[str] = Field(default=None, description="HeyGen API key")
    base_url: str = Field(default=HEYGEN_API_URL, description="HeyGen API base URL")
    upload_url: str = Field(default=HEYGEN_UPLOAD_URL, description="HeyGen asset upload base URL")

    def headers(self) -> Dict[str, str]:
        return {"Accept": "application/json", "X-Api-Key": self.require_api_key()}
