"""ElevenLabs configuration."""

from typing import ClassVar, Dict, Optional

from pydantic import Field

from flashlib.providers.core.config import ProviderConfig

ELEVENLABS_API_URL = "https://api.elevenlabs.io"


class ElevenLabsConfig(ProviderConfig):
    """ElevenLabs API configuration. Fail-soft."""

    provider_name: ClassVar[str] = "elevenlabs"
    display_name: ClassVar[str] = "ElevenLabs"
    env_vars: ClassVar[Dict[str, str]] = {"api_key": "ELEVENLABS_API_KEY"}

    api_key: Optional[str] = Field(default=None, description="ElevenLabs API key")
    base_url: str = Field(default=ELEVENLABS_API_URL, description="ElevenLabs API base URL")

    def headers(self) -> Dict[str, str]:
        return {"xi-api-key": self.require_api_key()}
