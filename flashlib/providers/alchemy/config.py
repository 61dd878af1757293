"""Alchemy configuration."""

from typing import ClassVar, Dict, Optional

from pydantic import Field

from flashlib.providers.core.config import ProviderConfig

ALCHEMY_RPC_URL = "https://{network}.g.alchemy.com/v2/{api_key}"


class AlchemyConfig(ProviderConfig):
    """Alchemy node API configuration. Fail-fast, with a shared-settings fallback."""

    provider_name: ClassVar[str] = "alchemy"
    display_name: ClassVar[str] = "Alchemy"
    fail_fast: ClassVar[bool] = True
    env_vars: ClassVar[Dict[str, str]] = {"api_key": "ALCHEMY_API_KEY"}
    shared_fields: ClassVar[Dict[str, str]] = {"api_key": "alchemy_api_key"}

    api_key: Optional[str] = Field(default=None, description="Alchemy API key")
    rpc_url_template: str = Field(
        default=ALCHEMY_RPC_URL,
        description="JSON-RPC endpoint template with {network} and {api_key} placeholders",
    )

    def rpc_url(self, network_slug: str) -> str:
        return self.rpc_url_template.format(network=network_slug, api_key=self.get_api_key())
