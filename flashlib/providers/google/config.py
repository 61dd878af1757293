"""Google API configuration."""

from typing import ClassVar, Dict, Optional

from pydantic import Field

from flashlib.providers.core.config import ProviderConfig
from flashlib.providers.core.http import bearer

CALENDAR_API_URL = "https://www.googleapis.com/calendar/v3"
GMAIL_API_URL = "https://gmail.googleapis.com/gmail/v1"


class GoogleConfig(ProviderConfig):
    """OAuth access token for Google Calendar and Gmail.

    Obtaining the token is the caller's business; this only stores it.
    """

    provider_name: ClassVar[str] = "google"
    display_name: ClassVar[str] = "Google"
    fail_fast: ClassVar[bool] = True
    credential_field: ClassVar[str] = "token"
    credential_label: ClassVar[str] = "token"
    env_vars: ClassVar[Dict[str, str]] = {"token": "GOOGLE_TOKEN"}
    shared_fields: ClassVar[Dict[str, str]] = {"token": "google_token"}

    token: Optional[str] = Field(default=None, description="Google OAuth access token")
    calendar_url: str = Field(default=CALENDAR_API_URL, description="Calendar API base URL")
    gmail_url: str = Field(default=GMAIL_API_URL, description="Gmail API base URL")

    def get_token(self) -> Optional[str]:
        return self.get_api_key()

    def headers(self) -> Dict[str, str]:
        return {**bearer(self.get_token()), "Content-Type": "application/json"}
