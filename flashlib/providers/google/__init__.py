"""Google Calendar and Gmail provider."""

from .actions import get_google_actions
from .config import GoogleConfig

__all__ = ["GoogleConfig", "get_google_actions"]
