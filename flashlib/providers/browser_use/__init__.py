"""Browser Use automation provider."""

from .actions import get_browser_use_actions
from .config import BrowserUseConfig

__all__ = ["BrowserUseConfig", "get_browser_use_actions"]
