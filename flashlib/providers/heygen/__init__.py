"""HeyGen avatar video provider."""

from .actions import get_heygen_actions
from .config import HeyGenConfig

__all__ = ["HeyGenConfig", "get_heygen_actions"]
