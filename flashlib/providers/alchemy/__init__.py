"""Alchemy blockchain node provider."""

from .actions import get_alchemy_actions
from .config import AlchemyConfig

__all__ = ["AlchemyConfig", "get_alchemy_actions"]
