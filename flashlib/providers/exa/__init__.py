"""Exa web search provider."""

from .actions import get_exa_actions
from .config import ExaConfig

__all__ = ["ExaConfig", "get_exa_actions"]
