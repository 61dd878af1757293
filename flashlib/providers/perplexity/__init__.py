"""Perplexity web-answer provider."""

from .actions import get_perplexity_actions
from .config import PerplexityConfig

__all__ = ["PerplexityConfig", "get_perplexity_actions"]
