"""Hyperbolic GPU marketplace provider."""

from .actions import get_hyperbolic_actions
from .config import HyperbolicConfig

__all__ = ["HyperbolicConfig", "get_hyperbolic_actions"]
