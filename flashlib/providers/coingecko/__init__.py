"""CoinGecko market data provider."""

from .actions import get_coingecko_actions
from .config import CoinGeckoConfig

__all__ = ["CoinGeckoConfig", "get_coingecko_actions"]
