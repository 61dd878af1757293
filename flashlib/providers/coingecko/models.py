"""Input schemas and market records for CoinGecko actions."""

from typing import Dict, List, Optional

from pydantic import Field

from flashlib.core.models import ActionParameters, ProviderRecord

MAX_COINS_LISTED = 1000


class CoinPricesParams(ActionParameters):
    coin_ids: List[str] = Field(
        ..., min_length=1, description="Array of coin IDs to fetch prices for (e.g., ['bitcoin', 'ethereum'])"
    )
    vs_currencies: List[str] = Field(
        default_factory=lambda: ["usd"], description="Array of currencies to convert to (e.g., ['usd', 'eur'])"
    )
    include_market_cap: bool = Field(default=False, description="Include market cap data")
    include_24h_vol: bool = Field(default=False, description="Include 24h volume data")
    include_24h_change: bool = Field(default=False, description="Include 24h price change data")
    include_last_updated_at: bool = Field(default=False, description="Include last updated timestamp")


class TrendingCoinsParams(ActionParameters):
    pass


class CoinsListParams(ActionParameters):
    include_platform: bool = Field(default=False, description="Include platform contract addresses")
    limit: int = Field(default=100, ge=1, description="Limit the number of results (max 1000)")


class TrendingContent(ProviderRecord):
    title: Optional[str] = None
    description: Optional[str] = None


class TrendingCoinData(ProviderRecord):
    price: Optional[str] = None
    market_cap: Optional[str] = None
    total_volume: Optional[str] = None
    content: Optional[TrendingContent] = None


class TrendingCoin(ProviderRecord):
    id: str
    name: str
    symbol: str
    market_cap_rank: Optional[int] = None
    price_btc: float = 0.0
    data: Optional[TrendingCoinData] = None


class TrendingCoinEntry(ProviderRecord):
    item: TrendingCoin


class TrendingNft(ProviderRecord):
    id: str
    name: str
    symbol: str = ""
    native_currency_symbol: str = ""
    floor_price_in_native_currency: float = 0.0
    floor_price_24h_percentage_change: float = 0.0


class CategoryData(ProviderRecord):
    market_cap: Optional[float] = None


class TrendingCategory(ProviderRecord):
    id: Optional[str] = None
    name: str
    coins_count: Optional[int] = None
    market_cap_1h_change: float = 0.0
    data: Optional[CategoryData] = None


class TrendingResponse(ProviderRecord):
    coins: List[TrendingCoinEntry] = Field(default_factory=list)
    nfts: List[TrendingNft] = Field(default_factory=list)
    categories: List[TrendingCategory] = Field(default_factory=list)


class Coin(ProviderRecord):
    id: str
    symbol: str
    name: str
    platforms: Optional[Dict[str, Optional[str]]] = None
