"""CoinGecko market data actions."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from flashlib.actions.base import Action, bind_config
from flashlib.core.errors import ProviderError
from flashlib.providers.core.http import parse_record, parse_records, query_params, request_json

from .config import CoinGeckoConfig
from .models import (
    MAX_COINS_LISTED,
    Coin,
    CoinPricesParams,
    CoinsListParams,
    TrendingCoinsParams,
    TrendingResponse,
)
from .prompts import COIN_PRICES_PROMPT, COINS_LIST_PROMPT, TRENDING_COINS_PROMPT

logger = logging.getLogger(__name__)

PROVIDER = "coingecko"
RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later or use an API key for higher limits."
DESCRIPTION_PREVIEW_CHARS = 100
TRENDING_EXTRAS_SHOWN = 3

CURRENCY_SYMBOLS = {
    "usd": "$",
    "eur": "€",
    "gbp": "£",
    "jpy": "¥",
    "btc": "₿",
    "eth": "Ξ",
}


def currency_symbol(currency: str) -> str:
    return CURRENCY_SYMBOLS.get(currency.lower(), currency)


def format_number(value: Optional[float], currency: str = "usd") -> str:
    """Compact currency rendering: $1.23B, $4.56M, $7.89K, or more decimals for tiny prices."""
    if value is None:
        return "N/A"
    symbol = currency_symbol(currency)
    if value >= 1_000_000_000:
        return f"{symbol}{value / 1_000_000_000:.2f}B"
    if value >= 1_000_000:
        return f"{symbol}{value / 1_000_000:.2f}M"
    if value >= 1_000:
        return f"{symbol}{value / 1_000:.2f}K"
    if 0 < value < 0.01:
        return f"{symbol}{value:.8f}"
    return f"{symbol}{value:.2f}"


async def _get(config: CoinGeckoConfig, endpoint: str, operation: str, params: Optional[Dict[str, str]] = None) -> Any:
    return await request_json(
        "GET",
        f"{config.base_url}{endpoint}",
        provider=PROVIDER,
        operation=operation,
        headers=config.headers(),
        params=params,
    )


def format_prices(data: Dict[str, Dict[str, Any]], args: Dict[str, Any]) -> str:
    currencies = [currency.lower() for currency in args.get("vs_currencies") or ["usd"]]
    text = "Current Cryptocurrency Prices:\n\n"
    for coin_id, coin in data.items():
        text += f"{coin_id[:1].upper()}{coin_id[1:]}:\n"
        for currency in currencies:
            if coin.get(currency) is None:
                continue
            label = currency.upper()
            text += f"  {label}: {format_number(coin[currency])}\n"
            if args.get("include_market_cap") and coin.get(f"{currency}_market_cap") is not None:
                text += f"  Market Cap ({label}): {format_number(coin[f'{currency}_market_cap'])}\n"
            if args.get("include_24h_vol") and coin.get(f"{currency}_24h_vol") is not None:
                text += f"  24h Volume ({label}): {format_number(coin[f'{currency}_24h_vol'])}\n"
            if args.get("include_24h_change") and coin.get(f"{currency}_24h_change") is not None:
                change = coin[f"{currency}_24h_change"]
                arrow = "↗" if change >= 0 else "↘"
                text += f"  24h Change ({label}): {arrow} {change:.2f}%\n"
        if args.get("include_last_updated_at") and coin.get("last_updated_at") is not None:
            updated = datetime.fromtimestamp(coin["last_updated_at"], tz=timezone.utc)
            text += f"  Last Updated: {updated.isoformat()}\n"
        text += "\n"
    return text


async def get_coin_prices(config: CoinGeckoConfig, args: Dict[str, Any]) -> str:
    """Fetch spot prices for a list of coins."""
    params = query_params(
        ids=args.get("coin_ids") or [],
        vs_currencies=args.get("vs_currencies") or ["usd"],
        include_market_cap=args.get("include_market_cap") or None,
        include_24h_vol=args.get("include_24h_vol") or None,
        include_24h_change=args.get("include_24h_change") or None,
        include_last_updated_at=args.get("include_last_updated_at") or None,
    )
    try:
        data = await _get(config, "/simple/price", "get_coin_prices", params)
    except ProviderError as e:
        if e.status_code == 429:
            return RATE_LIMIT_MESSAGE
        raise e.with_prefix("CoinGecko API error")
    if not data:
        return "No data returned from CoinGecko API. Check that the coin IDs are valid."
    return format_prices(data, args)


def format_trending(trending: TrendingResponse) -> str:
    text = "🔥 Top Trending on CoinGecko (Last 24 Hours):\n\n"
    text += "TRENDING COINS:\n"
    for index, entry in enumerate(trending.coins, start=1):
        coin = entry.item
        text += f"{index}. {coin.name} ({coin.symbol.upper()})\n"
        text += f"   ID: {coin.id}\n"
        text += f"   Market Cap Rank: #{coin.market_cap_rank or 'N/A'}\n"
        text += f"   Price in BTC: {coin.price_btc:.8f} BTC\n"
        if coin.data:
            if coin.data.price:
                text += f"   Price: {coin.data.price}\n"
            if coin.data.market_cap:
                text += f"   Market Cap: {coin.data.market_cap}\n"
            if coin.data.total_volume:
                text += f"   24h Volume: {coin.data.total_volume}\n"
            if coin.data.content and coin.data.content.description:
                description = coin.data.content.description
                if len(description) > DESCRIPTION_PREVIEW_CHARS:
                    description = description[:DESCRIPTION_PREVIEW_CHARS] + "..."
                text += f"   Description: {description}\n"
        text += "\n"

    if trending.nfts:
        text += "TRENDING NFTs:\n"
        for index, nft in enumerate(trending.nfts[:TRENDING_EXTRAS_SHOWN], start=1):
            native = nft.native_currency_symbol.upper()
            text += f"{index}. {nft.name} ({nft.symbol})\n"
            text += f"   ID: {nft.id}\n"
            text += f"   Currency: {native}\n"
            text += f"   Floor Price: {nft.floor_price_in_native_currency} {native}\n"
            text += f"   24h Change: {nft.floor_price_24h_percentage_change:.2f}%\n\n"

    if trending.categories:
        text += "TRENDING CATEGORIES:\n"
        for index, category in enumerate(trending.categories[:TRENDING_EXTRAS_SHOWN], start=1):
            text += f"{index}. {category.name}\n"
            text += f"   Coins Count: {category.coins_count}\n"
            text += f"   1h Market Cap Change: {category.market_cap_1h_change:.2f}%\n"
            if category.data and category.data.market_cap:
                text += f"   Market Cap: ${category.data.market_cap / 1_000_000_000:.2f}B\n"
            text += "\n"

    return text + "Based on user search trends and market activity in the last 24 hours."


async def get_trending_coins(config: CoinGeckoConfig, args: Dict[str, Any]) -> str:
    """Summarize trending coins, NFTs and categories."""
    try:
        data = await _get(config, "/search/trending", "get_trending_coins")
    except ProviderError as e:
        if e.status_code == 429:
            return RATE_LIMIT_MESSAGE
        raise e.with_prefix("CoinGecko API error")
    trending = parse_record(TrendingResponse, data or {}, provider=PROVIDER, operation="get_trending_coins")
    if not trending.coins:
        return "No trending coins data returned from CoinGecko API."
    return format_trending(trending)


async def get_coins_list(config: CoinGeckoConfig, args: Dict[str, Any]) -> str:
    """List coin IDs, names and symbols, optionally with contract addresses."""
    include_platform = bool(args.get("include_platform"))
    try:
        data = await _get(
            config,
            "/coins/list",
            "get_coins_list",
            query_params(include_platform=include_platform or None),
        )
    except ProviderError as e:
        if e.status_code == 429:
            return RATE_LIMIT_MESSAGE
        raise e.with_prefix("CoinGecko API error")
    if not data:
        return "No data returned from CoinGecko API."

    limit = min(args.get("limit") or 100, MAX_COINS_LISTED)
    coins = parse_records(
        Coin, data[:limit] if isinstance(data, list) else data, provider=PROVIDER, operation="get_coins_list"
    )
    text = f"Cryptocurrency List ({len(coins)} of {len(data)} total):\n\n"
    for coin in coins:
        text += f"{coin.name} ({coin.symbol.upper()})\n"
        text += f"  ID: {coin.id}\n"
        if include_platform and coin.platforms:
            text += "  Platforms:\n"
            for platform, address in coin.platforms.items():
                if address:
                    text += f"    {platform}: {address}\n"
        text += "\n"
    return text


def get_coingecko_actions(config: Optional[CoinGeckoConfig] = None) -> List[Action]:
    """Build the CoinGecko action set."""
    resolve = CoinGeckoConfig.resolver(config)
    return [
        Action("get_coin_prices", COIN_PRICES_PROMPT, CoinPricesParams, bind_config(get_coin_prices, resolve)),
        Action("get_trending_coins", TRENDING_COINS_PROMPT, TrendingCoinsParams, bind_config(get_trending_coins, resolve)),
        Action("get_coins_list", COINS_LIST_PROMPT, CoinsListParams, bind_config(get_coins_list, resolve)),
    ]
