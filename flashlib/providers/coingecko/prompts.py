"""Descriptions shown to the model for CoinGecko actions."""

COIN_PRICES_PROMPT = """
This tool fetches current cryptocurrency prices from the CoinGecko API.

Required inputs:
- coin_ids: Array of coin IDs to fetch prices for (e.g., ['bitcoin', 'ethereum', 'solana'])

Optional inputs:
- vs_currencies: Array of currencies to convert to (default: ['usd'])
- include_market_cap: Include market cap data (default: false)
- include_24h_vol: Include 24h volume data (default: false)
- include_24h_change: Include 24h price change data (default: false)
- include_last_updated_at: Include last updated timestamp (default: false)

Examples:
- Basic price check: { "coin_ids": ["bitcoin", "ethereum"] }
- Multi-currency check: { "coin_ids": ["bitcoin"], "vs_currencies": ["usd", "eur", "jpy"] }
- Detailed data: { "coin_ids": ["bitcoin"], "include_market_cap": true, "include_24h_change": true }

Important notes:
- This endpoint is available on the free CoinGecko API plan
- Rate limits apply (10-50 calls/minute depending on usage)
- For coin IDs, use the 'id' field from the get_coins_list tool
"""

TRENDING_COINS_PROMPT = """
This tool fetches the top-7 trending coins on CoinGecko as searched by users in the last 24 hours.

No inputs required.

Important notes:
- This endpoint is available on the free CoinGecko API plan
- Rate limits apply (10-50 calls/minute depending on usage)
- Trending coins are based on user search volume
"""

COINS_LIST_PROMPT = """
This tool fetches the list of all cryptocurrencies from the CoinGecko API.

Optional inputs:
- include_platform: Include platform contract addresses (default: false)
- limit: Limit the number of results, max 1000 (default: 100)

Examples:
- Basic usage: {}
- With platforms: { "include_platform": true }
- Limited results: { "limit": 10 }

Important notes:
- The full list contains thousands of coins, so use the limit parameter to restrict results
- Use the returned coin IDs with other CoinGecko tools
"""
