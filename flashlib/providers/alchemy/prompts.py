"""Descriptions shown to the model for Alchemy actions."""

_NETWORK_OPTION = """- network: The network to query (default: "ETH_MAINNET")
  Other options: MATIC_MAINNET, MATIC_MUMBAI, ASTAR_MAINNET, OPT_MAINNET, ARB_MAINNET, BASE_MAINNET, etc."""

BLOCK_NUMBER_PROMPT = f"""
This tool fetches the latest block number from a specified blockchain network using the Alchemy API.

Optional inputs:
{_NETWORK_OPTION}

Examples:
- Ethereum Mainnet: {{ "network": "ETH_MAINNET" }}
- Polygon/Matic: {{ "network": "MATIC_MAINNET" }}
- Arbitrum: {{ "network": "ARB_MAINNET" }}

Important notes:
- Requires a valid Alchemy API key
- The block number represents the current height of the blockchain
"""

ETH_BALANCE_PROMPT = f"""
This tool fetches the native token balance (ETH, MATIC, etc.) for a wallet address using the Alchemy API.

Required inputs:
- address: The 0x-prefixed wallet address to fetch balance for

Optional inputs:
- blockTag: Block number or tag to fetch balance at (default: "latest")
  Options: "latest", "pending", "finalized", "safe", or a specific block number
{_NETWORK_OPTION}

Examples:
- Basic usage: {{ "address": "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045" }}
- Specific block: {{ "address": "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045", "blockTag": "15000000" }}
- On Polygon: {{ "address": "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045", "network": "MATIC_MAINNET" }}

Important notes:
- Requires a valid Alchemy API key
- Returns balance in native currency units (ETH, MATIC, etc.) and in Wei
"""

GAS_PRICE_PROMPT = f"""
This tool fetches the current gas price from a blockchain network using the Alchemy API (eth_gasPrice).

Optional inputs:
{_NETWORK_OPTION}

Important notes:
- Requires a valid Alchemy API key
- Returns the current gas price in Wei, Gwei, and example transaction costs in native currency
- For EIP-1559 networks, this returns the base fee + priority fee estimate
"""

TRANSACTION_INFO_PROMPT = f"""
This tool fetches detailed information about a blockchain transaction using the Alchemy API.

Required inputs:
- txHash: The transaction hash to fetch details for

Optional inputs:
{_NETWORK_OPTION}

Examples:
- Basic usage: {{ "txHash": "0x88df016429689c079f3b2f6ad39fa052532c56795b733da78a91ebe6a713944b" }}

Important notes:
- Requires a valid Alchemy API key
- Returns complete transaction details including status, gas used, and receipt
- Transaction hash must be a valid 0x-prefixed hex string
"""

CHAIN_ID_PROMPT = f"""
This tool fetches the chain ID of a blockchain network using the Alchemy API.

Optional inputs:
{_NETWORK_OPTION}

Important notes:
- Requires a valid Alchemy API key
- The chain ID is a unique identifier for each blockchain network
"""

BLOCK_INFO_PROMPT = f"""
This tool fetches information about a block by number or tag using the Alchemy API (eth_getBlockByNumber).

Optional inputs:
- blockNumberOrTag: Block number or tag (default: "latest")
  Options: "latest", "earliest", "pending", "safe", "finalized", or a specific block number
- includeTransactions: If true, returns full transaction objects; if false, only hashes (default: false)
{_NETWORK_OPTION}

Examples:
- Latest block: {{ "blockNumberOrTag": "latest" }}
- Specific block with transactions: {{ "blockNumberOrTag": 15000000, "includeTransactions": true }}

Important notes:
- Requires a valid Alchemy API key
- Blocks with many transactions are summarized; only the first few are shown in detail
"""

ACCOUNTS_PROMPT = f"""
This tool lists the accounts managed by the node using the Alchemy API (eth_accounts).

Optional inputs:
{_NETWORK_OPTION}

Important notes:
- Requires a valid Alchemy API key
- Alchemy nodes do not manage private keys, so the list is usually empty
"""

FEE_HISTORY_PROMPT = f"""
This tool fetches historical gas fee data for a range of blocks using the Alchemy API (eth_feeHistory).

Optional inputs:
- blockCount: Number of blocks in the range, 1 to 1024 (default: 10)
- newestBlock: Highest block of the range, hex number or tag (default: "latest")
- rewardPercentiles: Priority fee percentiles to sample, each between 0 and 100 (e.g., [25, 50, 75])
{_NETWORK_OPTION}

Examples:
- Last 10 blocks: {{ "blockCount": 10 }}
- With percentiles: {{ "blockCount": 5, "rewardPercentiles": [25, 50, 75] }}

Important notes:
- Requires a valid Alchemy API key
- Only meaningful on EIP-1559 networks
- Useful for choosing maxFeePerGas and maxPriorityFeePerGas
"""

ESTIMATE_GAS_PROMPT = f"""
This tool estimates the gas a transaction would use using the Alchemy API (eth_estimateGas).

Required inputs:
- transaction: The transaction to estimate
  - to: Recipient or contract address (required)
  - from: Sender address (optional)
  - value: Amount in Wei, as hex (0x...) or a decimal string (optional)
  - data: Call data for contract interactions (optional)

Optional inputs:
- blockTag: Block to estimate against (default: "latest")
{_NETWORK_OPTION}

Examples:
- ETH transfer: {{ "transaction": {{ "to": "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045", "value": "1000000000000000000" }} }}

Important notes:
- Requires a valid Alchemy API key
- If the transaction would revert, the estimate fails
- Add a buffer to the estimate when setting the gas limit
"""

LOGS_PROMPT = f"""
This tool fetches event logs matching a filter using the Alchemy API (eth_getLogs).

Required inputs:
- filter: Filter options
  - address: Contract address or list of addresses (optional)
  - topics: Array of topic filters; null entries match anything (optional)
  - fromBlock / toBlock: Block range as hex numbers or tags (optional)
  - blockHash: A single block to search; cannot be combined with fromBlock/toBlock (optional)

Optional inputs:
- maxResults: Maximum number of logs to display, 1 to 100 (default: 10)
{_NETWORK_OPTION}

Examples:
- Transfer events of a token: {{ "filter": {{ "address": "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48", "topics": ["0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"], "fromBlock": "latest" }} }}

Important notes:
- Requires a valid Alchemy API key
- Wide block ranges may be rejected by the node; narrow the range if that happens
"""
