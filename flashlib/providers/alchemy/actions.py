"""Alchemy JSON-RPC read actions."""

import json
import logging
from datetime import datetime, timezone
from itertools import count
from typing import Any, Dict, List, Optional

from flashlib.actions.base import Action, bind_config
from flashlib.core.errors import ProviderError, ValidationError
from flashlib.providers.core.http import parse_record, parse_records, provider_error, request_json

from .config import AlchemyConfig
from .models import (
    BlockParams,
    EstimateGasParams,
    EthBalanceParams,
    FeeHistory,
    FeeHistoryParams,
    GetLogsParams,
    NetworkParams,
    RpcBlock,
    RpcLog,
    RpcReceipt,
    RpcTransaction,
    TransactionParams,
    get_network,
)
from .prompts import (
    ACCOUNTS_PROMPT,
    BLOCK_INFO_PROMPT,
    BLOCK_NUMBER_PROMPT,
    CHAIN_ID_PROMPT,
    ESTIMATE_GAS_PROMPT,
    ETH_BALANCE_PROMPT,
    FEE_HISTORY_PROMPT,
    GAS_PRICE_PROMPT,
    LOGS_PROMPT,
    TRANSACTION_INFO_PROMPT,
)

logger = logging.getLogger(__name__)

PROVIDER = "alchemy"
WEI_DECIMALS = 18
GWEI_DECIMALS = 9
MAX_LOGS_SHOWN = 3
MAX_BLOCK_TRANSACTIONS_SHOWN = 5
MAX_BLOCK_HASHES_SHOWN = 10

# (label, gas units) for the example cost table
EXAMPLE_GAS_COSTS = (
    ("Standard Transfer (21,000 gas)", 21000),
    ("ERC-20 Transfer (~65,000 gas)", 65000),
    ("NFT Mint (~200,000 gas)", 200000),
)

# Upper bounds in Gwei for LOW, MODERATE and HIGH
GAS_LEVELS = {
    "ETH_MAINNET": (15, 50, 150),
    "MATIC_MAINNET": (50, 100, 200),
}

_request_ids = count(1)


def hex_to_int(value: Optional[str]) -> int:
    if not value:
        return 0
    return int(value, 16)


def format_units(value: int, decimals: int = WEI_DECIMALS) -> str:
    """Render an integer amount of base units as a decimal string, e.g. ``1.5``."""
    sign = "-" if value < 0 else ""
    whole, fraction = divmod(abs(value), 10**decimals)
    digits = str(fraction).rjust(decimals, "0").rstrip("0") or "0"
    return f"{sign}{whole}.{digits}"


def block_tag(value: str) -> str:
    """Named tags pass through; decimal block numbers become hex quantities."""
    if value.isdigit():
        return hex(int(value))
    return value


def _queried_at() -> str:
    return f"Queried at: {datetime.now(timezone.utc).isoformat()}\n"


async def rpc_call(config: AlchemyConfig, network: str, method: str, params: List[Any]) -> Any:
    """Perform one JSON-RPC call and return its ``result``.

    Raises:
        ProviderError: On HTTP failure or a JSON-RPC error object
    """
    payload = await request_json(
        "POST",
        config.rpc_url(get_network(network).slug),
        provider=PROVIDER,
        operation=method,
        headers={"Content-Type": "application/json"},
        json={"jsonrpc": "2.0", "id": next(_request_ids), "method": method, "params": params},
    )
    error = payload.get("error") if isinstance(payload, dict) else None
    if error:
        message = error.get("message") if isinstance(error, dict) else str(error)
        raise provider_error(f"RPC Error: {message}", PROVIDER, method, payload=str(error))
    return payload.get("result") if isinstance(payload, dict) else None


async def get_block_number(config: AlchemyConfig, args: Dict[str, Any]) -> str:
    """Report the latest block height."""
    network = args.get("network") or "ETH_MAINNET"
    try:
        result = await rpc_call(config, network, "eth_blockNumber", [])
    except ProviderError as e:
        raise e.with_prefix("Alchemy block number fetch failed")
    block_number = hex_to_int(result)
    return (
        f"Latest Block Number on {network}:\n\n"
        f"Block Number: {block_number}\n"
        f"Hex: {hex(block_number)}\n\n" + _queried_at()
    )


async def get_eth_balance(config: AlchemyConfig, args: Dict[str, Any]) -> str:
    """Report the native token balance of an address."""
    network = args.get("network") or "ETH_MAINNET"
    address = args.get("address")
    tag = str(args.get("blockTag") or "latest")
    try:
        result = await rpc_call(config, network, "eth_getBalance", [address, block_tag(tag)])
    except ProviderError as e:
        raise e.with_prefix("Alchemy ETH balance fetch failed")
    balance = hex_to_int(result)
    symbol = get_network(network).symbol
    return (
        f"Native Token Balance for {address}:\n\n"
        f"Balance: {format_units(balance)} {symbol}\n"
        f"Balance (Wei): {balance}\n"
        f"Block: {tag}\n\n" + _queried_at()
    )


def gas_level(network: str, gwei: float) -> Optional[str]:
    bounds = GAS_LEVELS.get(network)
    if bounds is None:
        return None
    low, moderate, high = bounds
    if gwei < low:
        return f"LOW (< {low} Gwei)"
    if gwei < moderate:
        return f"MODERATE ({low}-{moderate} Gwei)"
    if gwei < high:
        return f"HIGH ({moderate}-{high} Gwei)"
    return f"VERY HIGH (> {high} Gwei)"


async def get_gas_price(config: AlchemyConfig, args: Dict[str, Any]) -> str:
    """Report the current gas price and what common transactions would cost."""
    network = args.get("network") or "ETH_MAINNET"
    try:
        result = await rpc_call(config, network, "eth_gasPrice", [])
    except ProviderError as e:
        raise e.with_prefix("Alchemy gas price fetch failed")
    if not result:
        return f"No gas price data found for {network}."

    chain = get_network(network)
    price_wei = hex_to_int(result)
    price_gwei = price_wei / 10**GWEI_DECIMALS

    text = f"Current Gas Price on {network}:\n\n"
    text += f"• Gas Price: {price_gwei:.2f} Gwei\n"
    text += f"• Gas Price (Wei): {price_wei}\n"
    text += "\nExample Transaction Costs:\n"
    for label, gas in EXAMPLE_GAS_COSTS:
        text += f"• {label}: {format_units(price_wei * gas)} {chain.symbol}\n"

    text += "\nGas Price Context:\n"
    level = gas_level(network, price_gwei)
    if level:
        text += f"• Current gas price is {level}\n"
    if chain.eip1559:
        text += "• This network uses EIP-1559 for gas pricing\n"
        text += "• The gas price returned represents a legacy compatible fee (base fee + priority fee)\n"
        text += "• For optimal transactions, consider using maxFeePerGas and maxPriorityFeePerGas\n"
    return text + "\n" + _queried_at()


def format_transaction(
    tx_hash: str, network: str, tx: RpcTransaction, receipt: Optional[RpcReceipt]
) -> str:
    chain = get_network(network)
    gas_price = hex_to_int(tx.gasPrice or (receipt.effectiveGasPrice if receipt else None))
    gas_limit = hex_to_int(tx.gas)

    if receipt is None:
        status = "⏳ Pending"
    elif hex_to_int(receipt.status) == 1:
        status = "✅ Success"
    else:
        status = "❌ Failed"

    text = f"Transaction Details for {tx_hash} on {network}:\n\n"
    text += f"Status: {status}\n"
    text += f"Block Number: {hex_to_int(tx.blockNumber) if tx.blockNumber else 'Pending'}\n"
    text += f"From: {tx.from_}\n"
    text += f"To: {tx.to or 'Contract Creation'}\n"
    text += f"Value: {format_units(hex_to_int(tx.value))} {chain.symbol}\n"
    text += f"Gas Price: {format_units(gas_price, GWEI_DECIMALS)} Gwei\n"
    text += f"Gas Limit: {gas_limit}\n"
    if receipt is not None:
        gas_used = hex_to_int(receipt.gasUsed)
        percent = round(gas_used * 100 / gas_limit) if gas_limit else 0
        text += f"Gas Used: {gas_used} ({percent}%)\n"
        text += f"Transaction Fee: {format_units(gas_used * gas_price)} {chain.symbol}\n"
    text += f"Nonce: {hex_to_int(tx.nonce)}\n\n"

    logs = receipt.logs if receipt is not None else []
    if logs:
        text += f"Event Logs: {len(logs)} log entries\n"
        shown = logs[:MAX_LOGS_SHOWN]
        text += f"Sample of {len(shown)} logs:\n"
        for index, log in enumerate(shown, start=1):
            text += f"- Log #{index}: From contract {log.address}\n"
            if log.topics:
                text += f"  Topic 0: {log.topics[0]}\n"
        if len(logs) > len(shown):
            text += f"... and {len(logs) - len(shown)} more logs.\n"
    else:
        text += "Event Logs: None\n"

    if chain.explorer:
        text += f"\nView on Explorer: {chain.explorer}{tx_hash}\n"
    return text


async def get_transaction(config: AlchemyConfig, args: Dict[str, Any]) -> str:
    """Describe a transaction and its receipt."""
    network = args.get("network") or "ETH_MAINNET"
    tx_hash = args.get("txHash")
    try:
        tx_data = await rpc_call(config, network, "eth_getTransactionByHash", [tx_hash])
        if not tx_data:
            return f"No transaction found with hash {tx_hash} on {network}."
        receipt_data = await rpc_call(config, network, "eth_getTransactionReceipt", [tx_hash])
        tx = parse_record(RpcTransaction, tx_data, provider=PROVIDER, operation="eth_getTransactionByHash")
        receipt = (
            parse_record(RpcReceipt, receipt_data, provider=PROVIDER, operation="eth_getTransactionReceipt")
            if receipt_data
            else None
        )
    except ProviderError as e:
        raise e.with_prefix("Alchemy transaction fetch failed")
    return format_transaction(tx_hash, network, tx, receipt)


async def get_chain_id(config: AlchemyConfig, args: Dict[str, Any]) -> str:
    """Report the chain ID and check it against the expected value."""
    network = args.get("network") or "ETH_MAINNET"
    try:
        result = await rpc_call(config, network, "eth_chainId", [])
    except ProviderError as e:
        raise e.with_prefix("Alchemy chain ID fetch failed")
    chain_id = hex_to_int(result)
    expected = get_network(network).chain_id

    text = f"Chain ID for {network}:\n\n"
    text += f"Chain ID (decimal): {chain_id}\n"
    text += f"Chain ID (hex): {result}\n\n"
    if chain_id == expected:
        text += f"✅ Verified: Chain ID matches the expected value for {network}\n"
    else:
        text += f"⚠️ Warning: Chain ID {chain_id} does not match the expected value {expected} for {network}\n"
    return text + "\n" + _queried_at()


def _block_param(value: Any) -> str:
    if isinstance(value, int):
        return hex(value)
    return block_tag(str(value))


def format_block(tag: Any, network: str, block: RpcBlock) -> str:
    chain = get_network(network)
    timestamp = datetime.fromtimestamp(hex_to_int(block.timestamp), tz=timezone.utc)
    transactions = block.transactions

    text = f"Block Information for {tag} on {network}:\n\n"
    text += f"Block Number: {hex_to_int(block.number):,}\n"
    text += f"Block Hash: {block.hash}\n"
    text += f"Parent Hash: {block.parentHash}\n"
    text += f"Timestamp: {timestamp.isoformat()}\n"
    text += f"Miner: {block.miner}\n"
    if block.difficulty is not None:
        text += f"Difficulty: {hex_to_int(block.difficulty):,}\n"
    if block.totalDifficulty is not None:
        text += f"Total Difficulty: {hex_to_int(block.totalDifficulty):,}\n"
    text += f"Gas Used: {hex_to_int(block.gasUsed):,}\n"
    text += f"Gas Limit: {hex_to_int(block.gasLimit):,}\n"
    text += f"Transaction Count: {len(transactions)}\n\n"

    if not transactions:
        return text
    if isinstance(transactions[0], RpcTransaction):
        shown = transactions[:MAX_BLOCK_TRANSACTIONS_SHOWN]
        text += f"Showing {len(shown)} of {len(transactions)} transactions:\n\n"
        for index, tx in enumerate(shown, start=1):
            text += f"Transaction #{index}:\n"
            text += f"- Hash: {tx.hash}\n"
            text += f"- From: {tx.from_}\n"
            text += f"- To: {tx.to or 'Contract Creation'}\n"
            text += f"- Value: {format_units(hex_to_int(tx.value))} {chain.symbol}\n"
            text += f"- Gas Price: {format_units(hex_to_int(tx.gasPrice), GWEI_DECIMALS)} Gwei\n"
            text += f"- Gas Limit: {hex_to_int(tx.gas):,}\n\n"
        if len(transactions) > len(shown):
            text += f"... and {len(transactions) - len(shown)} more transactions.\n"
    else:
        shown = transactions[:MAX_BLOCK_HASHES_SHOWN]
        text += f"Transaction Hashes (first {len(shown)}):\n"
        for index, tx_hash in enumerate(shown, start=1):
            text += f"{index}. {tx_hash}\n"
        if len(transactions) > len(shown):
            text += f"... and {len(transactions) - len(shown)} more transaction hashes.\n"
    return text


async def get_block(config: AlchemyConfig, args: Dict[str, Any]) -> str:
    """Describe a block, optionally with its transactions."""
    network = args.get("network") or "ETH_MAINNET"
    tag = args.get("blockNumberOrTag")
    if tag is None:
        tag = "latest"
    include_transactions = bool(args.get("includeTransactions", False))
    try:
        result = await rpc_call(
            config, network, "eth_getBlockByNumber", [_block_param(tag), include_transactions]
        )
        if not result:
            return f"No block found for {tag} on {network}."
        block = parse_record(RpcBlock, result, provider=PROVIDER, operation="eth_getBlockByNumber")
    except ProviderError as e:
        raise e.with_prefix("Alchemy block info fetch failed")
    return format_block(tag, network, block)


async def get_accounts(config: AlchemyConfig, args: Dict[str, Any]) -> str:
    """List the accounts managed by the node."""
    network = args.get("network") or "ETH_MAINNET"
    try:
        accounts = await rpc_call(config, network, "eth_accounts", [])
    except ProviderError as e:
        raise e.with_prefix("Alchemy accounts fetch failed")

    text = f"Accounts on {network}:\n\n"
    if not accounts:
        text += "No accounts found. Alchemy nodes typically don't manage private keys, so this is expected.\n"
        text += "This method would return addresses if used with a provider that manages accounts (like MetaMask).\n"
    else:
        text += f"Found {len(accounts)} accounts:\n\n"
        for index, account in enumerate(accounts, start=1):
            text += f"{index}. {account}\n"
    return text + "\n" + _queried_at()


def format_fee_history(network: str, history: FeeHistory, percentiles: List[float]) -> str:
    has_rewards = bool(history.reward)
    oldest = hex_to_int(history.oldestBlock)

    text = f"Fee History on {network}:\n\n"
    text += f"Oldest Block: {oldest:,}\n"
    if has_rewards and percentiles:
        text += f"Percentiles Requested: {', '.join(f'{p:g}' for p in percentiles)}%\n"
    text += f"Block Count: {len(history.baseFeePerGas)}\n\n"

    header = "Block | Base Fee (Gwei) | Gas Used Ratio"
    separator = "------|----------------|---------------"
    if has_rewards:
        header += " | Reward Percentiles (Gwei)"
        separator += "|------------------------"
    text += header + "\n" + separator + "\n"

    # baseFeePerGas carries one extra entry for the block after the range
    for index, ratio in enumerate(history.gasUsedRatio):
        fees = history.baseFeePerGas
        base_fee = hex_to_int(fees[index]) / 10**GWEI_DECIMALS if index < len(fees) else 0.0
        row = f"{oldest + index:,} | {base_fee:.4f} | {ratio:.2f}"
        if has_rewards and index < len(history.reward):
            rewards = ", ".join(f"{hex_to_int(r) / 10**GWEI_DECIMALS:.4f}" for r in history.reward[index])
            row += f" | {rewards}"
        text += row + "\n"

    text += "\nNotes:\n"
    text += "- Gas Used Ratio is the fraction of the block's gas limit that was used.\n"
    if has_rewards:
        text += "- Reward values represent priority fees paid at each percentile.\n"
    text += "- Base Fee is the minimum required fee for inclusion in a block.\n"
    return text + "\n" + _queried_at()


async def get_fee_history(config: AlchemyConfig, args: Dict[str, Any]) -> str:
    """Summarize base fees and priority fee percentiles over recent blocks."""
    network = args.get("network") or "ETH_MAINNET"
    block_count = args.get("blockCount") or 10
    newest = block_tag(str(args.get("newestBlock") or "latest"))
    percentiles = args.get("rewardPercentiles") or []
    try:
        result = await rpc_call(config, network, "eth_feeHistory", [hex(block_count), newest, percentiles])
        if not result:
            return f"No fee history data found for {network}."
        history = parse_record(FeeHistory, result, provider=PROVIDER, operation="eth_feeHistory")
    except ProviderError as e:
        raise e.with_prefix("Alchemy fee history fetch failed")
    return format_fee_history(network, history, percentiles)


def _wei_quantity(value: str) -> str:
    """Hex quantities pass through; decimal strings are converted to hex."""
    if value.startswith("0x"):
        return value
    if value.isdigit():
        return hex(int(value))
    raise ValidationError.for_field(
        "transaction.value",
        f"Invalid value format: {value}. Use hex format with 0x prefix or a valid decimal string.",
        action_name="estimate_gas",
        component=PROVIDER,
        error_type="value_error",
    )


async def estimate_gas(config: AlchemyConfig, args: Dict[str, Any]) -> str:
    """Estimate the gas a transaction would consume and what it would cost."""
    network = args.get("network") or "ETH_MAINNET"
    transaction = {key: value for key, value in (args.get("transaction") or {}).items() if value is not None}
    if transaction.get("value"):
        transaction["value"] = _wei_quantity(str(transaction["value"]))
    tag = block_tag(str(args.get("blockTag") or "latest"))
    try:
        estimate = await rpc_call(config, network, "eth_estimateGas", [transaction, tag])
        gas_price = hex_to_int(await rpc_call(config, network, "eth_gasPrice", []))
    except ProviderError as e:
        raise e.with_prefix("Gas estimation failed")

    symbol = get_network(network).symbol
    gas = hex_to_int(estimate)

    text = f"Gas Estimation on {network}:\n\n"
    text += "Transaction Details:\n"
    text += f"- From: {transaction.get('from') or 'Not specified (uses zero address)'}\n"
    text += f"- To: {transaction.get('to')}\n"
    value = hex_to_int(transaction.get("value"))
    if value:
        text += f"- Value: {format_units(value)} {symbol} ({value} Wei)\n"
    else:
        text += "- Value: 0\n"
    data = transaction.get("data")
    if data and data != "0x":
        text += f"- Data: {data if len(data) <= 50 else data[:47] + '...'}\n"
        if len(data) >= 10:
            text += f"  Function Signature: {data[:10]}\n"
    else:
        text += "- Data: None (simple transfer)\n"

    text += "\nGas Estimation:\n"
    text += f"- Estimated Gas: {gas:,} units\n"
    text += f"- Current Gas Price: {gas_price / 10**GWEI_DECIMALS:.2f} Gwei\n"
    text += f"- Estimated Cost: {format_units(gas * gas_price)} {symbol}\n"
    text += "\nRecommendations:\n"
    text += f"- Set gas limit to at least: {-(-gas * 11 // 10):,} units (10% buffer)\n"
    text += (
        "\nNote: If the transaction would fail, the estimate may be inaccurate "
        "or the request would have thrown an error.\n"
    )
    return text + "\n" + _queried_at()


def format_logs(network: str, log_filter: Dict[str, Any], logs: List[RpcLog], max_results: int) -> str:
    text = f"Blockchain Logs on {network}:\n\nFilter:\n"
    address = log_filter.get("address")
    if address:
        text += f"- Contract: {', '.join(address) if isinstance(address, list) else address}\n"
    if log_filter.get("topics"):
        text += f"- Topics: {json.dumps(log_filter['topics'])}\n"
    for key, label in (("blockHash", "Block Hash"), ("fromBlock", "From Block"), ("toBlock", "To Block")):
        if log_filter.get(key):
            text += f"- {label}: {log_filter[key]}\n"
    text += "\n"

    if not logs:
        return text + "No logs found matching the filter criteria.\n"

    shown = logs[:max_results]
    text += f"Found {len(logs)} logs (showing {len(shown)}):\n\n"
    for index, log in enumerate(shown, start=1):
        text += f"Log #{index}:\n"
        text += f"- Address: {log.address}\n"
        text += f"- Block Number: {hex_to_int(log.blockNumber)}\n"
        text += f"- Transaction Hash: {log.transactionHash}\n"
        text += f"- Transaction Index: {hex_to_int(log.transactionIndex)}\n"
        text += f"- Log Index: {hex_to_int(log.logIndex)}\n"
        if log.topics:
            text += "- Topics:\n"
            for topic_index, topic in enumerate(log.topics):
                text += f"  {topic_index}: {topic}\n"
        if log.data and log.data != "0x":
            text += f"- Data: {log.data}\n"
        text += "\n"
    if len(logs) > len(shown):
        text += (
            f"Note: {len(logs) - len(shown)} additional logs were found but not displayed. "
            "Refine your filter or increase maxResults to see more.\n"
        )
    return text


async def get_logs(config: AlchemyConfig, args: Dict[str, Any]) -> str:
    """List event logs matching a filter."""
    network = args.get("network") or "ETH_MAINNET"
    max_results = args.get("maxResults") or 10
    log_filter = {key: value for key, value in (args.get("filter") or {}).items() if value is not None}
    try:
        result = await rpc_call(config, network, "eth_getLogs", [log_filter])
        logs = parse_records(RpcLog, result, provider=PROVIDER, operation="eth_getLogs")
    except ProviderError as e:
        raise e.with_prefix("Alchemy logs fetch failed")
    return format_logs(network, log_filter, logs, max_results)


def get_alchemy_actions(config: Optional[AlchemyConfig] = None) -> List[Action]:
    """Build the Alchemy action set."""
    resolve = AlchemyConfig.resolver(config)
    return [
        Action("get_block_number", BLOCK_NUMBER_PROMPT, NetworkParams, bind_config(get_block_number, resolve)),
        Action("get_eth_balance", ETH_BALANCE_PROMPT, EthBalanceParams, bind_config(get_eth_balance, resolve)),
        Action("get_gas_price", GAS_PRICE_PROMPT, NetworkParams, bind_config(get_gas_price, resolve)),
        Action("get_transaction", TRANSACTION_INFO_PROMPT, TransactionParams, bind_config(get_transaction, resolve)),
        Action("get_chain_id", CHAIN_ID_PROMPT, NetworkParams, bind_config(get_chain_id, resolve)),
        Action("get_block", BLOCK_INFO_PROMPT, BlockParams, bind_config(get_block, resolve)),
        Action("get_accounts", ACCOUNTS_PROMPT, NetworkParams, bind_config(get_accounts, resolve)),
        Action("get_fee_history", FEE_HISTORY_PROMPT, FeeHistoryParams, bind_config(get_fee_history, resolve)),
        Action("estimate_gas", ESTIMATE_GAS_PROMPT, EstimateGasParams, bind_config(estimate_gas, resolve)),
        Action("get_logs", LOGS_PROMPT, GetLogsParams, bind_config(get_logs, resolve)),
    ]
