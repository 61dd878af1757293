"""Input schemas, network table and RPC records for Alchemy actions."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from pydantic import Field, field_validator

from flashlib.core.models import ActionParameters, ProviderRecord

DEFAULT_NETWORK = "ETH_MAINNET"
NETWORK_DESCRIPTION = "The network to query (e.g., 'ETH_MAINNET', 'MATIC_MAINNET')"


@dataclass(frozen=True)
class Network:
    """An Alchemy-supported chain."""

    slug: str
    symbol: str
    chain_id: int
    explorer: Optional[str] = None
    eip1559: bool = False


NETWORKS: Dict[str, Network] = {
    "ETH_MAINNET": Network("eth-mainnet", "ETH", 1, "https://etherscan.io/tx/", True),
    "ETH_GOERLI": Network("eth-goerli", "ETH", 5, eip1559=True),
    "ETH_SEPOLIA": Network("eth-sepolia", "ETH", 11155111, eip1559=True),
    "MATIC_MAINNET": Network("polygon-mainnet", "MATIC", 137, "https://polygonscan.com/tx/"),
    "MATIC_MUMBAI": Network("polygon-mumbai", "MATIC", 80001),
    "ASTAR_MAINNET": Network("astar-mainnet", "ASTR", 592),
    "OPT_MAINNET": Network("opt-mainnet", "ETH", 10, "https://optimistic.etherscan.io/tx/", True),
    "OPT_GOERLI": Network("opt-goerli", "ETH", 420),
    "ARB_MAINNET": Network("arb-mainnet", "ETH", 42161, "https://arbiscan.io/tx/", True),
    "ARB_GOERLI": Network("arb-goerli", "ETH", 421613),
    "BASE_MAINNET": Network("base-mainnet", "ETH", 8453, "https://basescan.org/tx/", True),
    "BASE_GOERLI": Network("base-goerli", "ETH", 84531),
}


def get_network(name: Optional[str]) -> Network:
    """Look up a network by name, falling back to Ethereum mainnet."""
    return NETWORKS.get(name or DEFAULT_NETWORK, NETWORKS[DEFAULT_NETWORK])


class NetworkParams(ActionParameters):
    network: str = Field(default=DEFAULT_NETWORK, description=NETWORK_DESCRIPTION)


class EthBalanceParams(ActionParameters):
    address: str = Field(..., min_length=1, description="The wallet address to fetch the native balance for")
    blockTag: str = Field(
        default="latest",
        description="Block number or tag to fetch balance at (e.g., 'latest', 'pending', or a block number)",
    )
    network: str = Field(default=DEFAULT_NETWORK, description=NETWORK_DESCRIPTION)


class TransactionParams(ActionParameters):
    txHash: str = Field(..., pattern=r"^0x[0-9a-fA-F]+$", description="The transaction hash to fetch details for")
    network: str = Field(default=DEFAULT_NETWORK, description=NETWORK_DESCRIPTION)


class BlockParams(ActionParameters):
    blockNumberOrTag: Union[int, str] = Field(
        default="latest",
        description="Block number or tag ('latest', 'earliest', 'pending', 'safe', 'finalized')",
    )
    includeTransactions: bool = Field(
        default=False, description="Whether to include full transaction objects or only their hashes"
    )
    network: str = Field(default=DEFAULT_NETWORK, description=NETWORK_DESCRIPTION)


class LogFilter(ActionParameters):
    address: Optional[Union[str, List[str]]] = Field(
        default=None, description="Contract address or list of addresses to filter logs from"
    )
    topics: Optional[List[Optional[Union[str, List[str]]]]] = Field(
        default=None, description="Array of topics to filter by; null entries match anything"
    )
    fromBlock: Optional[str] = Field(default=None, description="Block number (hex) or tag to start from")
    toBlock: Optional[str] = Field(default=None, description="Block number (hex) or tag to end at")
    blockHash: Optional[str] = Field(
        default=None, description="Restrict to a single block; cannot be combined with fromBlock/toBlock"
    )


class GetLogsParams(ActionParameters):
    filter: LogFilter = Field(..., description="Filter options for the logs query")
    network: str = Field(default=DEFAULT_NETWORK, description=NETWORK_DESCRIPTION)
    maxResults: int = Field(default=10, ge=1, le=100, description="Maximum number of logs to display")


class FeeHistoryParams(ActionParameters):
    blockCount: int = Field(default=10, ge=1, le=1024, description="Number of blocks in the requested range")
    newestBlock: str = Field(default="latest", description="Highest block of the range (hex number or tag)")
    rewardPercentiles: Optional[List[float]] = Field(
        default=None, description="Priority fee percentiles to sample from each block (0-100)"
    )
    network: str = Field(default=DEFAULT_NETWORK, description=NETWORK_DESCRIPTION)

    @field_validator("rewardPercentiles")
    @classmethod
    def _percentiles_in_range(cls, value: Optional[List[float]]) -> Optional[List[float]]:
        if value and any(p < 0 or p > 100 for p in value):
            raise ValueError("reward percentiles must be between 0 and 100")
        return value


class EstimateGasTransaction(ActionParameters):
    from_: Optional[str] = Field(default=None, alias="from", description="Sender address")
    to: str = Field(..., min_length=1, description="Recipient or contract address")
    value: Optional[str] = Field(default=None, description="Value in Wei, as hex (0x...) or a decimal string")
    data: Optional[str] = Field(default=None, description="Call data for contract interactions")
    gas: Optional[str] = Field(default=None, description="Gas limit (hex)")
    gasPrice: Optional[str] = Field(default=None, description="Gas price (hex)")
    maxFeePerGas: Optional[str] = Field(default=None, description="EIP-1559 max fee per gas (hex)")
    maxPriorityFeePerGas: Optional[str] = Field(default=None, description="EIP-1559 priority fee (hex)")


class EstimateGasParams(ActionParameters):
    transaction: EstimateGasTransaction = Field(..., description="The transaction to estimate gas for")
    blockTag: str = Field(default="latest", description="Block to estimate against (default: 'latest')")
    network: str = Field(default=DEFAULT_NETWORK, description=NETWORK_DESCRIPTION)


class RpcLog(ProviderRecord):
    address: Optional[str] = None
    topics: List[str] = Field(default_factory=list)
    data: Optional[str] = None
    blockNumber: Optional[str] = None
    transactionHash: Optional[str] = None
    transactionIndex: Optional[str] = None
    logIndex: Optional[str] = None


class RpcTransaction(ProviderRecord):
    hash: Optional[str] = None
    blockNumber: Optional[str] = None
    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    value: str = "0x0"
    gas: str = "0x0"
    gasPrice: Optional[str] = None
    nonce: str = "0x0"


class RpcReceipt(ProviderRecord):
    status: Optional[str] = None
    gasUsed: str = "0x0"
    effectiveGasPrice: Optional[str] = None
    logs: List[RpcLog] = Field(default_factory=list)


class RpcBlock(ProviderRecord):
    number: Optional[str] = None
    hash: Optional[str] = None
    parentHash: Optional[str] = None
    timestamp: str = "0x0"
    miner: Optional[str] = None
    difficulty: Optional[str] = None
    totalDifficulty: Optional[str] = None
    gasUsed: str = "0x0"
    gasLimit: str = "0x0"
    # Hashes, or full transaction objects when requested
    transactions: List[Union[str, RpcTransaction]] = Field(default_factory=list)


class FeeHistory(ProviderRecord):
    oldestBlock: str = "0x0"
    baseFeePerGas: List[str] = Field(default_factory=list)
    gasUsedRatio: List[float] = Field(default_factory=list)
    reward: Optional[List[List[str]]] = None
