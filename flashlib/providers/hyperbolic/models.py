"""Input schemas and marketplace records for Hyperbolic actions."""

from typing import List, Optional

from pydantic import Field

from flashlib.core.models import ActionParameters, ProviderRecord


class NoParams(ActionParameters):
    pass


class RentComputeParams(ActionParameters):
    cluster_name: str = Field(..., description="The cluster name to rent from")
    node_id: str = Field(..., description="The node ID to rent, also known as node name")
    gpu_count: int = Field(..., ge=1, description="Number of GPUs to rent")


class TerminateComputeParams(ActionParameters):
    instance_id: str = Field(..., min_length=1, description="The ID of the instance to terminate")


class LinkWalletAddressParams(ActionParameters):
    wallet_address: str = Field(..., min_length=1, description="The wallet address to link to your Hyperbolic account")


class Gpu(ProviderRecord):
    model: str = "Unknown"
    ram: Optional[float] = None
    compute_power: Optional[float] = None
    clock_speed: Optional[float] = None

    @property
    def short_model(self) -> str:
        return self.model.replace("NVIDIA-", "")


class Capacity(ProviderRecord):
    capacity: Optional[float] = None


class Cpu(ProviderRecord):
    virtual_cores: Optional[int] = None


class Hardware(ProviderRecord):
    gpus: List[Gpu] = Field(default_factory=list)
    storage: List[Capacity] = Field(default_factory=list)
    ram: List[Capacity] = Field(default_factory=list)
    cpus: List[Cpu] = Field(default_factory=list)

    @property
    def gpu(self) -> Gpu:
        return self.gpus[0] if self.gpus else Gpu()


class Amount(ProviderRecord):
    amount: Optional[float] = None
    currency: Optional[str] = None


class Pricing(ProviderRecord):
    price: Amount = Field(default_factory=Amount)


class Location(ProviderRecord):
    region: Optional[str] = None


class MarketplaceNode(ProviderRecord):
    id: Optional[str] = None
    status: Optional[str] = None
    cluster_name: Optional[str] = None
    gpus_total: int = 0
    gpus_reserved: int = 0
    hardware: Hardware = Field(default_factory=Hardware)
    pricing: Pricing = Field(default_factory=Pricing)
    location: Location = Field(default_factory=Location)


class RentedInstance(ProviderRecord):
    id: Optional[str] = None
    status: Optional[str] = None
    start_time: Optional[str] = None
    ssh_command: Optional[str] = None
    hardware: Hardware = Field(default_factory=Hardware)
    pricing: Pricing = Field(default_factory=Pricing)


class SpendEntry(ProviderRecord):
    instance_name: str = "unknown"
    instance_id: Optional[str] = None
    started_at: str
    terminated_at: str
    price: Amount = Field(default_factory=Amount)
    gpu_count: int = 0
    hardware: Hardware = Field(default_factory=Hardware)


class Purchase(ProviderRecord):
    amount: float
    timestamp: str
