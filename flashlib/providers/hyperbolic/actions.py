"""Hyperbolic GPU marketplace actions."""

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from flashlib.actions.base import Action, bind_config
from flashlib.core.errors import ProviderError, ValidationError
from flashlib.providers.core.http import parse_records, provider_error, request_json

from .config import HyperbolicConfig
from .models import (
    LinkWalletAddressParams,
    MarketplaceNode,
    NoParams,
    Purchase,
    RentComputeParams,
    RentedInstance,
    SpendEntry,
    TerminateComputeParams,
)
from .prompts import (
    GET_AVAILABLE_GPUS_PROMPT,
    GET_CURRENT_BALANCE_PROMPT,
    GET_GPU_STATUS_PROMPT,
    GET_SPEND_HISTORY_PROMPT,
    LINK_WALLET_ADDRESS_PROMPT,
    RENT_COMPUTE_PROMPT,
    TERMINATE_COMPUTE_PROMPT,
)

logger = logging.getLogger(__name__)

PROVIDER = "hyperbolic"


def _gb(megabytes: Optional[float]) -> Optional[int]:
    return round(megabytes / 1024) if megabytes else None


def _with_unit(value: Any, unit: str) -> str:
    return "Unknown" if value is None else f"{value}{unit}"


def _parse_time(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _items(data: Any, key: str) -> Any:
    return data.get(key) if isinstance(data, dict) else data


@dataclass
class GpuOffer:
    """GPUs of one model at one price in one cluster."""

    model: str
    memory_gb: Optional[int]
    price: float
    available: int
    total: int
    location: Optional[str]
    node_id: Optional[str]
    cluster_name: Optional[str]
    compute_power: float
    clock_speed: float
    storage_gb: Optional[int]
    ram_gb: Optional[int]
    cpu_cores: int
    status: Optional[str]


def group_gpu_offers(nodes: List[MarketplaceNode]) -> List[GpuOffer]:
    """Group ready nodes by model, hourly price and cluster, most expensive first."""
    offers: Dict[str, GpuOffer] = {}
    for node in nodes:
        if node.status != "node_ready":
            continue
        gpu = node.hardware.gpu
        price = (node.pricing.price.amount or 0) / 100
        available = node.gpus_total - node.gpus_reserved
        key = f"{gpu.short_model}-{price}-{node.cluster_name}"
        if key in offers:
            offers[key].available += available
            offers[key].total += node.gpus_total
            continue
        offers[key] = GpuOffer(
            model=gpu.short_model,
            memory_gb=_gb(gpu.ram),
            price=price,
            available=available,
            total=node.gpus_total,
            location=node.location.region,
            node_id=node.id,
            cluster_name=node.cluster_name,
            compute_power=gpu.compute_power or 0,
            clock_speed=gpu.clock_speed or 0,
            storage_gb=_gb(node.hardware.storage[0].capacity) if node.hardware.storage else 0,
            ram_gb=_gb(node.hardware.ram[0].capacity) if node.hardware.ram else 0,
            cpu_cores=(node.hardware.cpus[0].virtual_cores or 0) if node.hardware.cpus else 0,
            status=node.status,
        )
    return sorted(offers.values(), key=lambda offer: (-offer.price, -offer.available))


def format_gpu_offer(offer: GpuOffer) -> str:
    monthly = round(offer.price * 24 * 30)
    return (
        f"{offer.model} ({offer.memory_gb}GB):\n"
        f"- Price: ${offer.price:.2f}/hour (${monthly}/month)\n"
        f"- Available: {offer.available}/{offer.total} units\n"
        f"- Location: {offer.location}\n"
        f"- Node ID: {offer.node_id}\n"
        f"- Cluster: {offer.cluster_name}\n"
        f"- Hardware Specs:\n"
        f"  • CPU: {offer.cpu_cores} virtual cores\n"
        f"  • RAM: {offer.ram_gb or 0}GB\n"
        f"  • Storage: {offer.storage_gb or 0}GB\n"
        f"  • GPU Clock: {offer.clock_speed}MHz\n"
        f"  • Compute Power: {offer.compute_power} TFLOPS\n"
        f"- Status: {offer.status}"
    )


async def get_available_gpus(config: HyperbolicConfig, args: Dict[str, Any]) -> str:
    """List GPU machines that can be rented now."""
    try:
        data = await request_json(
            "POST",
            f"{config.base_url}/marketplace",
            provider=PROVIDER,
            operation="get_available_gpus",
            headers=config.headers(),
            json={"filters": {}},
        )
    except ProviderError as e:
        raise e.with_prefix("Failed to fetch GPU data")

    nodes = parse_records(
        MarketplaceNode, _items(data, "instances"), provider=PROVIDER, operation="get_available_gpus"
    )
    offers = group_gpu_offers(nodes)
    if not offers:
        return "No available GPUs found."
    return "\n\n".join(format_gpu_offer(offer) for offer in offers)


async def get_current_balance(config: HyperbolicConfig, args: Dict[str, Any]) -> str:
    """Report the credit balance and purchase history."""
    headers = config.headers()
    try:
        balance = await request_json(
            "GET", f"{config.base_url}/billing/get_current_balance",
            provider=PROVIDER, operation="get_current_balance", headers=headers,
        )
        history = await request_json(
            "GET", f"{config.base_url}/billing/purchase_history",
            provider=PROVIDER, operation="get_purchase_history", headers=headers,
        )
    except ProviderError as e:
        raise e.with_prefix("Failed to fetch balance data")

    try:
        credits = float(balance["credits"])
    except (KeyError, TypeError, ValueError) as e:
        raise provider_error(
            f"Invalid response format: {e}", PROVIDER, "get_current_balance", cause=e
        ) from e
    purchases = parse_records(
        Purchase, _items(history, "purchase_history"), provider=PROVIDER, operation="get_purchase_history"
    )

    lines = [f"Your current Hyperbolic platform balance is ${credits / 100:.2f}."]
    if purchases:
        lines.append("\nPurchase History:")
        for purchase in purchases:
            when = _parse_time(purchase.timestamp)
            lines.append(f"- ${purchase.amount / 100:.2f} on {when:%B} {when.day}, {when.year}")
    else:
        lines.append("\nNo previous purchases found.")
    return "\n".join(lines)


def format_rented_instance(instance: RentedInstance) -> str:
    gpu = instance.hardware.gpu
    hardware = instance.hardware
    status = instance.status or "Unknown"
    status_info = f"Status: {status}"
    if status.lower() != "ready":
        status_info += " (Instance not ready for use)"
    memory = _gb(gpu.ram)
    amount = instance.pricing.price.amount
    price = f"${amount / 100:.2f}" if amount else "Unknown"
    ssh = f"- SSH Access: {instance.ssh_command}" if instance.ssh_command else "- SSH Access: Not available"
    return (
        f"Instance ID: {instance.id or 'Unknown'}\n"
        f"- {status_info}\n"
        f"- GPU: {gpu.short_model}{f' ({memory}GB)' if memory else ''}\n"
        f"- Price: {price}/hour\n"
        f"{ssh}\n"
        f"- Hardware Specs:\n"
        f"  • CPU: {_with_unit(hardware.cpus[0].virtual_cores if hardware.cpus else None, ' virtual cores')}\n"
        f"  • RAM: {_with_unit(_gb(hardware.ram[0].capacity) if hardware.ram else None, 'GB')}\n"
        f"  • Storage: {_with_unit(_gb(hardware.storage[0].capacity) if hardware.storage else None, 'GB')}\n"
        f"  • GPU Clock: {_with_unit(gpu.clock_speed, 'MHz')}\n"
        f"  • Compute Power: {_with_unit(gpu.compute_power, ' TFLOPS')}\n"
        f"- Start Time: {instance.start_time or 'Not started'}"
    )


async def get_gpu_status(config: HyperbolicConfig, args: Dict[str, Any]) -> str:
    """Describe every GPU instance the account currently rents."""
    try:
        data = await request_json(
            "GET",
            f"{config.base_url}/marketplace/instances",
            provider=PROVIDER,
            operation="get_gpu_status",
            headers=config.headers(),
        )
    except ProviderError as e:
        raise e.with_prefix("Failed to fetch GPU status")

    items = data.get("instances") if isinstance(data, dict) else None
    if not isinstance(items, list) or not items:
        return "No active GPU instances found."
    instances = parse_records(RentedInstance, items, provider=PROVIDER, operation="get_gpu_status")
    return "\n\n".join(format_rented_instance(instance) for instance in instances)


async def get_spend_history(config: HyperbolicConfig, args: Dict[str, Any]) -> str:
    """Summarize past rentals by instance and by GPU model."""
    try:
        data = await request_json(
            "GET",
            f"{config.base_url}/marketplace/instances/history",
            provider=PROVIDER,
            operation="get_spend_history",
            headers=config.headers(),
        )
    except ProviderError as e:
        raise e.with_prefix("Failed to fetch spend history")

    entries = parse_records(
        SpendEntry, _items(data, "instance_history"), provider=PROVIDER, operation="get_spend_history"
    )
    if not entries:
        return "No rental history found."

    total_cost = 0.0
    per_model: Dict[str, Dict[str, float]] = {}
    lines = ["=== GPU Rental Spending Analysis ===\n", "Instance Rentals:"]
    for entry in entries:
        seconds = round((_parse_time(entry.terminated_at) - _parse_time(entry.started_at)).total_seconds())
        cost = (seconds / 3600) * (entry.price.amount or 0) / 100
        total_cost += cost
        model = entry.hardware.gpu.short_model if entry.hardware.gpus else "Unknown GPU"
        stats = per_model.setdefault(model, {"count": 0, "cost": 0.0, "seconds": 0})
        stats["count"] += entry.gpu_count
        stats["cost"] += cost
        stats["seconds"] += seconds
        lines.append(f"- {entry.instance_name}:")
        lines.append(f"  GPU: {model} (Count: {entry.gpu_count})")
        lines.append(f"  Duration: {seconds} seconds")
        lines.append(f"  Cost: ${cost:.2f}")

    lines.append("\nGPU Type Statistics:")
    for model, stats in per_model.items():
        lines.append(f"\n{model}:")
        lines.append(f"  Total Rentals: {int(stats['count'])}")
        lines.append(f"  Total Time: {round(stats['seconds'])} seconds")
        lines.append(f"  Total Cost: ${stats['cost']:.2f}")
    lines.append(f"\nTotal Spending: ${total_cost:.2f}")
    return "\n".join(lines)


async def rent_compute(config: HyperbolicConfig, args: Dict[str, Any]) -> str:
    """Request a GPU instance on a marketplace node."""
    try:
        data = await request_json(
            "POST",
            f"{config.base_url}/marketplace/instances/create",
            provider=PROVIDER,
            operation="rent_compute",
            headers=config.headers(),
            json={
                "cluster_name": args.get("cluster_name"),
                "node_name": args.get("node_id"),
                "gpu_count": args.get("gpu_count"),
            },
        )
    except ProviderError as e:
        raise e.with_prefix("Failed to rent compute")

    instance = data.get("instance") or {}
    return (
        "Successfully requested GPU instance:\n"
        f"- Instance ID: {instance.get('id')}\n"
        f"- Node: {args.get('node_id')}\n"
        f"- Cluster: {args.get('cluster_name')}\n"
        f"- GPU Count: {args.get('gpu_count')}\n"
        f"- Status: {instance.get('status')}\n\n"
        "Your instance is being provisioned. You can check its status with get_gpu_status."
    )


async def terminate_compute(config: HyperbolicConfig, args: Dict[str, Any]) -> str:
    """Terminate a rented instance and return the raw API response."""
    instance_id = args.get("instance_id")
    if not instance_id:
        raise ValidationError.for_field(
            "instance_id", "instance_id is required", action_name="terminate_compute", component=PROVIDER
        )
    try:
        data = await request_json(
            "POST",
            f"{config.base_url}/marketplace/instances/terminate",
            provider=PROVIDER,
            operation="terminate_compute",
            headers=config.headers(),
            json={"id": instance_id},
        )
    except ProviderError as e:
        raise e.with_prefix("Error terminating compute instance")
    return json.dumps(data, indent=2)


async def link_wallet_address(config: HyperbolicConfig, args: Dict[str, Any]) -> str:
    """Link a crypto wallet to the account and return the raw API response."""
    wallet_address = args.get("wallet_address")
    if not wallet_address:
        raise ValidationError.for_field(
            "wallet_address", "wallet_address is required", action_name="link_wallet_address", component=PROVIDER
        )
    try:
        data = await request_json(
            "POST",
            f"{config.account_url}/settings/crypto-address",
            provider=PROVIDER,
            operation="link_wallet_address",
            headers=config.headers(),
            json={"address": wallet_address},
        )
    except ProviderError as e:
        raise e.with_prefix("Failed to link wallet address")
    return json.dumps(data, indent=2)


def get_hyperbolic_actions(config: Optional[HyperbolicConfig] = None) -> List[Action]:
    """Build the Hyperbolic action set.

    Without an explicit configuration nothing is resolved here, so a missing
    API key only fails when one of the actions runs.
    """
    resolve = HyperbolicConfig.resolver(config)
    return [
        Action("get_available_gpus", GET_AVAILABLE_GPUS_PROMPT, NoParams, bind_config(get_available_gpus, resolve)),
        Action("get_current_balance", GET_CURRENT_BALANCE_PROMPT, NoParams, bind_config(get_current_balance, resolve)),
        Action("get_gpu_status", GET_GPU_STATUS_PROMPT, NoParams, bind_config(get_gpu_status, resolve)),
        Action("get_spend_history", GET_SPEND_HISTORY_PROMPT, NoParams, bind_config(get_spend_history, resolve)),
        Action("link_wallet_address", LINK_WALLET_ADDRESS_PROMPT, LinkWalletAddressParams,
               bind_config(link_wallet_address, resolve)),
        Action("rent_compute", RENT_COMPUTE_PROMPT, RentComputeParams, bind_config(rent_compute, resolve)),
        Action("terminate_compute", TERMINATE_COMPUTE_PROMPT, TerminateComputeParams,
               bind_config(terminate_compute, resolve)),
    ]
