"""Tests for the Hyperbolic GPU marketplace actions."""

import json
from unittest.mock import AsyncMock, patch

import pytest

from flashlib.core.errors import ConfigurationError, ProviderError, ValidationError
from flashlib.providers.core.http import provider_error
from flashlib.providers.hyperbolic import HyperbolicConfig, get_hyperbolic_actions
from flashlib.providers.hyperbolic.actions import (
    get_available_gpus,
    get_current_balance,
    get_gpu_status,
    get_spend_history,
    link_wallet_address,
    rent_compute,
    terminate_compute,
)

REQUEST = "flashlib.providers.hyperbolic.actions.request_json"


def node(node_id, model="NVIDIA-H100-80GB-HBM3", price=150, total=8, reserved=2, status="node_ready", cluster="c1"):
    return {
        "id": node_id,
        "status": status,
        "cluster_name": cluster,
        "gpus_total": total,
        "gpus_reserved": reserved,
        "hardware": {
            "gpus": [{"model": model, "ram": 81920, "compute_power": 989, "clock_speed": 1980}],
            "storage": [{"capacity": 1048576}],
            "ram": [{"capacity": 2097152}],
            "cpus": [{"virtual_cores": 64}],
        },
        "pricing": {"price": {"amount": price}},
        "location": {"region": "us-east"},
    }


@pytest.fixture
def config():
    return HyperbolicConfig(api_key="hb-key")


class TestHyperbolicActionSet:
    """Test the factory and configuration."""

    def test_action_names(self):
        assert [action.name for action in get_hyperbolic_actions()] == [
            "get_available_gpus",
            "get_current_balance",
            "get_gpu_status",
            "get_spend_history",
            "link_wallet_address",
            "rent_compute",
            "terminate_compute",
        ]

    def test_construction_without_key_fails(self):
        with pytest.raises(ConfigurationError, match="Hyperbolic API key not found"):
            HyperbolicConfig()

    def test_headers(self, config):
        assert config.headers()["Authorization"] == "Bearer hb-key"


class TestMarketplace:
    """Test GPU availability."""

    @pytest.mark.asyncio
    async def test_groups_ready_nodes(self, config):
        data = {
            "instances": [
                node("n1"),
                node("n2", total=4, reserved=0),
                node("n3", model="NVIDIA-A100", price=90),
                node("n4", status="node_offline"),
            ]
        }
        with patch(REQUEST, new=AsyncMock(return_value=data)) as send:
            result = await get_available_gpus(config, {})

        offers = result.split("\n\n")
        assert len(offers) == 2
        assert offers[0].startswith("H100-80GB-HBM3 (80GB):\n- Price: $1.50/hour ($1080/month)\n- Available: 10/12 units")
        assert "- Node ID: n1" in offers[0]
        assert "  • CPU: 64 virtual cores\n  • RAM: 2048GB\n  • Storage: 1024GB" in offers[0]
        assert offers[1].startswith("A100 (80GB):\n- Price: $0.90/hour")
        assert send.await_args.kwargs["json"] == {"filters": {}}

    @pytest.mark.asyncio
    async def test_no_gpus(self, config):
        with patch(REQUEST, new=AsyncMock(return_value={"instances": [node("n1", status="busy")]})):
            assert await get_available_gpus(config, {}) == "No available GPUs found."

    @pytest.mark.asyncio
    async def test_error_prefix(self, config):
        error = provider_error("API Error (500): oops", "hyperbolic", "get_available_gpus", status=500)
        with patch(REQUEST, new=AsyncMock(side_effect=error)):
            with pytest.raises(ProviderError, match="^Failed to fetch GPU data: API Error"):
                await get_available_gpus(config, {})


class TestBilling:
    """Test balance and spend history."""

    @pytest.mark.asyncio
    async def test_balance_with_history(self, config):
        responses = [
            {"credits": "12345"},
            {"purchase_history": [{"amount": 5000, "timestamp": "2024-03-05T10:00:00Z"}]},
        ]
        with patch(REQUEST, new=AsyncMock(side_effect=responses)):
            result = await get_current_balance(config, {})
        assert result == (
            "Your current Hyperbolic platform balance is $123.45.\n"
            "\nPurchase History:\n"
            "- $50.00 on March 5, 2024"
        )

    @pytest.mark.asyncio
    async def test_balance_without_history(self, config):
        with patch(REQUEST, new=AsyncMock(side_effect=[{"credits": 0}, {}])):
            result = await get_current_balance(config, {})
        assert result.endswith("No previous purchases found.")

    @pytest.mark.asyncio
    async def test_balance_invalid_response(self, config):
        with patch(REQUEST, new=AsyncMock(side_effect=[{}, {}])):
            with pytest.raises(ProviderError, match="Invalid response format"):
                await get_current_balance(config, {})

    @pytest.mark.asyncio
    async def test_spend_history(self, config):
        history = {
            "instance_history": [
                {
                    "instance_name": "run-1",
                    "started_at": "2024-01-01T00:00:00Z",
                    "terminated_at": "2024-01-01T02:00:00Z",
                    "price": {"amount": 150},
                    "gpu_count": 2,
                    "hardware": {"gpus": [{"model": "NVIDIA-H100"}]},
                }
            ]
        }
        with patch(REQUEST, new=AsyncMock(return_value=history)):
            result = await get_spend_history(config, {})

        assert "- run-1:\n  GPU: H100 (Count: 2)\n  Duration: 7200 seconds\n  Cost: $3.00" in result
        assert "H100:\n  Total Rentals: 2\n  Total Time: 7200 seconds\n  Total Cost: $3.00" in result
        assert result.endswith("Total Spending: $3.00")

    @pytest.mark.asyncio
    async def test_spend_history_empty(self, config):
        with patch(REQUEST, new=AsyncMock(return_value={"instance_history": []})):
            assert await get_spend_history(config, {}) == "No rental history found."


class TestInstances:
    """Test renting, status and termination."""

    @pytest.mark.asyncio
    async def test_gpu_status(self, config):
        data = {
            "instances": [
                {
                    "id": "i-1",
                    "status": "starting",
                    "hardware": {"gpus": [{"model": "NVIDIA-H100", "ram": 81920}]},
                    "pricing": {"price": {"amount": 150}},
                }
            ]
        }
        with patch(REQUEST, new=AsyncMock(return_value=data)):
            result = await get_gpu_status(config, {})

        assert result.startswith("Instance ID: i-1\n- Status: starting (Instance not ready for use)\n- GPU: H100 (80GB)")
        assert "- Price: $1.50/hour" in result
        assert "- SSH Access: Not available" in result
        assert "  • CPU: Unknown" in result
        assert result.endswith("- Start Time: Not started")

    @pytest.mark.asyncio
    async def test_gpu_status_empty(self, config):
        with patch(REQUEST, new=AsyncMock(return_value={"instances": []})):
            assert await get_gpu_status(config, {}) == "No active GPU instances found."

    @pytest.mark.asyncio
    async def test_rent_compute(self, config):
        with patch(REQUEST, new=AsyncMock(return_value={"instance": {"id": "i-9", "status": "starting"}})) as send:
            result = await rent_compute(config, {"cluster_name": "c1", "node_id": "n1", "gpu_count": 2})

        assert "- Instance ID: i-9\n- Node: n1\n- Cluster: c1\n- GPU Count: 2\n- Status: starting" in result
        assert send.await_args.kwargs["json"] == {"cluster_name": "c1", "node_name": "n1", "gpu_count": 2}

    @pytest.mark.asyncio
    async def test_terminate_compute(self, config):
        response = {"status": "terminated", "id": "i-9"}
        with patch(REQUEST, new=AsyncMock(return_value=response)) as send:
            result = await terminate_compute(config, {"instance_id": "i-9"})
        assert json.loads(result) == response
        assert result == json.dumps(response, indent=2)
        assert send.await_args.kwargs["json"] == {"id": "i-9"}

    @pytest.mark.asyncio
    async def test_terminate_requires_instance_id(self, config):
        send = AsyncMock()
        with patch(REQUEST, new=send):
            with pytest.raises(ValidationError, match="instance_id is required") as exc_info:
                await terminate_compute(config, {})
        send.assert_not_awaited()
        assert exc_info.value.validation_errors[0].location == "instance_id"

    @pytest.mark.asyncio
    async def test_link_wallet_address(self, config):
        response = {"address": "0xabc", "status": "linked"}
        with patch(REQUEST, new=AsyncMock(return_value=response)) as send:
            result = await link_wallet_address(config, {"wallet_address": "0xabc"})

        assert result == json.dumps(response, indent=2)
        assert send.await_args.args == ("POST", "https://api.hyperbolic.xyz/settings/crypto-address")
        assert send.await_args.kwargs["json"] == {"address": "0xabc"}
        assert send.await_args.kwargs["headers"]["Authorization"] == "Bearer hb-key"

    @pytest.mark.asyncio
    async def test_link_wallet_error_prefix(self, config):
        error = provider_error("API Error (400): invalid address", "hyperbolic", "link_wallet_address", status=400)
        with patch(REQUEST, new=AsyncMock(side_effect=error)):
            with pytest.raises(ProviderError, match="^Failed to link wallet address: API Error \\(400\\)"):
                await link_wallet_address(config, {"wallet_address": "bad"})

    @pytest.mark.asyncio
    async def test_link_wallet_requires_address(self, config):
        with patch(REQUEST, new=AsyncMock()) as send:
            with pytest.raises(ValidationError) as exc_info:
                await link_wallet_address(config, {"wallet_address": ""})
        assert exc_info.value.validation_errors[0].location == "wallet_address"
        send.assert_not_awaited()


class TestMalformedResponses:
    """Test that unexpected response shapes surface as provider errors."""

    @pytest.mark.asyncio
    async def test_marketplace_node_with_bad_field(self, config):
        data = {"instances": [{"id": "n1", "gpus_total": "lots"}]}
        with patch(REQUEST, new=AsyncMock(return_value=data)):
            with pytest.raises(ProviderError, match="^Invalid response format: gpus_total: ") as exc_info:
                await get_available_gpus(config, {})
        assert exc_info.value.provider_context.operation == "get_available_gpus"

    @pytest.mark.asyncio
    async def test_spend_history_missing_times(self, config):
        with patch(REQUEST, new=AsyncMock(return_value={"instance_history": [{"instance_name": "run-1"}]})):
            with pytest.raises(ProviderError, match="Invalid response format: started_at: Field required"):
                await get_spend_history(config, {})

    @pytest.mark.asyncio
    async def test_history_not_a_list(self, config):
        with patch(REQUEST, new=AsyncMock(return_value={"instance_history": "none"})):
            with pytest.raises(ProviderError, match="expected a list, got str"):
                await get_spend_history(config, {})
