"""Descriptions shown to the model for Hyperbolic actions."""

GET_AVAILABLE_GPUS_PROMPT = """
This tool gets all the available GPU machines on the Hyperbolic platform.
It does not take any inputs.

Important notes:
- Authorization key is required for this operation
- Prices are shown in USD per hour
"""

GET_CURRENT_BALANCE_PROMPT = """
This tool retrieves your current Hyperbolic platform credit balance and purchase history.
It does not take any inputs.

Important notes:
- Authorization key is required for this operation
- Amounts are shown in USD
"""

GET_GPU_STATUS_PROMPT = """
This tool gets the status of all your currently rented GPU instances on the Hyperbolic platform.
It does not take any inputs.

Important notes:
- Authorization key is required for this operation
- Provides SSH access commands for each instance
- Shows hardware specifications and current status
"""

GET_SPEND_HISTORY_PROMPT = """
This tool retrieves and analyzes your GPU rental spending history on the Hyperbolic platform:
every instance rented with its duration and cost, the total spending per GPU type and the
overall total. No inputs are required.

Important notes:
- Authorization key is required for this operation
- All prices are in USD
- Durations are shown in seconds
"""

RENT_COMPUTE_PROMPT = """
This tool rents a GPU machine on the Hyperbolic platform.

Required inputs:
- cluster_name: Which cluster the node is on
- node_id: Which node you want to rent
- gpu_count: How many GPUs you want to rent

Use get_available_gpus to find cluster names and node IDs. After renting, check the
instance with get_gpu_status.
"""

TERMINATE_COMPUTE_PROMPT = """
This tool terminates a rented GPU instance on the Hyperbolic platform.

Required inputs:
- instance_id: The ID of the instance to terminate (from get_gpu_status)
"""

LINK_WALLET_ADDRESS_PROMPT = """
This tool links a wallet address to your Hyperbolic account.

Required inputs:
- wallet_address: The wallet address to link to your Hyperbolic account

Important notes:
- Authorization key is required for this operation
- After linking the wallet address, you can send USDC, USDT, or DAI on Base network to Hyperbolic address: 0xd3cB24E0Ba20865C530831C85Bd6EbC25f6f3B60
"""
