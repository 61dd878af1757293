"""
Test suite for flashlib.

Covers the core layer (errors, settings), provider configuration and HTTP
helpers, the action record, job polling, the action registry, the tool
adapters and every provider's action set. Provider HTTP calls are mocked;
nothing here talks to a real third-party API.
"""

import logging

# Configure test logging
logging.basicConfig(level=logging.WARNING)  # Reduce noise during tests
