"""
JSON-RPC Client Module

- correlator: single call round trips
- batch: batched calls demultiplexed by id
- client: Client facade
"""

from .correlator import CallCorrelator
from .batch import BatchCoordinator
from .client import Client

__all__ = ["CallCorrelator", "BatchCoordinator", "Client"]
