"""Domain port definitions for adapters."""

from __future__ import annotations

from .chain_state import ChainStateReader
from .fetching import BridgeEventFetcher, BridgeEventFetchResult

__all__ = [
    "BridgeEventFetchResult",
    "BridgeEventFetcher",
    "ChainStateReader",
]
