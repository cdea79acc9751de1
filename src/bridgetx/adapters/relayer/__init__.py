"""Public interface for the relayer adapter."""

from __future__ import annotations

from .client import EventQuery, RelayerAPIError, RelayerClient
from .fetcher import RelayerEventFetcher
from .filtering import filter_duplicate_and_wrong_bridge
from .schema import BlockInfoResponse, EventRecord, EventsResponse, parse_event_records
from .translator import TransformationError, decode_call_data, parse_event_record

__all__ = [
    "BlockInfoResponse",
    "EventQuery",
    "EventRecord",
    "EventsResponse",
    "RelayerAPIError",
    "RelayerClient",
    "RelayerEventFetcher",
    "TransformationError",
    "decode_call_data",
    "filter_duplicate_and_wrong_bridge",
    "parse_event_record",
    "parse_event_records",
]
