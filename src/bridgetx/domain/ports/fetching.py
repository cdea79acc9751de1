"""Ports for fetching bridge events from an external indexer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from bridgetx.domain.model import (
        BlockInfo,
        CandidateTransaction,
        PaginationInfo,
        PaginationParams,
    )


@dataclass(slots=True)
class BridgeEventFetchResult:
    """One page of filtered, transformed candidates plus the indexer's pagination."""

    pagination_info: PaginationInfo
    candidates: list[CandidateTransaction] = field(default_factory=list)
    fetched: int = 0


@runtime_checkable
class BridgeEventFetcher(Protocol):
    """Port for retrieving bridge events and indexer progress."""

    async def fetch_transactions(
        self,
        *,
        address: str,
        pagination: PaginationParams,
        chain_id: int | None = None,
    ) -> BridgeEventFetchResult: ...

    async def fetch_block_info(self) -> list[BlockInfo]: ...


__all__ = ["BridgeEventFetchResult", "BridgeEventFetcher"]
