"""Relayer-backed implementation of the bridge event fetcher port."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from bridgetx.domain.model import BlockInfo, PaginationInfo
from bridgetx.domain.ports.fetching import BridgeEventFetchResult

from .client import EventQuery, RelayerClient
from .filtering import filter_duplicate_and_wrong_bridge
from .schema import parse_event_records
from .translator import parse_event_record

if TYPE_CHECKING:
    from bridgetx.domain.model import ChainRegistry, PaginationParams

    from .schema import EventsResponse

log = getLogger(__name__)


def pagination_from_response(response: EventsResponse) -> PaginationInfo:
    return PaginationInfo(
        page=response.page,
        size=response.size,
        total=response.total,
        total_pages=response.total_pages,
        first=response.first,
        last=response.last,
        max_page=response.max_page,
    )


@dataclass(slots=True)
class RelayerEventFetcher:
    registry: ChainRegistry
    client: RelayerClient = field(default_factory=RelayerClient)

    async def fetch_transactions(
        self,
        *,
        address: str,
        pagination: PaginationParams,
        chain_id: int | None = None,
    ) -> BridgeEventFetchResult:
        query = EventQuery(
            address=address,
            page=pagination.page,
            size=pagination.size,
            chain_id=chain_id,
        )
        response = await self.client.fetch_events(query)
        pagination_info = pagination_from_response(response)

        if not response.items:
            return BridgeEventFetchResult(pagination_info=pagination_info)

        records = filter_duplicate_and_wrong_bridge(
            parse_event_records(response.items), self.registry
        )
        candidates = [parse_event_record(record) for record in records]
        log.info(
            "Relayer page %s: %s events, %s candidates after filtering",
            response.page,
            len(response.items),
            len(candidates),
        )
        return BridgeEventFetchResult(
            pagination_info=pagination_info,
            candidates=candidates,
            fetched=len(response.items),
        )

    async def fetch_block_info(self) -> list[BlockInfo]:
        response = await self.client.fetch_block_info()
        return [
            BlockInfo(chain_id=item.chain_id, block_number=item.block_number)
            for item in response.data
        ]

