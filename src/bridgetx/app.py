"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from bridgetx.adapters.evm import Web3ChainStateReader
from bridgetx.adapters.relayer import RelayerEventFetcher
from bridgetx.config import get_chain_registry, get_web3_config
from bridgetx.domain.model import PaginationParams
from bridgetx.domain.reconciliation import get_all_bridge_transactions_by_address, get_block_info

if TYPE_CHECKING:
    from bridgetx.domain.model import BlockInfo, ChainRegistry, TransactionPage
    from bridgetx.domain.ports import BridgeEventFetcher, ChainStateReader


log = getLogger(__name__)


def list_bridge_transactions(
    address: str,
    *,
    pagination: PaginationParams | None = None,
    chain_id: int | None = None,
    registry: ChainRegistry | None = None,
    fetcher: BridgeEventFetcher | None = None,
    chain_state: ChainStateReader | None = None,
) -> TransactionPage:
    """List one page of bridge transactions for ``address`` using the configured adapters."""

    active_registry = registry or get_chain_registry()
    effective_fetcher = fetcher or RelayerEventFetcher(registry=active_registry)
    # a reader built here is closed here; an injected one belongs to the caller
    owned_reader: Web3ChainStateReader | None = None
    if chain_state is None:
        owned_reader = Web3ChainStateReader(registry=active_registry, config=get_web3_config())
    effective_reader: ChainStateReader = chain_state or owned_reader  # type: ignore[assignment]
    effective_pagination = pagination or PaginationParams()
    log.info(
        "Listing bridge transactions: address=%s, page=%s, size=%s, chain_id=%s",
        address,
        effective_pagination.page,
        effective_pagination.size,
        chain_id,
    )

    async def run() -> TransactionPage:
        try:
            return await get_all_bridge_transactions_by_address(
                address,
                effective_pagination,
                chain_id,
                fetcher=effective_fetcher,
                chain_state=effective_reader,
                registry=active_registry,
            )
        finally:
            if owned_reader is not None:
                await owned_reader.aclose()

    page = asyncio.run(run())

    info = page.pagination_info
    log.info(
        f"Finished listing: visible={len(page.transactions)}, page={info.page}, "
        f"total={info.total}, total_pages={info.total_pages}"
    )
    return page


def fetch_block_info(
    *,
    registry: ChainRegistry | None = None,
    fetcher: BridgeEventFetcher | None = None,
) -> dict[int, BlockInfo]:
    """Return the relayer's last processed block per chain."""

    effective_fetcher = fetcher or RelayerEventFetcher(registry=registry or get_chain_registry())
    return asyncio.run(get_block_info(effective_fetcher))
