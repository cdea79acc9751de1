"""Reconcile relayer events with on-chain state into a display-ready page."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from bridgetx.domain.enrichment import collect_enriched, enrich_transactions
from bridgetx.domain.model import MessageStatus, TransactionPage

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bridgetx.domain.model import (
        BlockInfo,
        BridgeTransaction,
        ChainRegistry,
        PaginationInfo,
        PaginationParams,
    )
    from bridgetx.domain.ports import BridgeEventFetcher, ChainStateReader

log = getLogger(__name__)


def order_transactions(transactions: Iterable[BridgeTransaction]) -> list[BridgeTransaction]:
    """Return newest-first order with ``NEW`` messages ahead of everything else.

    The relayer reports oldest first. After reversing, the list is partitioned
    into new and other messages, each keeping its relative order.
    """

    newest_first = list(transactions)[::-1]
    new = [tx for tx in newest_first if tx.status == MessageStatus.NEW]
    rest = [tx for tx in newest_first if tx.status != MessageStatus.NEW]
    return new + rest


def assemble_page(
    transactions: Iterable[BridgeTransaction],
    pagination_info: PaginationInfo,
) -> TransactionPage:
    return TransactionPage(
        pagination_info=pagination_info,
        transactions=order_transactions(transactions),
    )


async def get_all_bridge_transactions_by_address(
    address: str,
    pagination: PaginationParams,
    chain_id: int | None = None,
    *,
    fetcher: BridgeEventFetcher,
    chain_state: ChainStateReader,
    registry: ChainRegistry,
) -> TransactionPage:
    """Fetch, filter, enrich and order one page of bridge transactions for ``address``."""

    result = await fetcher.fetch_transactions(
        address=address,
        pagination=pagination,
        chain_id=chain_id,
    )
    if not result.candidates:
        return TransactionPage(pagination_info=result.pagination_info)

    outcomes = await enrich_transactions(
        address,
        result.candidates,
        registry=registry,
        chain_state=chain_state,
    )
    enriched = collect_enriched(outcomes)
    log.info(
        "Enriched %s of %s candidate transactions for %s",
        len(enriched),
        len(result.candidates),
        address,
    )
    return assemble_page(enriched, result.pagination_info)


def index_block_info(block_info: Iterable[BlockInfo]) -> dict[int, BlockInfo]:
    """Key block info by chain id; a later entry for the same chain wins."""

    return {info.chain_id: info for info in block_info}


async def get_block_info(fetcher: BridgeEventFetcher) -> dict[int, BlockInfo]:
    return index_block_info(await fetcher.fetch_block_info())
