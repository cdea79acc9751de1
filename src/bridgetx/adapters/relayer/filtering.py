"""Drop duplicate, foreign and incomplete relayer records."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bridgetx.domain.model import ChainRegistry

    from .schema import EventRecord

log = getLogger(__name__)


def filter_duplicate_and_wrong_bridge(
    records: Iterable[EventRecord],
    registry: ChainRegistry,
) -> list[EventRecord]:
    """Return records that are unique, complete and emitted by a known bridge.

    A transaction hash is claimed by the first record carrying it, even when
    that record is itself rejected, so a later duplicate can never replace it.
    Input order is preserved.
    """

    seen_hashes: set[str] = set()
    survivors: list[EventRecord] = []

    for record in records:
        tx_hash = record.transaction_hash
        is_duplicate = tx_hash is not None and tx_hash in seen_hashes
        if tx_hash is not None:
            seen_hashes.add(tx_hash)

        reason = _rejection_reason(record, registry, is_duplicate=is_duplicate)
        if reason is not None:
            log.debug("Dropping relayer record %s: %s", tx_hash, reason)
            continue
        survivors.append(record)

    return survivors


def _rejection_reason(
    record: EventRecord,
    registry: ChainRegistry,
    *,
    is_duplicate: bool,
) -> str | None:
    raw = record.raw
    if raw is None or raw.transaction_hash is None or raw.address is None:
        return "incomplete raw log"
    if is_duplicate:
        return "duplicate transaction hash"
    if not _is_registered_bridge(record.chain_id, raw.address, registry):
        return "not emitted by the registered bridge"
    message = record.message
    if message is None or message.src_chain_id is None or message.dest_chain_id is None:
        return "missing message chain ids"
    if not registry.is_supported(message.src_chain_id):
        return "unsupported source chain"
    if not registry.is_supported(message.dest_chain_id):
        return "unsupported destination chain"
    return None


def _is_registered_bridge(chain_id: int | None, address: str, registry: ChainRegistry) -> bool:
    if chain_id is None:
        return False
    contracts = registry.find_contracts(chain_id)
    if contracts is None:
        return False
    return address.lower() == contracts.bridge_address.lower()
