"""Confirm candidate transactions against live chain state.

Every candidate is enriched in its own task: a receipt lookup on the source
chain followed by a message-status read on the destination bridge. Each task
reports a tagged ``EnrichmentOutcome`` so one failing chain read cannot abort
its siblings; callers keep the successes with ``collect_enriched``.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, replace
from logging import getLogger
from typing import TYPE_CHECKING

from bridgetx.domain.abi import BRIDGE_ABI, GET_MESSAGE_STATUS
from bridgetx.domain.model import BridgeTransaction, MessageStatus, parse_message_status

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from bridgetx.domain.model import CandidateTransaction, ChainRegistry
    from bridgetx.domain.ports.chain_state import ChainStateReader

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EnrichmentOutcome:
    candidate: CandidateTransaction
    transaction: BridgeTransaction | None = None
    reason: str | None = None
    error: Exception | None = None

    @property
    def succeeded(self) -> bool:
        return self.transaction is not None

    @classmethod
    def excluded(cls, candidate: CandidateTransaction, reason: str) -> EnrichmentOutcome:
        return cls(candidate=candidate, reason=reason)


def to_bridge_transaction(candidate: CandidateTransaction) -> BridgeTransaction:
    return BridgeTransaction(
        message=candidate.message,
        msg_hash=candidate.msg_hash,
        status=candidate.status,
        amount=candidate.amount,
        symbol=candidate.symbol,
        decimals=candidate.canonical_token_decimals,
        src_chain_id=candidate.src_chain_id,
        dest_chain_id=candidate.dest_chain_id,
        hash=candidate.hash,
        sender=candidate.sender,
    )


async def read_message_status(
    *,
    msg_hash: str,
    dest_chain_id: int,
    registry: ChainRegistry,
    chain_state: ChainStateReader,
) -> MessageStatus | int:
    bridge_address = registry.contracts_for(dest_chain_id).bridge_address
    raw_status = await chain_state.read_contract(
        dest_chain_id,
        bridge_address,
        BRIDGE_ABI,
        GET_MESSAGE_STATUS,
        (msg_hash,),
    )
    status = parse_message_status(int(raw_status))  # type: ignore[call-overload]
    if not isinstance(status, MessageStatus):
        log.warning(
            "Bridge on chain %s reports unknown status %s for %s", dest_chain_id, status, msg_hash
        )
    return status


async def enrich_transaction(
    address: str,
    candidate: CandidateTransaction,
    *,
    registry: ChainRegistry,
    chain_state: ChainStateReader,
) -> EnrichmentOutcome:
    if candidate.sender.lower() != address.lower():
        return EnrichmentOutcome.excluded(candidate, "sender does not match address")

    transaction = to_bridge_transaction(candidate)

    receipt = await chain_state.wait_for_receipt(candidate.src_chain_id, candidate.hash)
    if receipt is None:
        return EnrichmentOutcome.excluded(candidate, "transaction not mined")

    if not candidate.msg_hash:
        return EnrichmentOutcome.excluded(candidate, "missing message hash")

    status = await read_message_status(
        msg_hash=candidate.msg_hash,
        dest_chain_id=candidate.dest_chain_id,
        registry=registry,
        chain_state=chain_state,
    )
    transaction = replace(transaction, receipt=receipt, status=status)

    if candidate.is_token_transfer:
        # token transfers keep the canonical token's amount, symbol and decimals
        transaction = replace(
            transaction,
            amount=candidate.amount,
            symbol=candidate.symbol,
            decimals=candidate.canonical_token_decimals,
        )

    return EnrichmentOutcome(candidate=candidate, transaction=transaction)


async def _enrich_isolated(
    address: str,
    candidate: CandidateTransaction,
    *,
    registry: ChainRegistry,
    chain_state: ChainStateReader,
) -> EnrichmentOutcome:
    try:
        outcome = await enrich_transaction(
            address, candidate, registry=registry, chain_state=chain_state
        )
    except Exception as exc:  # noqa: BLE001
        log.warning("Enrichment failed for transaction %s: %s", candidate.hash, exc)
        return EnrichmentOutcome(candidate=candidate, reason="chain read failed", error=exc)
    if not outcome.succeeded:
        log.debug("Skipping transaction %s: %s", candidate.hash, outcome.reason)
    return outcome


async def enrich_transactions(
    address: str,
    candidates: Sequence[CandidateTransaction],
    *,
    registry: ChainRegistry,
    chain_state: ChainStateReader,
) -> list[EnrichmentOutcome]:
    """Enrich all candidates concurrently; the result has one outcome per candidate, in order."""

    return list(
        await asyncio.gather(
            *(
                _enrich_isolated(address, candidate, registry=registry, chain_state=chain_state)
                for candidate in candidates
            )
        )
    )


def collect_enriched(outcomes: Iterable[EnrichmentOutcome]) -> list[BridgeTransaction]:
    return [outcome.transaction for outcome in outcomes if outcome.transaction is not None]
