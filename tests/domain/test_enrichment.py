from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from bridgetx.domain.abi import GET_MESSAGE_STATUS
from bridgetx.domain.enrichment import collect_enriched, enrich_transaction, enrich_transactions
from bridgetx.domain.model import MessageStatus

from tests.support.chain_state import FakeChainStateReader
from tests.support.chains import L1_CHAIN_ID, L2_BRIDGE, L2_CHAIN_ID, OTHER_OWNER, OWNER
from tests.support.relayer import candidate, msg_hash, tx_hash

if TYPE_CHECKING:
    from bridgetx.domain.model import ChainRegistry


def test_confirmed_transaction_takes_on_chain_status(chain_registry: ChainRegistry) -> None:
    reader = FakeChainStateReader.confirming({tx_hash(1): (msg_hash(1), 2)})

    outcome = asyncio.run(
        enrich_transaction(OWNER, candidate(1), registry=chain_registry, chain_state=reader)
    )

    assert outcome.succeeded
    transaction = outcome.transaction
    assert transaction is not None
    assert transaction.status is MessageStatus.DONE
    assert transaction.receipt is not None
    assert transaction.receipt.transaction_hash == tx_hash(1)
    assert transaction.msg_hash == msg_hash(1)
    assert reader.receipt_calls == [(L1_CHAIN_ID, tx_hash(1))]
    assert reader.contract_calls == [(L2_CHAIN_ID, L2_BRIDGE, GET_MESSAGE_STATUS, (msg_hash(1),))]


def test_sender_comparison_ignores_case(chain_registry: ChainRegistry) -> None:
    reader = FakeChainStateReader.confirming({tx_hash(1): (msg_hash(1), 0)})

    outcome = asyncio.run(
        enrich_transaction(
            OWNER.lower(), candidate(1), registry=chain_registry, chain_state=reader
        )
    )

    assert outcome.succeeded


def test_foreign_sender_is_excluded_without_chain_reads(chain_registry: ChainRegistry) -> None:
    reader = FakeChainStateReader.confirming({tx_hash(1): (msg_hash(1), 0)})

    outcome = asyncio.run(
        enrich_transaction(OTHER_OWNER, candidate(1), registry=chain_registry, chain_state=reader)
    )

    assert not outcome.succeeded
    assert outcome.reason == "sender does not match address"
    assert reader.receipt_calls == []
    assert reader.contract_calls == []


def test_unmined_transaction_is_excluded(chain_registry: ChainRegistry) -> None:
    reader = FakeChainStateReader()

    outcome = asyncio.run(
        enrich_transaction(OWNER, candidate(1), registry=chain_registry, chain_state=reader)
    )

    assert outcome.reason == "transaction not mined"
    assert reader.contract_calls == []


def test_missing_message_hash_is_excluded(chain_registry: ChainRegistry) -> None:
    reader = FakeChainStateReader.confirming({tx_hash(1): (msg_hash(1), 0)})

    outcome = asyncio.run(
        enrich_transaction(
            OWNER,
            candidate(1, message_hash=""),
            registry=chain_registry,
            chain_state=reader,
        )
    )

    assert outcome.reason == "missing message hash"
    assert reader.contract_calls == []


def test_token_transfer_keeps_canonical_token_details(chain_registry: ChainRegistry) -> None:
    reader = FakeChainStateReader.confirming({tx_hash(4): (msg_hash(4), 1)})
    token = candidate(
        4,
        amount="7500000",
        token_address="0x00000000000000000000000000000000000000aa",
        token_symbol="USDC",
        token_decimals=6,
    )

    outcome = asyncio.run(
        enrich_transaction(OWNER, token, registry=chain_registry, chain_state=reader)
    )

    transaction = outcome.transaction
    assert transaction is not None
    assert transaction.status is MessageStatus.RETRIABLE
    assert (transaction.amount, transaction.symbol, transaction.decimals) == (7500000, "USDC", 6)


def test_one_failing_read_does_not_abort_the_batch(chain_registry: ChainRegistry) -> None:
    reader = FakeChainStateReader.confirming(
        {
            tx_hash(1): (msg_hash(1), 2),
            tx_hash(2): (msg_hash(2), 0),
            tx_hash(3): (msg_hash(3), 3),
        }
    )
    reader.failing_receipts.add(tx_hash(2))
    reader.failing_statuses.add(msg_hash(3))
    candidates = [candidate(1), candidate(2), candidate(3)]

    outcomes = asyncio.run(
        enrich_transactions(OWNER, candidates, registry=chain_registry, chain_state=reader)
    )

    assert [outcome.candidate.hash for outcome in outcomes] == [tx_hash(1), tx_hash(2), tx_hash(3)]
    assert [outcome.succeeded for outcome in outcomes] == [True, False, False]
    assert isinstance(outcomes[1].error, ConnectionError)
    assert isinstance(outcomes[2].error, TimeoutError)
    assert [tx.hash for tx in collect_enriched(outcomes)] == [tx_hash(1)]


def test_no_candidates_yields_no_outcomes(chain_registry: ChainRegistry) -> None:
    outcomes = asyncio.run(
        enrich_transactions(
            OWNER, [], registry=chain_registry, chain_state=FakeChainStateReader()
        )
    )

    assert outcomes == []


def test_unknown_on_chain_status_is_kept(chain_registry: ChainRegistry) -> None:
    reader = FakeChainStateReader.confirming({tx_hash(1): (msg_hash(1), 4)})

    outcome = asyncio.run(
        enrich_transaction(OWNER, candidate(1), registry=chain_registry, chain_state=reader)
    )

    transaction = outcome.transaction
    assert transaction is not None
    assert transaction.status == 4
    assert not isinstance(transaction.status, MessageStatus)
    assert transaction.receipt is not None
