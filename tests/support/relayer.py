"""Builders for relayer API payloads."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import httpx

from bridgetx.adapters.http_resilience import ResilienceConfig, ResilientClient
from bridgetx.adapters.relayer import EventRecord, parse_event_record
from bridgetx.domain.model import CandidateTransaction

from .chains import L1_BRIDGE, L1_CHAIN_ID, L2_CHAIN_ID, OWNER

RELAYER_URL = "https://relayer.test/api"
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


def tx_hash(index: int) -> str:
    return f"0x{index:064x}"


def msg_hash(index: int) -> str:
    return f"0x{index + 0xABC000:064x}"


def event_payload(
    index: int,
    *,
    hash_value: str | None = None,
    chain_id: int | None = L1_CHAIN_ID,
    src_chain_id: int | None = L1_CHAIN_ID,
    dest_chain_id: int | None = L2_CHAIN_ID,
    emitter: str | None = L1_BRIDGE,
    owner: str = OWNER,
    status: int = 0,
    amount: str = "1000000000000000000",
    data: str = "",
    message_hash: str | None = None,
    token_address: str = ZERO_ADDRESS,
    token_symbol: str = "ETH",
    token_decimals: int = 18,
) -> dict[str, object]:
    return {
        "id": index,
        "name": "MessageSent",
        "event": "MessageSent",
        "chainID": chain_id,
        "status": status,
        "msgHash": message_hash if message_hash is not None else msg_hash(index),
        "messageOwner": owner,
        "amount": amount,
        "canonicalTokenAddress": token_address,
        "canonicalTokenSymbol": token_symbol,
        "canonicalTokenName": "Ether" if token_symbol == "ETH" else token_symbol,
        "canonicalTokenDecimals": token_decimals,
        "data": {
            "Message": {
                "Id": index,
                "To": owner,
                "Owner": owner,
                "Sender": "0x0000777700000000000000000000000000000002",
                "Data": data,
                "Memo": "",
                "GasLimit": "140000",
                "CallValue": "0",
                "DepositValue": amount,
                "ProcessingFee": "0",
                "RefundAddress": owner,
                "SrcChainId": src_chain_id,
                "DestChainId": dest_chain_id,
            },
            "Raw": {
                "transactionHash": hash_value if hash_value is not None else tx_hash(index),
                "address": emitter,
            },
        },
    }


def events_response(
    items: Sequence[dict[str, object]],
    *,
    page: int = 0,
    size: int = 10,
    total: int | None = None,
    total_pages: int = 1,
    first: bool = True,
    last: bool = True,
    max_page: int = 0,
) -> dict[str, object]:
    return {
        "items": list(items),
        "page": page,
        "size": size,
        "total": len(items) if total is None else total,
        "total_pages": total_pages,
        "first": first,
        "last": last,
        "max_page": max_page,
    }


def make_client_factory(
    handler: Callable[[httpx.Request], httpx.Response],
) -> Callable[[ResilienceConfig], ResilientClient]:
    async def async_handler(request: httpx.Request) -> httpx.Response:
        return handler(request)

    def factory(resilience: ResilienceConfig) -> ResilientClient:
        return ResilientClient(resilience, transport=httpx.MockTransport(async_handler))

    return factory


def candidate(index: int, **overrides: object) -> CandidateTransaction:
    """Translate an ``event_payload`` straight into a candidate transaction."""

    payload = event_payload(index, **overrides)  # type: ignore[arg-type]
    return parse_event_record(EventRecord.model_validate(payload))
