"""Translate relayer event records into candidate bridge transactions."""

from __future__ import annotations

import base64
import binascii
from logging import getLogger
from typing import TYPE_CHECKING

from bridgetx.domain.model import (
    NO_CALL_DATA,
    CandidateTransaction,
    Message,
    MessageStatus,
    parse_message_status,
)

if TYPE_CHECKING:
    from .schema import EventRecord, NumericValue

log = getLogger(__name__)


class TransformationError(ValueError):
    """Raised when a relayer record does not match the expected feed format."""


def decode_call_data(value: str) -> str:
    """Return message call data as a ``0x``-prefixed hex string.

    The relayer reports call data base64-encoded, except for the empty string
    and the literal ``0x`` marker which both mean "no data".
    """

    if value in ("", NO_CALL_DATA):
        return NO_CALL_DATA
    # strict decoding: bad padding or stray characters abort the page
    try:
        decoded = base64.b64decode(value, validate=True)
    except binascii.Error as exc:
        raise TransformationError(f"Call data is not valid base64: {value!r}") from exc
    return f"0x{decoded.hex()}"


def parse_numeric(value: NumericValue, *, field_name: str, tx_hash: str | None = None) -> int:
    """Parse an arbitrary-precision integer reported as a decimal or ``0x`` hex string."""

    if isinstance(value, int):
        return value
    text = value.strip()
    if not text:
        return 0
    try:
        if text[:2].lower() == "0x":
            return int(text[2:], 16)
        return int(text, 10)
    except ValueError as exc:
        raise TransformationError(
            f"Invalid {field_name} {value!r} in relayer record {tx_hash}"
        ) from exc


def coerce_status(value: int) -> MessageStatus | int:
    status = parse_message_status(value)
    if not isinstance(status, MessageStatus):
        log.warning("Unknown message status %s reported by relayer", value)
    return status


def parse_event_record(record: EventRecord) -> CandidateTransaction:
    tx_hash = record.transaction_hash
    payload = record.message
    if tx_hash is None or payload is None:
        raise TransformationError("Relayer record is missing its transaction hash or message")
    if payload.src_chain_id is None or payload.dest_chain_id is None:
        raise TransformationError(f"Relayer record {tx_hash} is missing message chain ids")

    message = Message(
        id=payload.id,
        sender=payload.sender,
        owner=payload.owner,
        to=payload.to,
        data=decode_call_data(payload.data),
        memo=payload.memo,
        gas_limit=parse_numeric(payload.gas_limit, field_name="GasLimit", tx_hash=tx_hash),
        call_value=parse_numeric(payload.call_value, field_name="CallValue", tx_hash=tx_hash),
        deposit_value=parse_numeric(
            payload.deposit_value, field_name="DepositValue", tx_hash=tx_hash
        ),
        processing_fee=parse_numeric(
            payload.processing_fee, field_name="ProcessingFee", tx_hash=tx_hash
        ),
        refund_address=payload.refund_address,
        src_chain_id=payload.src_chain_id,
        dest_chain_id=payload.dest_chain_id,
    )

    return CandidateTransaction(
        message=message,
        msg_hash=record.msg_hash,
        status=coerce_status(record.status),
        amount=parse_numeric(record.amount, field_name="amount", tx_hash=tx_hash),
        symbol=record.canonical_token_symbol,
        hash=tx_hash,
        sender=record.message_owner or payload.owner,
        src_chain_id=payload.src_chain_id,
        dest_chain_id=payload.dest_chain_id,
        canonical_token_address=record.canonical_token_address,
        canonical_token_symbol=record.canonical_token_symbol,
        canonical_token_name=record.canonical_token_name,
        canonical_token_decimals=record.canonical_token_decimals,
    )
