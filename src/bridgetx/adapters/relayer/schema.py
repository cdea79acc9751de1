"""Pydantic models describing the relayer API payloads.

Structural fields of an event are optional: an incomplete record still
validates so the filter can drop it. Items are validated one at a time with
``parse_event_records``; an item that cannot be read at all is dropped there
instead of failing the whole page. Numeric fields stay as reported and are
parsed by the translator.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

if TYPE_CHECKING:
    from collections.abc import Iterable

log = getLogger(__name__)

NumericValue = str | int


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class RelayerBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class MessagePayload(RelayerBaseModel):
    id: int = Field(default=0, alias="Id")
    to: str = Field(default="", alias="To")
    owner: str = Field(default="", alias="Owner")
    sender: str = Field(default="", alias="Sender")
    data: str = Field(default="", alias="Data")
    memo: str = Field(default="", alias="Memo")
    gas_limit: NumericValue = Field(default="0", alias="GasLimit")
    call_value: NumericValue = Field(default="0", alias="CallValue")
    deposit_value: NumericValue = Field(default="0", alias="DepositValue")
    processing_fee: NumericValue = Field(default="0", alias="ProcessingFee")
    refund_address: str = Field(default="", alias="RefundAddress")
    src_chain_id: int | None = Field(default=None, alias="SrcChainId")
    dest_chain_id: int | None = Field(default=None, alias="DestChainId")

    @field_validator(
        "to",
        "owner",
        "sender",
        "data",
        "memo",
        "refund_address",
        "gas_limit",
        "call_value",
        "deposit_value",
        "processing_fee",
        mode="before",
    )
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return "" if value is None else value


class RawLog(RelayerBaseModel):
    transaction_hash: str | None = Field(default=None, alias="transactionHash")
    address: str | None = None

    normalize_blank = field_validator("transaction_hash", "address", mode="before")(
        _blank_to_none
    )


class EventData(RelayerBaseModel):
    message: MessagePayload | None = Field(default=None, alias="Message")
    raw: RawLog | None = Field(default=None, alias="Raw")


class EventRecord(RelayerBaseModel):
    """A single ``MessageSent`` event as indexed by the relayer."""

    id: int | None = None
    name: str | None = None
    event: str | None = None
    chain_id: int | None = Field(default=None, alias="chainID")
    data: EventData | None = None
    status: int = 0
    msg_hash: str | None = Field(default=None, alias="msgHash")
    message_owner: str | None = Field(default=None, alias="messageOwner")
    amount: NumericValue = "0"
    canonical_token_address: str | None = Field(default=None, alias="canonicalTokenAddress")
    canonical_token_symbol: str | None = Field(default=None, alias="canonicalTokenSymbol")
    canonical_token_name: str | None = Field(default=None, alias="canonicalTokenName")
    canonical_token_decimals: int | None = Field(default=None, alias="canonicalTokenDecimals")

    normalize_blank = field_validator(
        "msg_hash", "message_owner", "canonical_token_address", mode="before"
    )(_blank_to_none)

    @field_validator("status", mode="before")
    @classmethod
    def _missing_status_is_new(cls, value: object) -> object:
        return 0 if value is None else value

    @field_validator("amount", mode="before")
    @classmethod
    def _missing_amount_is_blank(cls, value: object) -> object:
        return "" if value is None else value

    @property
    def message(self) -> MessagePayload | None:
        return self.data.message if self.data is not None else None

    @property
    def raw(self) -> RawLog | None:
        return self.data.raw if self.data is not None else None

    @property
    def transaction_hash(self) -> str | None:
        raw = self.raw
        return raw.transaction_hash if raw is not None else None


def parse_event_records(items: Iterable[Any]) -> list[EventRecord]:
    """Validate feed items one by one, dropping those that cannot be read."""

    records: list[EventRecord] = []
    for position, item in enumerate(items):
        try:
            records.append(EventRecord.model_validate(item))
        except ValidationError as exc:
            log.debug("Dropping unreadable relayer item at position %s: %s", position, exc)
    return records


class EventsResponse(RelayerBaseModel):
    items: list[Any] = Field(default_factory=list)
    page: int
    size: int
    total: int
    total_pages: int
    first: bool
    last: bool
    max_page: int

    @field_validator("items", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return [] if value is None else value


class BlockInfoPayload(RelayerBaseModel):
    chain_id: int = Field(alias="chainID")
    block_number: int = Field(alias="blockNumber")


class BlockInfoResponse(RelayerBaseModel):
    data: list[BlockInfoPayload] = Field(default_factory=list)

    @field_validator("data", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return [] if value is None else value
