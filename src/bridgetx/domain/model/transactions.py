"""Bridge transaction value types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .enums import MessageStatus

NO_CALL_DATA = "0x"
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


@dataclass(frozen=True, slots=True)
class Message:
    """Canonical cross-chain message as emitted by the source bridge."""

    id: int
    sender: str
    owner: str
    to: str
    data: str
    memo: str
    gas_limit: int
    call_value: int
    deposit_value: int
    processing_fee: int
    refund_address: str
    src_chain_id: int
    dest_chain_id: int


@dataclass(frozen=True, slots=True)
class TransactionReceipt:
    transaction_hash: str
    block_number: int
    block_hash: str
    status: int
    from_address: str
    to_address: str | None = None
    gas_used: int | None = None


@dataclass(frozen=True, slots=True)
class CandidateTransaction:
    """Transformed feed record awaiting on-chain confirmation."""

    message: Message
    msg_hash: str | None
    status: MessageStatus | int
    amount: int
    symbol: str | None
    hash: str
    sender: str
    src_chain_id: int
    dest_chain_id: int
    canonical_token_address: str | None = None
    canonical_token_symbol: str | None = None
    canonical_token_name: str | None = None
    canonical_token_decimals: int | None = None

    @property
    def is_token_transfer(self) -> bool:
        address = self.canonical_token_address
        return bool(address) and address.lower() != ZERO_ADDRESS


@dataclass(frozen=True, slots=True)
class BridgeTransaction:
    """Display-ready bridge transaction.

    Instances are immutable; enrichment derives new ones with
    ``dataclasses.replace`` so ``msg_hash`` never changes once assigned.
    """

    message: Message
    msg_hash: str | None
    status: MessageStatus | int
    amount: int
    symbol: str | None
    decimals: int | None
    src_chain_id: int
    dest_chain_id: int
    hash: str
    sender: str
    receipt: TransactionReceipt | None = None


@dataclass(frozen=True, slots=True)
class PaginationParams:
    page: int = 0
    size: int = 100

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError("Page must be non-negative")
        if self.size <= 0:
            raise ValueError("Page size must be positive")


@dataclass(frozen=True, slots=True)
class PaginationInfo:
    """Pagination metadata exactly as reported by the relayer.

    The totals describe the relayer's view of the data; filtering can make the
    visible page smaller than ``size`` without these values changing.
    """

    page: int
    size: int
    total: int
    total_pages: int
    first: bool
    last: bool
    max_page: int


@dataclass(slots=True)
class TransactionPage:
    pagination_info: PaginationInfo
    transactions: list[BridgeTransaction] = field(default_factory=list["BridgeTransaction"])


@dataclass(frozen=True, slots=True)
class BlockInfo:
    chain_id: int
    block_number: int
