"""Domain model for bridge transaction reconciliation."""

from __future__ import annotations

from .chains import ChainConfig, ChainContracts, ChainRegistry, UnknownChainError
from .enums import MessageStatus, parse_message_status
from .transactions import (
    NO_CALL_DATA,
    ZERO_ADDRESS,
    BlockInfo,
    BridgeTransaction,
    CandidateTransaction,
    Message,
    PaginationInfo,
    PaginationParams,
    TransactionPage,
    TransactionReceipt,
)

__all__ = [
    "NO_CALL_DATA",
    "ZERO_ADDRESS",
    "BlockInfo",
    "BridgeTransaction",
    "CandidateTransaction",
    "ChainConfig",
    "ChainContracts",
    "ChainRegistry",
    "Message",
    "MessageStatus",
    "PaginationInfo",
    "PaginationParams",
    "TransactionPage",
    "TransactionReceipt",
    "UnknownChainError",
    "parse_message_status",
]
