"""Contract ABI fragments used for read-only calls."""

from __future__ import annotations

from typing import Final

GET_MESSAGE_STATUS: Final = "getMessageStatus"

BRIDGE_ABI: Final[tuple[dict[str, object], ...]] = (
    {
        "type": "function",
        "name": GET_MESSAGE_STATUS,
        "stateMutability": "view",
        "inputs": [{"name": "msgHash", "type": "bytes32", "internalType": "bytes32"}],
        "outputs": [
            {"name": "", "type": "uint8", "internalType": "enum IBridge.Status"},
        ],
    },
)
