"""Port for read-only access to on-chain state."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from bridgetx.domain.model import TransactionReceipt


@runtime_checkable
class ChainStateReader(Protocol):
    """Reads receipts and contract state, one chain at a time."""

    async def wait_for_receipt(self, chain_id: int, tx_hash: str) -> TransactionReceipt | None:
        """Return the receipt for ``tx_hash`` or ``None`` if it has not been mined."""
        ...

    async def read_contract(
        self,
        chain_id: int,
        address: str,
        abi: Sequence[Mapping[str, object]],
        function_name: str,
        args: Sequence[object] = (),
    ) -> object: ...


__all__ = ["ChainStateReader"]
