"""Read-only chain access through ``web3.AsyncWeb3``."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Any

from aiohttp import ClientTimeout
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.exceptions import TransactionNotFound

from bridgetx.config.web3 import Web3Config
from bridgetx.domain.model import TransactionReceipt

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import TracebackType

    from bridgetx.domain.model import ChainRegistry

log = getLogger(__name__)

Web3Factory = Callable[[str, Web3Config], AsyncWeb3]


def build_async_web3(rpc_url: str, config: Web3Config) -> AsyncWeb3:
    provider = AsyncHTTPProvider(
        rpc_url,
        request_kwargs={"timeout": ClientTimeout(total=config.request_timeout)},
    )
    return AsyncWeb3(provider)


def receipt_from_web3(payload: Mapping[str, Any]) -> TransactionReceipt:
    to_address = payload.get("to")
    return TransactionReceipt(
        transaction_hash=AsyncWeb3.to_hex(payload["transactionHash"]),
        block_number=int(payload["blockNumber"]),
        block_hash=AsyncWeb3.to_hex(payload["blockHash"]),
        status=int(payload.get("status", 0)),
        from_address=str(payload["from"]),
        to_address=str(to_address) if to_address is not None else None,
        gas_used=int(payload["gasUsed"]) if payload.get("gasUsed") is not None else None,
    )


@dataclass(slots=True)
class Web3ChainStateReader:
    """Chain state reader holding one ``AsyncWeb3`` instance per chain."""

    registry: ChainRegistry
    config: Web3Config = field(default_factory=Web3Config)
    web3_factory: Web3Factory = field(default=build_async_web3)
    _clients: dict[int, AsyncWeb3] = field(default_factory=dict[int, AsyncWeb3], init=False)

    async def __aenter__(self) -> Web3ChainStateReader:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the provider session of every cached client."""

        clients = list(self._clients.items())
        self._clients.clear()
        for chain_id, w3 in clients:
            log.debug("Closing web3 provider for chain %s", chain_id)
            await w3.provider.disconnect()

    def web3_for(self, chain_id: int) -> AsyncWeb3:
        client = self._clients.get(chain_id)
        if client is None:
            client = self.web3_factory(self.registry.rpc_url_for(chain_id), self.config)
            self._clients[chain_id] = client
        return client

    async def wait_for_receipt(self, chain_id: int, tx_hash: str) -> TransactionReceipt | None:
        w3 = self.web3_for(chain_id)
        try:
            payload = await w3.eth.get_transaction_receipt(tx_hash)  # type: ignore[arg-type]
        except TransactionNotFound:
            log.debug("Transaction %s not yet mined on chain %s", tx_hash, chain_id)
            return None
        return receipt_from_web3(payload)

    async def read_contract(
        self,
        chain_id: int,
        address: str,
        abi: Sequence[Mapping[str, object]],
        function_name: str,
        args: Sequence[object] = (),
    ) -> object:
        w3 = self.web3_for(chain_id)
        contract = w3.eth.contract(
            address=AsyncWeb3.to_checksum_address(address),
            abi=list(abi),  # type: ignore[arg-type]
        )
        return await contract.functions[function_name](*args).call()
