"""Static chain and bridge-contract registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class UnknownChainError(KeyError):
    """Raised when a chain id has no registered contracts."""

    def __init__(self, chain_id: int) -> None:
        super().__init__(chain_id)
        self.chain_id = chain_id

    def __str__(self) -> str:
        return f"No contracts registered for chain {self.chain_id}"


@dataclass(frozen=True, slots=True)
class ChainContracts:
    bridge_address: str
    token_vault_address: str
    cross_chain_sync_address: str
    signal_service_address: str


@dataclass(frozen=True, slots=True)
class ChainConfig:
    chain_id: int
    name: str
    rpc_url: str
    contracts: ChainContracts
    explorer_url: str | None = None


@dataclass(frozen=True, slots=True)
class ChainRegistry:
    """Read-only lookup of chain configuration keyed by chain id.

    A chain can be registered without being supported: its contracts are known,
    but transactions touching it are not surfaced.
    """

    chains: Mapping[int, ChainConfig]
    supported_chain_ids: frozenset[int] = field(default_factory=frozenset[int])

    @classmethod
    def from_chains(
        cls,
        chains: Iterable[ChainConfig],
        *,
        supported: Iterable[int] | None = None,
    ) -> ChainRegistry:
        by_id = {chain.chain_id: chain for chain in chains}
        supported_ids = frozenset(by_id) if supported is None else frozenset(supported)
        return cls(chains=by_id, supported_chain_ids=supported_ids)

    def is_supported(self, chain_id: int) -> bool:
        return chain_id in self.supported_chain_ids

    def find_contracts(self, chain_id: int) -> ChainContracts | None:
        chain = self.chains.get(chain_id)
        return chain.contracts if chain is not None else None

    def contracts_for(self, chain_id: int) -> ChainContracts:
        contracts = self.find_contracts(chain_id)
        if contracts is None:
            raise UnknownChainError(chain_id)
        return contracts

    def rpc_url_for(self, chain_id: int) -> str:
        chain = self.chains.get(chain_id)
        if chain is None:
            raise UnknownChainError(chain_id)
        return chain.rpc_url
