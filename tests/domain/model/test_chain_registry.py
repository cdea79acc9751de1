from __future__ import annotations

import pytest

from bridgetx.domain.model import (
    ChainRegistry,
    MessageStatus,
    UnknownChainError,
    parse_message_status,
)

from tests.support.chains import L1_BRIDGE, L1_CHAIN_ID, L2_CHAIN_ID, L3_CHAIN_ID


def test_supported_chain_membership(chain_registry: ChainRegistry) -> None:
    assert chain_registry.is_supported(L1_CHAIN_ID)
    assert chain_registry.is_supported(L2_CHAIN_ID)
    assert not chain_registry.is_supported(L3_CHAIN_ID)
    assert not chain_registry.is_supported(1)


def test_contract_lookup(chain_registry: ChainRegistry) -> None:
    assert chain_registry.contracts_for(L1_CHAIN_ID).bridge_address == L1_BRIDGE
    assert chain_registry.find_contracts(L3_CHAIN_ID) is not None
    assert chain_registry.find_contracts(1) is None


def test_unknown_chain_raises(chain_registry: ChainRegistry) -> None:
    with pytest.raises(UnknownChainError) as exc:
        chain_registry.contracts_for(1)

    assert exc.value.chain_id == 1
    assert "chain 1" in str(exc.value)

    with pytest.raises(KeyError):
        chain_registry.rpc_url_for(1)


def test_from_chains_supports_everything_by_default(chain_registry: ChainRegistry) -> None:
    registry = ChainRegistry.from_chains(chain_registry.chains.values())

    assert registry.supported_chain_ids == frozenset({L1_CHAIN_ID, L2_CHAIN_ID, L3_CHAIN_ID})


def test_parse_message_status() -> None:
    assert parse_message_status(2) is MessageStatus.DONE
    assert parse_message_status(7) == 7
