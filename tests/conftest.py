from __future__ import annotations

from dataclasses import replace

import pytest

from bridgetx.config import RetryPolicy
from bridgetx.config.relayer import RelayerConfig
from bridgetx.domain.model import ChainRegistry

from tests.support.chains import (
    L1_BRIDGE,
    L1_CHAIN_ID,
    L2_BRIDGE,
    L2_CHAIN_ID,
    build_registry,
)
from tests.support.relayer import RELAYER_URL


@pytest.fixture
def chain_registry() -> ChainRegistry:
    return build_registry()


@pytest.fixture
def relayer_config() -> RelayerConfig:
    """Relayer settings with immediate retries."""

    config = RelayerConfig.from_base_url(f"{RELAYER_URL}/")
    retry = RetryPolicy(total=2, backoff_factor=0.0, backoff_jitter=0.0)
    return replace(config, resilience=replace(config.resilience, retry=retry))


@pytest.fixture
def chain_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Populate the environment with a two-layer chain configuration."""

    layers = {
        "L1": (L1_CHAIN_ID, L1_BRIDGE),
        "L2": (L2_CHAIN_ID, L2_BRIDGE),
    }
    for layer, (chain_id, bridge) in layers.items():
        monkeypatch.setenv(f"{layer}_CHAIN_ID", str(chain_id))
        monkeypatch.setenv(f"{layer}_CHAIN_NAME", f"Chain {layer}")
        monkeypatch.setenv(f"{layer}_RPC_URL", f"http://{layer.lower()}.rpc.test")
        monkeypatch.setenv(f"{layer}_BRIDGE_ADDRESS", bridge)
        monkeypatch.setenv(f"{layer}_TOKEN_VAULT_ADDRESS", f"0x{chain_id:040x}")
        monkeypatch.setenv(f"{layer}_CROSS_CHAIN_SYNC_ADDRESS", f"0x{chain_id + 1:040x}")
        monkeypatch.setenv(f"{layer}_SIGNAL_SERVICE_ADDRESS", f"0x{chain_id + 2:040x}")
    for name in ("L3_CHAIN_ID", "SUPPORTED_CHAIN_LAYERS"):
        monkeypatch.delenv(name, raising=False)
