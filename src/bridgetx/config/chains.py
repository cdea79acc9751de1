"""Chain registry loaded from environment variables.

Each chain layer is described by a block of variables sharing a prefix, for
example ``L1_CHAIN_ID``, ``L1_RPC_URL`` and ``L1_BRIDGE_ADDRESS``. ``L1`` and
``L2`` are required; ``L3`` is registered only when ``L3_CHAIN_ID`` is set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bridgetx.domain.model.chains import ChainConfig, ChainContracts, ChainRegistry

from .env import optional_env_var, parse_int_value, require_env_vars
from .errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence

REQUIRED_LAYERS: tuple[str, ...] = ("L1", "L2")
OPTIONAL_LAYERS: tuple[str, ...] = ("L3",)
DEFAULT_SUPPORTED_LAYERS: tuple[str, ...] = ("L1", "L2")

_LAYER_FIELDS = (
    "CHAIN_ID",
    "CHAIN_NAME",
    "RPC_URL",
    "BRIDGE_ADDRESS",
    "TOKEN_VAULT_ADDRESS",
    "CROSS_CHAIN_SYNC_ADDRESS",
    "SIGNAL_SERVICE_ADDRESS",
)


def load_chain_config(layer: str) -> ChainConfig:
    names = tuple(f"{layer}_{suffix}" for suffix in _LAYER_FIELDS)
    values = require_env_vars(names)
    chain_id_name = f"{layer}_CHAIN_ID"
    return ChainConfig(
        chain_id=parse_int_value(chain_id_name, values[chain_id_name]),
        name=values[f"{layer}_CHAIN_NAME"],
        rpc_url=values[f"{layer}_RPC_URL"],
        explorer_url=optional_env_var(f"{layer}_EXPLORER_URL"),
        contracts=ChainContracts(
            bridge_address=values[f"{layer}_BRIDGE_ADDRESS"],
            token_vault_address=values[f"{layer}_TOKEN_VAULT_ADDRESS"],
            cross_chain_sync_address=values[f"{layer}_CROSS_CHAIN_SYNC_ADDRESS"],
            signal_service_address=values[f"{layer}_SIGNAL_SERVICE_ADDRESS"],
        ),
    )


def _supported_layers() -> tuple[str, ...]:
    raw = optional_env_var("SUPPORTED_CHAIN_LAYERS")
    if raw is None:
        return DEFAULT_SUPPORTED_LAYERS
    layers = tuple(part.strip().upper() for part in raw.split(",") if part.strip())
    if not layers:
        raise ConfigurationError("SUPPORTED_CHAIN_LAYERS must name at least one layer")
    return layers


def get_chain_registry(
    *,
    required_layers: Sequence[str] = REQUIRED_LAYERS,
    optional_layers: Sequence[str] = OPTIONAL_LAYERS,
) -> ChainRegistry:
    chains_by_layer: dict[str, ChainConfig] = {
        layer: load_chain_config(layer) for layer in required_layers
    }
    for layer in optional_layers:
        if optional_env_var(f"{layer}_CHAIN_ID") is not None:
            chains_by_layer[layer] = load_chain_config(layer)

    supported: list[int] = []
    for layer in _supported_layers():
        chain = chains_by_layer.get(layer)
        if chain is None:
            raise ConfigurationError(f"Supported layer {layer} is not configured")
        supported.append(chain.chain_id)

    return ChainRegistry.from_chains(chains_by_layer.values(), supported=supported)
