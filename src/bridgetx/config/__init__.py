"""Application configuration helpers."""

from __future__ import annotations

from .chains import get_chain_registry, load_chain_config
from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .relayer import RelayerConfig, get_relayer_config, normalize_base_url
from .web3 import Web3Config, get_web3_config

__all__ = [
    "ConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "RelayerConfig",
    "ResilienceConfig",
    "RetryPolicy",
    "Web3Config",
    "configure_logging",
    "get_chain_registry",
    "get_relayer_config",
    "get_web3_config",
    "load_chain_config",
    "normalize_base_url",
    "optional_env_var",
    "require_env_vars",
]
