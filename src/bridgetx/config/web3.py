"""Settings for the web3 chain-state adapter."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, parse_float_value
from .errors import ConfigurationError

DEFAULT_WEB3_REQUEST_TIMEOUT = 10.0


@dataclass(frozen=True, slots=True)
class Web3Config:
    request_timeout: float = DEFAULT_WEB3_REQUEST_TIMEOUT


def get_web3_config() -> Web3Config:
    raw_timeout = optional_env_var("WEB3_REQUEST_TIMEOUT")
    if raw_timeout is None:
        return Web3Config()
    timeout = parse_float_value("WEB3_REQUEST_TIMEOUT", raw_timeout)
    if timeout <= 0:
        raise ConfigurationError("WEB3_REQUEST_TIMEOUT must be positive")
    return Web3Config(request_timeout=timeout)
