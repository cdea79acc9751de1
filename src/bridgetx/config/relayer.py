"""Relayer (event indexer) configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import require_env_vars
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

RELAYER_TIMEOUT_SECONDS = 10.0


def normalize_base_url(base_url: str) -> str:
    """Strip a single trailing slash so path joins stay predictable."""

    return base_url.strip().removesuffix("/")


@dataclass(frozen=True, slots=True)
class RelayerConfig:
    """Holds relayer API configuration values."""

    base_url: str
    resilience: ResilienceConfig

    @classmethod
    def from_base_url(cls, base_url: str) -> RelayerConfig:
        normalized = normalize_base_url(base_url)
        return cls(base_url=normalized, resilience=_default_resilience(normalized))


def _default_resilience(base_url: str) -> ResilienceConfig:
    return ResilienceConfig(
        name="relayer",
        base_url=base_url,
        timeout_seconds=RELAYER_TIMEOUT_SECONDS,
        retry=RetryPolicy(total=3),
        ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
        default_headers={"Accept": "application/json"},
    )


def get_relayer_config(*, resilience: ResilienceConfig | None = None) -> RelayerConfig:
    values = require_env_vars(("RELAYER_API_URL",))
    base_url = normalize_base_url(values["RELAYER_API_URL"])
    return RelayerConfig(
        base_url=base_url,
        resilience=resilience or _default_resilience(base_url),
    )
