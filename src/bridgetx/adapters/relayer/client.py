"""HTTP client for the relayer (bridge event indexer) API."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from bridgetx.adapters.http_resilience import ResilienceConfig, ResilientClient
from bridgetx.config.relayer import RelayerConfig, get_relayer_config

from .schema import BlockInfoResponse, EventsResponse

if TYPE_CHECKING:
    from collections.abc import Callable

log = getLogger(__name__)

MESSAGE_SENT_EVENT = "MessageSent"


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


class RelayerAPIError(RuntimeError):
    """Raised when the relayer cannot be reached or returns an unusable response."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True, slots=True)
class EventQuery:
    address: str
    page: int
    size: int
    chain_id: int | None = None
    event: str = MESSAGE_SENT_EVENT

    def to_params(self) -> httpx.QueryParams:
        params: dict[str, str | int] = {
            "address": self.address,
            "event": self.event,
            "page": self.page,
            "size": self.size,
        }
        if self.chain_id is not None:
            params["chainID"] = self.chain_id
        return httpx.QueryParams(params)


@dataclass(slots=True)
class RelayerClient:
    config: RelayerConfig = field(default_factory=get_relayer_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    async def fetch_events(self, query: EventQuery) -> EventsResponse:
        log.debug("Fetching events from relayer: %s", query)
        payload = await self._get_json("/events", params=query.to_params(), what="transactions")
        try:
            response = EventsResponse.model_validate(payload)
        except ValidationError as exc:
            raise RelayerAPIError("relayer returned malformed transactions payload") from exc
        log.debug(
            "Relayer returned %s events (page=%s, total=%s)",
            len(response.items),
            response.page,
            response.total,
        )
        return response

    async def fetch_block_info(self) -> BlockInfoResponse:
        payload = await self._get_json("/blockInfo", params=None, what="block info")
        try:
            return BlockInfoResponse.model_validate(payload)
        except ValidationError as exc:
            raise RelayerAPIError("relayer returned malformed block info payload") from exc

    async def _get_json(
        self,
        path: str,
        *,
        params: httpx.QueryParams | None,
        what: str,
    ) -> object:
        url = f"{self.config.base_url}{path}"
        try:
            async with self.client_factory(self.config.resilience) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as exc:
            log.error("Relayer returned HTTP %s for %s", exc.response.status_code, url)
            raise RelayerAPIError(
                f"failed to fetch {what} from relayer",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            log.error("Relayer request to %s failed: %s", url, exc)
            raise RelayerAPIError(f"failed to fetch {what} from relayer") from exc
        except ValueError as exc:
            raise RelayerAPIError(f"relayer returned malformed {what} payload") from exc
