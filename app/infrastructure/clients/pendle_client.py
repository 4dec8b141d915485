from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from app.domain.exceptions import (
    MarketPaginationLimitError,
    PendleApiError,
    UnknownNetworkError,
)
from app.shared.networks import get_network
from app.shared.protocols import PENDLE_CONFIG, ProtocolConfig


logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error"

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class MarketsEnvelope(BaseModel):
    markets: list[Any] | None = None


class PricesEnvelope(BaseModel):
    prices: dict[str, Any]


def _bool_param(value: bool) -> str:
    return "true" if value else "false"


async def _raise_for_status(response: httpx.Response) -> None:
    if response.is_success:
        return
    await response.aread()
    response.raise_for_status()


def _error_message(exc: httpx.HTTPError) -> str:
    if isinstance(exc, httpx.HTTPStatusError):
        try:
            body = exc.response.json()
        except ValueError:
            return UNKNOWN_ERROR
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return UNKNOWN_ERROR
    return str(exc) or UNKNOWN_ERROR


class PendleClient:
    """Async client for the Pendle v2 REST API.

    The client is bound to one chain id at a time. ``set_chain_id`` changes it for
    every later call on the instance, so share an instance only between callers
    that target the same chain, or pass ``chain_id=`` per call.
    """

    def __init__(
        self,
        chain_id: str,
        *,
        config: ProtocolConfig = PENDLE_CONFIG,
        timeout_seconds: float | None = None,
        max_pages: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if max_pages is not None and max_pages < 1:
            raise ValueError("max_pages must be a positive integer")
        self._base_url = config.base_url
        self._chain_id = str(chain_id)
        self._max_pages = max_pages

        client_kwargs: dict[str, Any] = {}
        if timeout_seconds is not None:
            client_kwargs["timeout"] = timeout_seconds
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers=DEFAULT_HEADERS,
            event_hooks={"response": [_raise_for_status]},
            **client_kwargs,
        )

    @classmethod
    def for_network(
        cls,
        chain: str,
        network: str = "mainnet",
        *,
        config: ProtocolConfig = PENDLE_CONFIG,
        **kwargs: Any,
    ) -> "PendleClient":
        if not config.supports(chain):
            raise UnknownNetworkError(
                f"Chain '{chain}' is not available for this protocol. "
                f"Available: {list(config.available_networks)}"
            )
        return cls(get_network(chain, network).chain_id, config=config, **kwargs)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def max_pages(self) -> int | None:
        return self._max_pages

    def set_chain_id(self, chain_id: str) -> None:
        self._chain_id = str(chain_id)

    def get_chain_id(self) -> str:
        return self._chain_id

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "PendleClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def fetch_all_active_markets(
        self,
        limit: int,
        is_active: bool,
        *,
        chain_id: str | None = None,
    ) -> list[Any]:
        # Stops only on an empty page. Without max_pages a server that never
        # returns one keeps this loop running.
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValueError("limit must be a positive integer")

        cid = self._resolve_chain_id(chain_id)
        markets: list[Any] = []
        skip = 0
        pages = 0
        while True:
            if self._max_pages is not None and pages >= self._max_pages:
                logger.warning(
                    "pendle_client: market_pagination_limit chain_id=%s max_pages=%s fetched=%s",
                    cid,
                    self._max_pages,
                    len(markets),
                )
                raise MarketPaginationLimitError(max_pages=self._max_pages, fetched=len(markets))

            payload = await self._get(
                f"/core/v1/{cid}/markets",
                params={
                    "limit": limit,
                    "skip": skip,
                    "select": "pro",
                    "is_active": _bool_param(is_active),
                },
            )
            page = self._parse(MarketsEnvelope, payload).markets
            if not page:
                break
            markets.extend(page)
            pages += 1
            skip += limit

        logger.info(
            "pendle_client: fetched_markets chain_id=%s pages=%s markets=%s is_active=%s",
            cid,
            pages,
            len(markets),
            is_active,
        )
        return markets

    async def fetch_swap_input_tokens(
        self,
        market_addr: str,
        *,
        chain_id: str | None = None,
    ) -> list[dict[str, Any]]:
        return await self._get(
            "/sdk/api/v1/rawTokens",
            params={
                "chainId": self._resolve_chain_id(chain_id),
                "marketAddr": market_addr,
                "tokenType": "swapExactInInputTokens",
            },
        )

    async def get_mint_sy_from_token_calldata(self, params: Mapping[str, Any]) -> dict[str, Any]:
        return await self._get("/sdk/api/v1/mintSyFromToken", params=dict(params))

    async def get_swap_exact_token_for_pt_calldata(
        self, params: Mapping[str, Any]
    ) -> dict[str, Any]:
        return await self._get("/sdk/api/v1/swapExactTokenForPt", params=dict(params))

    async def get_roll_over_pt_calldata(self, params: Mapping[str, Any]) -> dict[str, Any]:
        return await self._get("/sdk/api/v1/rollOverPt", params=dict(params))

    async def get_swap_exact_pt_for_token_calldata(
        self, params: Mapping[str, Any]
    ) -> dict[str, Any]:
        return await self._get("/sdk/api/v1/swapExactPtForToken", params=dict(params))

    async def get_market_rates(
        self,
        market_address: str,
        *,
        chain_id: str | None = None,
    ) -> dict[str, Any]:
        cid = self._resolve_chain_id(chain_id)
        return await self._get(f"/core/v1/sdk/{cid}/markets/{market_address}/swapping-prices")

    async def get_asset_lp_prices(
        self,
        addresses: Sequence[str],
        *,
        chain_id: str | None = None,
    ) -> dict[str, Any]:
        cid = self._resolve_chain_id(chain_id)
        payload = await self._get(
            f"/core/v1/{cid}/assets/prices",
            params={"addresses": ",".join(addresses)},
        )
        return self._parse(PricesEnvelope, payload).prices

    async def get_market_data(
        self,
        market_address: str,
        *,
        chain_id: str | None = None,
    ) -> dict[str, Any]:
        cid = self._resolve_chain_id(chain_id)
        return await self._get(
            f"/core/v1/{cid}/markets/{market_address}",
            params={"limit": 100, "select": "pro", "is_active": _bool_param(True)},
        )

    async def get_active_markets(self, *, chain_id: str | None = None) -> list[Any]:
        cid = self._resolve_chain_id(chain_id)
        payload = await self._get(f"/core/v1/{cid}/markets/active")
        return self._parse(MarketsEnvelope, payload).markets or []

    async def get_market_tokens(
        self,
        market_address: str,
        *,
        chain_id: str | None = None,
    ) -> dict[str, Any]:
        cid = self._resolve_chain_id(chain_id)
        return await self._get(f"/core/v1/sdk/{cid}/markets/{market_address}/tokens")

    def _resolve_chain_id(self, chain_id: str | None) -> str:
        return self._chain_id if chain_id is None else str(chain_id)

    async def _get(self, path: str, *, params: Mapping[str, Any] | None = None) -> Any:
        try:
            response = await self._client.get(path, params=params)
        except httpx.HTTPError as exc:
            message = _error_message(exc)
            status_code = (
                exc.response.status_code if isinstance(exc, httpx.HTTPStatusError) else None
            )
            logger.warning(
                "pendle_client: request_failed path=%s status=%s error=%s",
                path,
                status_code,
                message,
            )
            raise PendleApiError(message, status_code=status_code) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise PendleApiError(
                "invalid JSON in response body", status_code=response.status_code
            ) from exc

    @staticmethod
    def _parse(model: type[BaseModel], payload: Any):
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise PendleApiError(
                f"unexpected response shape for {model.__name__}: {exc.error_count()} error(s)"
            ) from exc
