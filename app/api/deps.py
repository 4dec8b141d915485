from __future__ import annotations

from functools import lru_cache

from app.application.use_cases.list_connectors import ListConnectorsUseCase
from app.infrastructure.clients.pendle_client import PendleClient
from app.infrastructure.connectors.static_catalog import StaticConnectorCatalog
from app.shared.config import get_settings


@lru_cache(maxsize=1)
def _get_connector_catalog() -> StaticConnectorCatalog:
    return StaticConnectorCatalog()


def get_list_connectors_use_case() -> ListConnectorsUseCase:
    return ListConnectorsUseCase(catalog_port=_get_connector_catalog())


def build_pendle_client(chain: str, network: str = "mainnet") -> PendleClient:
    settings = get_settings()
    return PendleClient.for_network(
        chain,
        network,
        timeout_seconds=settings.pendle_timeout_seconds,
        max_pages=settings.pendle_max_pages,
    )
