from __future__ import annotations

from app.application.use_cases.list_connectors import ListConnectorsUseCase
from app.domain.entities.connector import Connector
from app.infrastructure.connectors.static_catalog import StaticConnectorCatalog


def test_static_catalog_lists_yield_connector():
    use_case = ListConnectorsUseCase(catalog_port=StaticConnectorCatalog())

    rows = use_case.execute()

    assert rows == [Connector(name="yield", protocols=("pendle",))]


def test_static_catalog_returns_a_fresh_list():
    catalog = StaticConnectorCatalog()

    first = catalog.list_connectors()
    first.clear()

    assert len(catalog.list_connectors()) == 1
