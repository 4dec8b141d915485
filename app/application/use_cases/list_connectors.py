from __future__ import annotations

from app.application.ports.connector_catalog_port import ConnectorCatalogPort
from app.domain.entities.connector import Connector


class ListConnectorsUseCase:
    def __init__(self, *, catalog_port: ConnectorCatalogPort):
        self._catalog_port = catalog_port

    def execute(self) -> list[Connector]:
        return self._catalog_port.list_connectors()
