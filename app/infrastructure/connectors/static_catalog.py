from __future__ import annotations

from app.domain.entities.connector import Connector


CONNECTORS: tuple[Connector, ...] = (
    Connector(name="yield", protocols=("pendle",)),
)


class StaticConnectorCatalog:
    def __init__(self, connectors: tuple[Connector, ...] = CONNECTORS):
        self._connectors = connectors

    def list_connectors(self) -> list[Connector]:
        return list(self._connectors)
