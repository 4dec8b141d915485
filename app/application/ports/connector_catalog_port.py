from __future__ import annotations

from typing import Protocol

from app.domain.entities.connector import Connector


class ConnectorCatalogPort(Protocol):
    def list_connectors(self) -> list[Connector]:
        ...
