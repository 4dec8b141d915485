from __future__ import annotations

from pydantic import BaseModel, Field


class ConnectorResponse(BaseModel):
    name: str = Field(..., description="Connector identifier.")
    protocols: list[str] = Field(..., description="Protocols reachable through the connector.")


class ConnectorsResponse(BaseModel):
    connectors: list[ConnectorResponse]
