from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import get_list_connectors_use_case
from app.api.schemas.connectors import ConnectorResponse, ConnectorsResponse
from app.application.use_cases.list_connectors import ListConnectorsUseCase

router = APIRouter(tags=["connectors"])


@router.get(
    "",
    response_model=ConnectorsResponse,
    description="Returns a list of connectors and their available protocols",
)
@router.get("/", response_model=ConnectorsResponse, include_in_schema=False)
async def list_connectors(
    use_case: ListConnectorsUseCase = Depends(get_list_connectors_use_case),
):
    rows = use_case.execute()
    return ConnectorsResponse(
        connectors=[
            ConnectorResponse(name=row.name, protocols=list(row.protocols)) for row in rows
        ]
    )
