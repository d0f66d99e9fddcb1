"""GET / — mock transfer engine list endpoint."""

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from joblist.schemas.query import ListQuery
from joblist.services.mock.engine_service import MockEngineService

router = APIRouter()


def get_engine_service(request: Request) -> MockEngineService:
    return request.app.state.engine_service


@router.get("/", status_code=202)
async def list_command(
    request_type: str = Query(..., alias="Type"),
    command: str = Query(...),
    service: MockEngineService = Depends(get_engine_service),
):
    if request_type != "list":
        raise HTTPException(status_code=400, detail=f"Unsupported request type '{request_type}'")
    try:
        query = ListQuery.from_command(command)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid list command: {e}")

    report = service.answer(query)
    return JSONResponse(status_code=202, content=report.model_dump(mode="json", by_alias=True))
