# File: portfolio_edge/api/routes_fallback.py

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from portfolio_edge.api.methods import ALL_METHODS

router = APIRouter()


# Must be registered last: it matches every path
@router.api_route("/{full_path:path}", methods=ALL_METHODS, include_in_schema=False)
async def not_found(full_path: str) -> PlainTextResponse:
    return PlainTextResponse("Not Found", status_code=status.HTTP_404_NOT_FOUND)
