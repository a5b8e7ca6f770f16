# File: portfolio_edge/api/routes_projects.py

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from portfolio_edge.api.deps import get_record_store
from portfolio_edge.api.methods import ALL_METHODS
from portfolio_edge.core.config import get_settings
from portfolio_edge.services.project_service import list_projects
from portfolio_edge.stores.ports import RecordStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["projects"])


@router.api_route("/api/projects", methods=ALL_METHODS, summary="List projects, newest first")
async def get_projects(store: RecordStore = Depends(get_record_store)) -> Response:
    """
    Return every project record as a JSON array.

    Any store or decode failure becomes a plain 500; the cause is logged.
    """
    settings = get_settings()
    try:
        projects = await list_projects(
            store,
            prefix=settings.project_key_prefix,
            page_size=settings.record_list_page_size,
        )
    except Exception:
        logger.exception(
            "Error fetching projects",
            extra={"prefix": settings.project_key_prefix},
        )
        return PlainTextResponse(
            "Error fetching projects",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return JSONResponse([p.encode() for p in projects])
