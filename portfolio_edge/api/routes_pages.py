# File: portfolio_edge/api/routes_pages.py

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from portfolio_edge.api.methods import ALL_METHODS
from portfolio_edge.core.config import get_settings
from portfolio_edge.services.page_shell import render_shell

router = APIRouter(tags=["pages"])


@router.api_route("/", methods=ALL_METHODS, response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """Serve the portfolio page shell."""
    return HTMLResponse(render_shell(get_settings().site_title))
