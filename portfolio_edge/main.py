# portfolio_edge/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from portfolio_edge.api.api import api_router
from portfolio_edge.core.config import get_settings
from portfolio_edge.core.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.record_store_backend == "sql":
        from portfolio_edge.db.init_db import init_db

        init_db()
    logger.info("Portfolio API started")
    yield
    logger.info("Portfolio API shutting down")


async def catch_unhandled_errors(request: Request, call_next):
    """Last line of defence: any fault escaping a route becomes a bare 500."""
    try:
        return await call_next(request)
    except Exception:
        logger.exception(
            "Unhandled error during dispatch",
            extra={"path": request.url.path},
        )
        return PlainTextResponse(
            "Internal Server Error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def create_application() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
        # No docs routes: every path outside the routing table is a 404
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # ---------- ERRORS ----------
    app.middleware("http")(catch_unhandled_errors)

    # ---------- ROUTERS ----------
    app.include_router(api_router)

    return app


app = create_application()
