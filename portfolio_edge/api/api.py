from fastapi import APIRouter

from portfolio_edge.api.routes_pages import router as pages_router
from portfolio_edge.api.routes_projects import router as projects_router
from portfolio_edge.api.routes_images import router as images_router
from portfolio_edge.api.routes_fallback import router as fallback_router


# Order matters: first match wins, fallback last
api_router = APIRouter()

api_router.include_router(pages_router)
api_router.include_router(projects_router)
api_router.include_router(images_router)
api_router.include_router(fallback_router)
