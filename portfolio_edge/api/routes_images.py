# File: portfolio_edge/api/routes_images.py

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse, Response, StreamingResponse

from portfolio_edge.api.deps import get_blob_store
from portfolio_edge.api.methods import ALL_METHODS
from portfolio_edge.services.image_service import (
    build_image_headers,
    fetch_image,
    image_key_from_scope,
)
from portfolio_edge.stores.ports import BlobStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["images"])


@router.api_route("/images/{image_key:path}", methods=ALL_METHODS, summary="Stream an image")
async def get_image(
    image_key: str,
    request: Request,
    store: BlobStore = Depends(get_blob_store),
) -> Response:
    # Key is everything after /images/ as sent, escapes and slashes included
    key = image_key_from_scope(request.scope)
    try:
        blob = await fetch_image(store, key)
        if blob is None:
            return PlainTextResponse("Image not found", status_code=status.HTTP_404_NOT_FOUND)

        # content-type travels in headers; StreamingResponse must not add its own.
        # Header encoding happens here, so bad stored metadata is caught too.
        return StreamingResponse(blob.body, headers=build_image_headers(blob))
    except Exception:
        logger.exception("Error fetching image", extra={"blob_key": key})
        return PlainTextResponse(
            "Error fetching image",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
