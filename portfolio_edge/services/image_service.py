# File: portfolio_edge/services/image_service.py

"""
Image lookup and response headers for blobs served under /images/.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional
from urllib.parse import unquote

from portfolio_edge.core.config import get_settings
from portfolio_edge.stores.ports import BlobStore, StoredBlob

logger = logging.getLogger(__name__)

IMAGE_PREFIX = "/images/"


def image_key_from_path(path: str) -> str:
    """Strip the literal /images/ prefix; the remainder is the key as-is."""
    return path[len(IMAGE_PREFIX):] if path.startswith(IMAGE_PREFIX) else path


def image_key_from_scope(scope: Mapping[str, Any]) -> str:
    """
    Key from the request path exactly as sent, percent-escapes included.

    Uses the ASGI ``raw_path`` so an escaped ``?`` or ``#`` stays part of
    the key instead of being re-parsed as a query or fragment.
    """
    raw_path = scope.get("raw_path")
    if raw_path:
        path = raw_path.decode("latin-1").split("?", 1)[0]
    else:
        path = scope["path"]
    return image_key_from_path(path)


def _has_unsafe_parts(key: str) -> bool:
    if not key or key.startswith("/") or "\\" in key:
        return True
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in key):
        return True
    return any(segment in ("", ".", "..") for segment in key.split("/"))


def is_safe_image_key(key: str) -> bool:
    """
    Reject keys that could walk out of the image namespace.

    Empty keys, absolute keys, empty / "." / ".." segments, backslashes
    and control characters are refused, in the key as given and in its
    percent-decoded form.
    """
    return not (_has_unsafe_parts(key) or _has_unsafe_parts(unquote(key)))


async def fetch_image(store: BlobStore, key: str) -> Optional[StoredBlob]:
    """Return the blob for `key`, or None if the key is unsafe or absent."""
    if not is_safe_image_key(key):
        logger.warning("Refusing unsafe image key", extra={"blob_key": key})
        return None
    return await store.get(key)


def build_image_headers(blob: StoredBlob, cache_control: Optional[str] = None) -> Dict[str, str]:
    headers: Dict[str, str] = {}
    blob.write_http_metadata(headers)
    headers["etag"] = blob.http_etag
    headers["cache-control"] = cache_control or get_settings().image_cache_control
    return headers
