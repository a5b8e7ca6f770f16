# File: portfolio_edge/stores/memory.py

"""
Dict-backed stores for tests and local runs.
"""

import hashlib
import mimetypes
from collections.abc import AsyncIterator
from typing import Dict, Optional, Tuple

from portfolio_edge.stores.ports import (
    BlobHttpMetadata,
    KeyDescriptor,
    KeyListPage,
    StoredBlob,
)


class InMemoryRecordStore:
    """Record store over a dict. Keys are listed in sorted order."""

    def __init__(self, data: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(data or {})

    def put(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    async def list(
        self, prefix: str, cursor: Optional[str] = None, limit: int = 1000
    ) -> KeyListPage:
        names = sorted(k for k in self._data if k.startswith(prefix))
        if cursor is not None:
            # Cursor is the last key of the previous page
            names = [k for k in names if k > cursor]

        page = names[:limit]
        complete = len(names) <= limit
        return KeyListPage(
            keys=[KeyDescriptor(name=k) for k in page],
            list_complete=complete,
            cursor=None if complete else page[-1],
        )

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)


async def _single_chunk(data: bytes) -> AsyncIterator[bytes]:
    yield data


class InMemoryBlobStore:
    """Blob store over a dict of key -> (bytes, etag, metadata)."""

    def __init__(self) -> None:
        self._data: Dict[str, Tuple[bytes, str, BlobHttpMetadata]] = {}

    def put(
        self,
        key: str,
        data: bytes,
        content_type: Optional[str] = None,
        etag: Optional[str] = None,
        **metadata: Optional[str],
    ) -> None:
        if content_type is None:
            content_type = mimetypes.guess_type(key)[0]
        if etag is None:
            etag = hashlib.md5(data).hexdigest()
        self._data[key] = (data, etag, BlobHttpMetadata(content_type=content_type, **metadata))

    async def get(self, key: str) -> Optional[StoredBlob]:
        entry = self._data.get(key)
        if entry is None:
            return None
        data, etag, http_metadata = entry
        return StoredBlob(
            key=key,
            size=len(data),
            etag=etag,
            body=_single_chunk(data),
            http_metadata=http_metadata,
        )
