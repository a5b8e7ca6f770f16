# File: portfolio_edge/stores/fs_blobs.py

"""
Blob store over a directory of image files.

A blob's key is its path relative to the root, e.g. ``covers/site.png``.
HTTP metadata comes from an optional JSON sidecar next to the file
(``covers/site.png.meta.json``); otherwise the content type is guessed
from the extension. The etag is the MD5 of the file content.
"""

import hashlib
import json
import logging
import mimetypes
from collections.abc import AsyncIterator, Iterator
from pathlib import Path
from typing import Optional, Tuple

from fastapi.concurrency import iterate_in_threadpool, run_in_threadpool

from portfolio_edge.core.errors import StoreError
from portfolio_edge.stores.ports import HTTP_METADATA_HEADERS, BlobHttpMetadata, StoredBlob

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024
SIDECAR_SUFFIX = ".meta.json"


def _read_chunks(path: Path) -> Iterator[bytes]:
    with open(path, "rb") as f:
        while True:
            chunk = f.read(CHUNK_SIZE)
            if not chunk:
                break
            yield chunk


def _md5_of(path: Path) -> str:
    digest = hashlib.md5()
    for chunk in _read_chunks(path):
        digest.update(chunk)
    return digest.hexdigest()


def load_sidecar_metadata(path: Path) -> Optional[BlobHttpMetadata]:
    """
    Load HTTP metadata from ``<file>.meta.json`` if it exists.

    Only the known metadata fields are read; anything else is ignored.
    """
    sidecar = path.with_name(path.name + SIDECAR_SUFFIX)
    if not sidecar.is_file():
        return None
    with open(sidecar, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Sidecar {sidecar} must hold a JSON object")
    fields = {}
    for attr in HTTP_METADATA_HEADERS:
        value = data.get(attr)
        if not value:
            continue
        # Header values must be latin-1 text
        if not isinstance(value, str):
            raise ValueError(f"Sidecar {sidecar} field {attr!r} must be a string")
        try:
            value.encode("latin-1")
        except UnicodeEncodeError as exc:
            raise ValueError(f"Sidecar {sidecar} field {attr!r} is not latin-1") from exc
        fields[attr] = value
    return BlobHttpMetadata(**fields)


class FilesystemBlobStore:
    def __init__(self, root: Path | str) -> None:
        self.root = Path(root).resolve()

    def resolve(self, key: str) -> Optional[Path]:
        """Map a key to a file under the root; None if it would escape the root."""
        candidate = (self.root / key).resolve()
        if candidate == self.root or not candidate.is_relative_to(self.root):
            return None
        return candidate

    async def get(self, key: str) -> Optional[StoredBlob]:
        path = self.resolve(key)
        if path is None:
            logger.warning("Blob key resolves outside the store root", extra={"blob_key": key})
            return None
        if path.name.endswith(SIDECAR_SUFFIX):
            return None

        try:
            found = await run_in_threadpool(self._stat, path)
        except (OSError, ValueError) as exc:
            raise StoreError(f"Reading blob {key!r} failed: {exc}", key=key) from exc
        if found is None:
            return None

        size, etag, http_metadata = found
        return StoredBlob(
            key=key,
            size=size,
            etag=etag,
            body=self._stream(path, key),
            http_metadata=http_metadata,
        )

    def _stat(self, path: Path) -> Optional[Tuple[int, str, BlobHttpMetadata]]:
        if not path.is_file():
            return None
        http_metadata = load_sidecar_metadata(path)
        if http_metadata is None:
            http_metadata = BlobHttpMetadata(content_type=mimetypes.guess_type(path.name)[0])
        return path.stat().st_size, _md5_of(path), http_metadata

    async def _stream(self, path: Path, key: str) -> AsyncIterator[bytes]:
        try:
            async for chunk in iterate_in_threadpool(_read_chunks(path)):
                yield chunk
        except OSError:
            # Headers are already sent at this point; log and stop the body
            logger.exception("Streaming blob failed", extra={"blob_key": key})
            raise
