# File: portfolio_edge/stores/ports.py

"""
Interfaces for the two external stores the API reads from.

Record store: key-value, prefix-scannable, values are serialized text.
Blob store: binary objects keyed by name, with HTTP metadata.
"""

from collections.abc import AsyncIterator, MutableMapping
from dataclasses import dataclass, field
from typing import Optional, Protocol


@dataclass(frozen=True)
class KeyDescriptor:
    name: str


@dataclass
class KeyListPage:
    """One page of a prefix listing. Pass `cursor` back until `list_complete`."""

    keys: list[KeyDescriptor] = field(default_factory=list)
    list_complete: bool = True
    cursor: Optional[str] = None


class RecordStore(Protocol):
    async def list(
        self, prefix: str, cursor: Optional[str] = None, limit: int = 1000
    ) -> KeyListPage:
        ...

    async def get(self, key: str) -> Optional[str]:
        """Return the stored text, or None when the key is absent."""
        ...


# HTTP header name for each BlobHttpMetadata field
HTTP_METADATA_HEADERS = {
    "content_type": "content-type",
    "content_language": "content-language",
    "content_disposition": "content-disposition",
    "content_encoding": "content-encoding",
    "cache_control": "cache-control",
}


@dataclass
class BlobHttpMetadata:
    content_type: Optional[str] = None
    content_language: Optional[str] = None
    content_disposition: Optional[str] = None
    content_encoding: Optional[str] = None
    cache_control: Optional[str] = None


@dataclass
class StoredBlob:
    key: str
    size: int
    etag: str
    body: AsyncIterator[bytes]
    http_metadata: BlobHttpMetadata = field(default_factory=BlobHttpMetadata)

    @property
    def http_etag(self) -> str:
        """The etag quoted for use in an HTTP header."""
        return f'"{self.etag}"'

    def write_http_metadata(self, headers: MutableMapping[str, str]) -> None:
        for attr, header in HTTP_METADATA_HEADERS.items():
            value = getattr(self.http_metadata, attr)
            if value:
                headers[header] = value


class BlobStore(Protocol):
    async def get(self, key: str) -> Optional[StoredBlob]:
        """Return the blob, or None when the key is absent."""
        ...
