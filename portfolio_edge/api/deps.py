# File: portfolio_edge/api/deps.py

from functools import lru_cache

from portfolio_edge.core.config import Settings, get_settings
from portfolio_edge.stores.ports import BlobStore, RecordStore


@lru_cache
def _record_store(backend: str) -> RecordStore:
    if backend == "memory":
        from portfolio_edge.stores.memory import InMemoryRecordStore

        return InMemoryRecordStore()

    from portfolio_edge.db.session import SessionLocal
    from portfolio_edge.stores.sql_records import SqlRecordStore

    return SqlRecordStore(SessionLocal)


@lru_cache
def _blob_store(backend: str, image_root: str) -> BlobStore:
    if backend == "memory":
        from portfolio_edge.stores.memory import InMemoryBlobStore

        return InMemoryBlobStore()

    from portfolio_edge.stores.fs_blobs import FilesystemBlobStore

    return FilesystemBlobStore(image_root)


def get_record_store() -> RecordStore:
    """
    FastAPI dependency returning the process-wide record store.

    Usage in route functions:
        store: RecordStore = Depends(get_record_store)
    """
    settings: Settings = get_settings()
    return _record_store(settings.record_store_backend)


def get_blob_store() -> BlobStore:
    """FastAPI dependency returning the process-wide blob store."""
    settings: Settings = get_settings()
    return _blob_store(settings.blob_store_backend, settings.image_root)
