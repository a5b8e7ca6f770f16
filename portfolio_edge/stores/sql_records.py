# File: portfolio_edge/stores/sql_records.py

"""
Record store backed by the `kv_entries` table.

Keys are scanned by prefix in key order and paged with a keyset cursor
(the last key of the previous page). SQLAlchemy calls are synchronous,
so each read runs in the threadpool.
"""

import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from portfolio_edge.core.errors import StoreError
from portfolio_edge.models.kv_entry import KvEntry
from portfolio_edge.stores.ports import KeyDescriptor, KeyListPage

logger = logging.getLogger(__name__)


class SqlRecordStore:
    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    async def list(
        self, prefix: str, cursor: Optional[str] = None, limit: int = 1000
    ) -> KeyListPage:
        return await run_in_threadpool(self._list_page, prefix, cursor, limit)

    async def get(self, key: str) -> Optional[str]:
        return await run_in_threadpool(self._get_value, key)

    def _list_page(self, prefix: str, cursor: Optional[str], limit: int) -> KeyListPage:
        stmt = (
            select(KvEntry.key)
            .where(func.substr(KvEntry.key, 1, len(prefix)) == prefix)
            .order_by(KvEntry.key)
            # One extra row tells us whether another page exists
            .limit(limit + 1)
        )
        if cursor is not None:
            stmt = stmt.where(KvEntry.key > cursor)

        db: Session = self._session_factory()
        try:
            names = list(db.scalars(stmt))
        except SQLAlchemyError as exc:
            raise StoreError(f"Listing keys under {prefix!r} failed: {exc}", key=prefix) from exc
        finally:
            db.close()

        complete = len(names) <= limit
        names = names[:limit]
        logger.debug("Listed %d keys under %r", len(names), prefix, extra={"prefix": prefix})
        return KeyListPage(
            keys=[KeyDescriptor(name=name) for name in names],
            list_complete=complete,
            cursor=None if complete else names[-1],
        )

    def _get_value(self, key: str) -> Optional[str]:
        db: Session = self._session_factory()
        try:
            entry = db.get(KvEntry, key)
        except SQLAlchemyError as exc:
            raise StoreError(f"Reading record {key!r} failed: {exc}", key=key) from exc
        finally:
            db.close()

        if entry is None:
            return None
        return entry.value
