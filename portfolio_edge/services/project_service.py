# File: portfolio_edge/services/project_service.py

"""
Project listing: read every record under the project prefix, newest first.
"""

import logging
from datetime import datetime
from typing import List, Optional, Tuple

from portfolio_edge.schemas.project import ProjectRecord
from portfolio_edge.stores.ports import RecordStore

logger = logging.getLogger(__name__)


async def list_keys(store: RecordStore, prefix: str, page_size: int = 1000) -> List[str]:
    """
    Enumerate every key under `prefix`, following the store's cursor
    until the listing is complete.
    """
    names: List[str] = []
    cursor: Optional[str] = None
    while True:
        page = await store.list(prefix, cursor=cursor, limit=page_size)
        names.extend(k.name for k in page.keys)
        if page.list_complete or not page.cursor:
            break
        cursor = page.cursor
    return names


def newest_first_key(record: ProjectRecord) -> Tuple[bool, float]:
    # Unparseable createdAt sorts after every valid timestamp
    created: Optional[datetime] = record.created_at_timestamp()
    if created is None:
        return (False, 0.0)
    return (True, created.timestamp())


def sort_newest_first(records: List[ProjectRecord]) -> List[ProjectRecord]:
    """Sort by createdAt descending; ties keep their listing order."""
    return sorted(records, key=newest_first_key, reverse=True)


async def list_projects(
    store: RecordStore,
    prefix: str = "project:",
    page_size: int = 1000,
) -> List[ProjectRecord]:
    """
    Load and decode all project records.

    Keys whose value is missing are skipped (deleted between list and get).
    Store errors and decode errors propagate to the caller.
    """
    keys = await list_keys(store, prefix, page_size)

    projects: List[ProjectRecord] = []
    for key in keys:
        value = await store.get(key)
        if not value:
            logger.debug("Skipping empty record", extra={"record_key": key})
            continue
        projects.append(ProjectRecord.decode(value, key=key))

    logger.info("Loaded %d project records", len(projects), extra={"prefix": prefix})
    return sort_newest_first(projects)
