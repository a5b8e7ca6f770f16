# File: tests/test_sql_record_store.py

import asyncio
import json

import pytest
from sqlalchemy.exc import OperationalError

from portfolio_edge.core.errors import StoreError
from portfolio_edge.db.init_db import init_db
from portfolio_edge.db.session import build_engine, build_session_factory
from portfolio_edge.models.kv_entry import KvEntry
from portfolio_edge.services.project_service import list_projects
from portfolio_edge.stores.sql_records import SqlRecordStore


@pytest.fixture
def session_factory(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'records.db'}")
    init_db(engine)
    yield build_session_factory(engine)
    engine.dispose()


def seed(session_factory, entries):
    db = session_factory()
    try:
        db.add_all([KvEntry(key=k, value=v) for k, v in entries.items()])
        db.commit()
    finally:
        db.close()


def test_get_returns_value_or_none(session_factory):
    seed(session_factory, {"project:1": '{"a": 1}'})
    store = SqlRecordStore(session_factory)

    assert asyncio.run(store.get("project:1")) == '{"a": 1}'
    assert asyncio.run(store.get("project:404")) is None


def test_prefix_scan_is_exact_and_paged(session_factory):
    seed(session_factory, {
        "project:1": "{}",
        "project:2": "{}",
        "project:3": "{}",
        "Project:4": "{}",
        "projects": "{}",
        "draft:1": "{}",
    })
    store = SqlRecordStore(session_factory)

    first = asyncio.run(store.list("project:", limit=2))
    assert [k.name for k in first.keys] == ["project:1", "project:2"]
    assert first.list_complete is False
    assert first.cursor == "project:2"

    second = asyncio.run(store.list("project:", cursor=first.cursor, limit=2))
    assert [k.name for k in second.keys] == ["project:3"]
    assert second.list_complete is True


def test_prefix_with_like_wildcards_matches_literally(session_factory):
    seed(session_factory, {"a_%:1": "{}", "abc:1": "{}"})
    store = SqlRecordStore(session_factory)

    page = asyncio.run(store.list("a_%:"))
    assert [k.name for k in page.keys] == ["a_%:1"]


def test_list_projects_over_sql(session_factory):
    seed(session_factory, {
        "project:1": json.dumps({"name": "Old", "description": "d", "createdAt": "2021-01-01"}),
        "project:2": json.dumps({"name": "New", "description": "d", "createdAt": "2023-01-01"}),
        "project:3": None,
    })
    store = SqlRecordStore(session_factory)

    projects = asyncio.run(list_projects(store, page_size=1))
    assert [p.name for p in projects] == ["New", "Old"]


def test_driver_errors_become_store_errors(tmp_path):
    # No tables created
    engine = build_engine(f"sqlite:///{tmp_path / 'empty.db'}")
    store = SqlRecordStore(build_session_factory(engine))

    with pytest.raises(StoreError) as exc_info:
        asyncio.run(store.list("project:"))
    assert isinstance(exc_info.value.__cause__, OperationalError)
    engine.dispose()
