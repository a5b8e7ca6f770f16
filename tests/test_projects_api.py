# File: tests/test_projects_api.py

import json

from portfolio_edge.api.deps import get_record_store
from portfolio_edge.main import app
from portfolio_edge.stores.memory import InMemoryRecordStore


def put_project(store, project_id, **fields):
    store.put(f"project:{project_id}", json.dumps(fields))


def test_empty_store_returns_empty_array(client):
    resp = client.get("/api/projects")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.text == "[]"


def test_projects_sorted_newest_first(client, record_store):
    put_project(record_store, "a", name="Old", description="d", createdAt="2022-01-01T00:00:00Z")
    put_project(record_store, "b", name="New", description="d", createdAt="2024-06-01T12:00:00.000Z")
    put_project(record_store, "c", name="Mid", description="d", createdAt="2023-03-15")

    resp = client.get("/api/projects")
    assert resp.status_code == 200
    assert [p["name"] for p in resp.json()] == ["New", "Mid", "Old"]


def test_only_prefixed_keys_are_listed(client, record_store):
    put_project(record_store, "1", name="Listed", description="d", createdAt="2024-01-01")
    record_store.put("draft:1", json.dumps({"name": "Hidden", "description": "d", "createdAt": "2024-01-01"}))

    resp = client.get("/api/projects")
    assert [p["name"] for p in resp.json()] == ["Listed"]


def test_records_relayed_as_stored(client, record_store):
    put_project(
        record_store,
        "1",
        name="Site",
        description="Portfolio site",
        createdAt="2024-01-01T00:00:00Z",
        imageKey="site.png",
        tags=["python", "web"],
        url="https://example.com",
    )

    resp = client.get("/api/projects")
    assert resp.json() == [
        {
            "name": "Site",
            "description": "Portfolio site",
            "createdAt": "2024-01-01T00:00:00Z",
            "imageKey": "site.png",
            "tags": ["python", "web"],
            "url": "https://example.com",
        }
    ]


def test_absent_optional_fields_stay_absent(client, record_store):
    put_project(record_store, "1", name="Bare", description="d", createdAt="2024-01-01")

    project = client.get("/api/projects").json()[0]
    assert "tags" not in project
    assert "imageKey" not in project
    assert "image" not in project


def test_empty_values_are_skipped(client, record_store):
    put_project(record_store, "1", name="Kept", description="d", createdAt="2024-01-01")
    record_store.put("project:2", "")

    resp = client.get("/api/projects")
    assert resp.status_code == 200
    assert [p["name"] for p in resp.json()] == ["Kept"]


def test_malformed_record_returns_500(client, record_store):
    put_project(record_store, "1", name="Fine", description="d", createdAt="2024-01-01")
    record_store.put("project:2", "{not json")

    resp = client.get("/api/projects")
    assert resp.status_code == 500
    assert resp.text == "Error fetching projects"


def test_record_missing_required_field_returns_500(client, record_store):
    record_store.put("project:1", json.dumps({"name": "No date", "description": "d"}))

    resp = client.get("/api/projects")
    assert resp.status_code == 500
    assert resp.text == "Error fetching projects"


class BrokenListStore(InMemoryRecordStore):
    async def list(self, prefix, cursor=None, limit=1000):
        raise ConnectionError("kv unavailable")


def test_enumeration_error_returns_500_without_detail(client):
    app.dependency_overrides[get_record_store] = lambda: BrokenListStore()

    resp = client.get("/api/projects")
    assert resp.status_code == 500
    assert resp.text == "Error fetching projects"
    assert "kv unavailable" not in resp.text


def test_listing_follows_cursor_across_pages(client, record_store, monkeypatch):
    from portfolio_edge.core.config import get_settings

    monkeypatch.setattr(get_settings(), "record_list_page_size", 2)
    for i in range(5):
        put_project(record_store, str(i), name=f"P{i}", description="d", createdAt=f"2024-01-0{i + 1}")

    resp = client.get("/api/projects")
    assert resp.status_code == 200
    assert [p["name"] for p in resp.json()] == ["P4", "P3", "P2", "P1", "P0"]


class BrokenGetStore(InMemoryRecordStore):
    async def get(self, key):
        if key == "project:2":
            raise TimeoutError("kv read timed out")
        return await super().get(key)


def test_value_fetch_error_returns_500_without_detail(client):
    store = BrokenGetStore()
    put_project(store, "1", name="First", description="d", createdAt="2024-01-01")
    put_project(store, "2", name="Second", description="d", createdAt="2024-01-02")
    app.dependency_overrides[get_record_store] = lambda: store

    resp = client.get("/api/projects")
    assert resp.status_code == 500
    assert resp.text == "Error fetching projects"
    assert "timed out" not in resp.text
