"""Shared fixtures: in-memory stores wired into the app through dependency overrides."""

import os

# Keep tests off the default SQLite file and image directory
os.environ.setdefault("RECORD_STORE_BACKEND", "memory")
os.environ.setdefault("BLOB_STORE_BACKEND", "memory")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from fastapi.testclient import TestClient

from portfolio_edge.api.deps import get_blob_store, get_record_store
from portfolio_edge.main import app
from portfolio_edge.stores.memory import InMemoryBlobStore, InMemoryRecordStore


@pytest.fixture
def record_store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def blob_store() -> InMemoryBlobStore:
    return InMemoryBlobStore()


@pytest.fixture
def client(record_store, blob_store):
    app.dependency_overrides[get_record_store] = lambda: record_store
    app.dependency_overrides[get_blob_store] = lambda: blob_store
    yield TestClient(app)
    app.dependency_overrides.clear()
