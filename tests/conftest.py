"""Test fixtures: in-memory cache store, fake Graph client and Flask test client."""

import pytest

from filecache.app import app as flask_app
from filecache.fetcher import CachedFileListFetcher

NOW_MS = 1_700_000_000_000

AZURE_ENV = {
    'AZURE_TENANT_ID': 'tenant-123',
    'AZURE_CLIENT_ID': 'client-456',
    'AZURE_CLIENT_SECRET': 'secret-789',
}


class FakeStore:
    """Dict-backed stand-in for FirestoreCacheStore."""

    def __init__(self, documents=None):
        self.documents = dict(documents or {})
        self.reads = 0
        self.writes = []

    def get_document(self, key):
        self.reads += 1
        return self.documents.get(key)

    def set_document(self, key, value):
        self.writes.append((key, value))
        self.documents[key] = value


class FakeGraphClient:
    def __init__(self, items=None, error=None):
        self.items = items or []
        self.error = error
        self.calls = []

    def list_children(self, path, fields):
        self.calls.append((path, tuple(fields)))
        if self.error is not None:
            raise self.error
        return {'value': list(self.items)}


@pytest.fixture
def azure_env(monkeypatch):
    for name, value in AZURE_ENV.items():
        monkeypatch.setenv(name, value)
    return AZURE_ENV


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def graph_client():
    return FakeGraphClient(items=[
        {
            'id': '1',
            'name': 'a.txt',
            'size': 10,
            'lastModifiedDateTime': '2024-01-01T00:00:00Z',
        },
    ])


@pytest.fixture
def fetcher(store, graph_client):
    return CachedFileListFetcher(
        store,
        graph_client_factory=lambda: graph_client,
        clock=lambda: NOW_MS
    )


@pytest.fixture
def client():
    flask_app.config['TESTING'] = True
    with flask_app.test_client() as c:
        yield c


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer settings from leaking into tests."""
    for name in ('GRAPH_DRIVE_PATH', 'GRAPH_API_BASE', 'GRAPH_TIMEOUT_SECONDS', 'APP_ENV'):
        monkeypatch.delenv(name, raising=False)
