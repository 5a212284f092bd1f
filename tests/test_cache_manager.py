"""Tests for the Firestore-backed cache store."""

from unittest.mock import MagicMock

import pytest
from google.api_core import exceptions as google_exceptions

from filecache.cache_manager import (
    CACHE_DOCUMENT_ID,
    CACHE_TTL_MS,
    FirestoreCacheStore,
    get_cache_record,
    get_valid_cache_record,
    save_cache_record,
)
from filecache.errors import StoreError
from filecache.models import FileEntry

from .conftest import NOW_MS, FakeStore


def _collection_with_snapshot(exists, data=None):
    snapshot = MagicMock()
    snapshot.exists = exists
    snapshot.to_dict.return_value = data
    collection = MagicMock()
    collection.document.return_value.get.return_value = snapshot
    return collection


def test_get_document_returns_none_when_missing():
    collection = _collection_with_snapshot(exists=False)
    store = FirestoreCacheStore(collection)

    assert store.get_document('files') is None
    collection.document.assert_called_once_with('files')


def test_get_document_returns_data():
    data = {'files': [], 'expiry': 1}
    store = FirestoreCacheStore(_collection_with_snapshot(exists=True, data=data))

    assert store.get_document('files') == data


def test_set_document_overwrites():
    collection = MagicMock()
    store = FirestoreCacheStore(collection)

    store.set_document('files', {'files': [], 'expiry': 2})

    collection.document.assert_called_once_with('files')
    collection.document.return_value.set.assert_called_once_with({'files': [], 'expiry': 2})


def test_read_failure_becomes_store_error():
    collection = MagicMock()
    collection.document.return_value.get.side_effect = google_exceptions.ServiceUnavailable("down")

    with pytest.raises(StoreError, match="Failed to read cache document 'files'"):
        FirestoreCacheStore(collection).get_document('files')


def test_write_failure_becomes_store_error():
    collection = MagicMock()
    collection.document.return_value.set.side_effect = google_exceptions.PermissionDenied("nope")

    with pytest.raises(StoreError, match="Failed to write cache document 'files'"):
        FirestoreCacheStore(collection).set_document('files', {})


def test_save_cache_record_sets_one_hour_expiry():
    store = FakeStore()
    files = [FileEntry(id='1', name='a.txt', last_modified_date_time='t', size=10)]

    record = save_cache_record(store, files, NOW_MS)

    assert record.expiry == NOW_MS + CACHE_TTL_MS
    assert store.writes == [(CACHE_DOCUMENT_ID, {
        'files': [{'id': '1', 'name': 'a.txt', 'lastModifiedDateTime': 't', 'size': 10}],
        'expiry': NOW_MS + 3600000,
    })]


def test_get_valid_cache_record_filters_stale():
    store = FakeStore({CACHE_DOCUMENT_ID: {'files': [], 'expiry': NOW_MS - 1}})

    assert get_cache_record(store) is not None
    assert get_valid_cache_record(store, NOW_MS) is None


def test_get_valid_cache_record_empty_store():
    assert get_valid_cache_record(FakeStore(), NOW_MS) is None
