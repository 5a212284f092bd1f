#!/usr/bin/env python3
"""
Module for managing the file listing cache in Firestore
"""

import logging
from typing import Any, Dict, List, Optional

from google.api_core import exceptions as google_exceptions

from .errors import StoreError
from .models import CacheRecord, FileEntry

# Create logger for this module
logger = logging.getLogger(__name__)

CACHE_DOCUMENT_ID = 'files'
CACHE_TTL_MS = 3600000  # 1 hour


class FirestoreCacheStore:
    """
    Thin document store over one Firestore collection.

    SDK failures are re-raised as StoreError so the fetcher sees a single
    error type for cache problems.
    """

    def __init__(self, collection):
        self.collection = collection

    def get_document(self, key: str) -> Optional[Dict[str, Any]]:
        try:
            snapshot = self.collection.document(key).get()
        except google_exceptions.GoogleAPIError as e:
            raise StoreError(f"Failed to read cache document '{key}': {e}") from e

        if not snapshot.exists:
            return None
        return snapshot.to_dict()

    def set_document(self, key: str, value: Dict[str, Any]) -> None:
        try:
            self.collection.document(key).set(value)
        except google_exceptions.GoogleAPIError as e:
            raise StoreError(f"Failed to write cache document '{key}': {e}") from e


def get_cache_record(store) -> Optional[CacheRecord]:
    """
    Read the cached listing

    Args:
        store: Document store exposing get_document/set_document

    Returns:
        CacheRecord, or None if nothing has been cached yet
    """
    data = store.get_document(CACHE_DOCUMENT_ID)
    if data is None:
        logger.debug("[Cache] No cache document found")
        return None
    return CacheRecord.from_dict(data)


def get_valid_cache_record(store, now_ms: int) -> Optional[CacheRecord]:
    """Return the cached listing only if its expiry is still in the future."""
    record = get_cache_record(store)
    if record is None:
        return None

    if not record.is_valid(now_ms):
        logger.info(f"[Cache] Cache expired at {record.expiry} (now {now_ms})")
        return None

    return record


def save_cache_record(store, files: List[FileEntry], now_ms: int) -> CacheRecord:
    """
    Overwrite the cached listing with a fresh one-hour expiry

    Args:
        store: Document store exposing get_document/set_document
        files: Listing as returned by Graph, in order
        now_ms: Current time in milliseconds since the epoch

    Returns:
        The CacheRecord that was written
    """
    record = CacheRecord.from_entries(files, expiry=now_ms + CACHE_TTL_MS)
    store.set_document(CACHE_DOCUMENT_ID, record.to_dict())
    logger.info(f"[Cache] Stored {len(record.files)} file(s), expires at {record.expiry}")
    return record
