#!/usr/bin/env python3
"""
Cache-aside fetch of the OneDrive root listing.

Serves the Firestore copy while it is fresh and otherwise lists the root
folder through Microsoft Graph, rewriting the cache with a one-hour expiry.
"""

import logging
import time
from typing import Any, Callable, Dict, Optional

from .cache_manager import get_valid_cache_record, save_cache_record, FirestoreCacheStore
from .models import FileEntry
from .services.graph_service import FILE_LIST_FIELDS, build_graph_client, get_root_children_path

# Create logger for this module
logger = logging.getLogger(__name__)

SOURCE_CACHE = 'cache'
SOURCE_GRAPH = 'graph-api'


def current_time_ms() -> int:
    return int(time.time() * 1000)


class CachedFileListFetcher:
    """
    Args:
        store: Document store with get_document/set_document
        graph_client_factory: Returns a client exposing list_children(path, fields).
            Called only on a cache miss, so credential checks happen there.
        clock: Returns the current time in milliseconds since the epoch
    """

    def __init__(
        self,
        store,
        graph_client_factory: Callable[[], Any] = build_graph_client,
        clock: Callable[[], int] = current_time_ms
    ):
        self.store = store
        self.graph_client_factory = graph_client_factory
        self.clock = clock

    def fetch(self) -> Dict[str, Any]:
        """
        Return {'files': [...], 'source': 'cache' | 'graph-api'}

        Errors from the store, configuration, credentials or Graph propagate
        to the caller unchanged.
        """
        cached = get_valid_cache_record(self.store, self.clock())
        if cached is not None:
            logger.info(f"[FetchFiles] Serving {len(cached.files)} file(s) from cache")
            return {
                'files': cached.files,
                'source': SOURCE_CACHE
            }

        client = self.graph_client_factory()
        response = client.list_children(get_root_children_path(), FILE_LIST_FIELDS)
        files = [FileEntry.from_graph_item(item) for item in response['value']]
        logger.info(f"[FetchFiles] Fetched {len(files)} file(s) from Graph")

        record = save_cache_record(self.store, files, self.clock())

        return {
            'files': record.files,
            'source': SOURCE_GRAPH
        }


def get_file_list_fetcher() -> Optional[CachedFileListFetcher]:
    """
    Build a fetcher over the process-wide Firestore handle.

    Returns:
        None if Firestore failed to initialize
    """
    from . import db

    if not db.firestore_available or db.cache_collection is None:
        return None
    return CachedFileListFetcher(FirestoreCacheStore(db.cache_collection))
