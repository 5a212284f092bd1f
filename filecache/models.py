#!/usr/bin/env python3
"""
Data shapes for the cached file listing
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Graph returns the pre-authenticated download link under this annotation
GRAPH_DOWNLOAD_URL_KEY = '@microsoft.graph.downloadUrl'


@dataclass(frozen=True)
class FileEntry:
    """
    One file in the OneDrive root folder.

    Optional fields that Graph did not return are left out of to_dict()
    instead of being written as null.
    """
    id: str
    name: str
    size: int
    last_modified_date_time: Optional[str] = None
    download_url: Optional[str] = None

    @classmethod
    def from_graph_item(cls, item: Dict[str, Any]) -> 'FileEntry':
        """Map a raw driveItem from the Graph children listing."""
        return cls(
            id=item['id'],
            name=item['name'],
            size=item.get('size', 0),
            last_modified_date_time=item.get('lastModifiedDateTime'),
            download_url=item.get(GRAPH_DOWNLOAD_URL_KEY),
        )

    def to_dict(self) -> Dict[str, Any]:
        entry = {
            'id': self.id,
            'name': self.name,
            'size': self.size,
        }
        if self.last_modified_date_time is not None:
            entry['lastModifiedDateTime'] = self.last_modified_date_time
        if self.download_url is not None:
            entry['downloadUrl'] = self.download_url
        return entry


@dataclass(frozen=True)
class CacheRecord:
    """
    The single cached listing, stored at cache/files.

    files holds the entries exactly as stored; only expiry (milliseconds
    since the epoch) decides whether the record can be served.
    """
    files: List[Dict[str, Any]] = field(default_factory=list)
    expiry: int = 0

    def is_valid(self, now_ms: int) -> bool:
        return self.expiry > now_ms

    @classmethod
    def from_entries(cls, entries: List[FileEntry], expiry: int) -> 'CacheRecord':
        return cls(files=[e.to_dict() for e in entries], expiry=expiry)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CacheRecord':
        """
        Build a record from a stored Firestore document.

        A missing or non-numeric expiry becomes 0 so the record reads as stale.
        """
        expiry = data.get('expiry')
        if isinstance(expiry, bool) or not isinstance(expiry, (int, float)):
            expiry = 0
        return cls(files=list(data.get('files') or []), expiry=int(expiry))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'files': self.files,
            'expiry': self.expiry,
        }
