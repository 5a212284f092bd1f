#!/usr/bin/env python3
"""
Exception types raised while serving the cached file listing.
All of them end up as a 500 at the HTTP boundary.
"""


class FileCacheError(Exception):
    """Base class for file cache failures"""


class ConfigurationError(FileCacheError):
    """Mandatory configuration is missing"""


class StoreError(FileCacheError):
    """Reading or writing the Firestore cache document failed"""


class CredentialError(FileCacheError):
    """Could not acquire a Microsoft Graph access token"""


class UpstreamError(FileCacheError):
    """The Microsoft Graph listing call failed"""

    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code
