#!/usr/bin/env python3
"""
Firestore connection for the file cache.

The client is created once at import time. Callers check
`firestore_available` (or `init_error` for the reason) before using `db`.
"""

import logging

import firebase_admin
from firebase_admin import firestore

from .errors import ConfigurationError
from .lib.app_config import get_firebase_config, get_missing_firebase_keys

# Create logger for this module
logger = logging.getLogger(__name__)

CACHE_COLLECTION = 'cache'

db = None
cache_collection = None
firestore_available = False
init_error = None


def initialize_firestore():
    """
    Initialize Firebase Admin and return a Firestore client.

    Raises:
        ConfigurationError: if apiKey, projectId or appId is not configured
    """
    config = get_firebase_config()
    missing = get_missing_firebase_keys(config)
    if missing:
        raise ConfigurationError(f"Missing required Firebase config: {', '.join(missing)}")

    options = {'projectId': config['projectId']}
    if config.get('storageBucket'):
        options['storageBucket'] = config['storageBucket']

    if not firebase_admin._apps:
        firebase_admin.initialize_app(options=options)

    return firestore.client()


try:
    db = initialize_firestore()
    cache_collection = db.collection(CACHE_COLLECTION)
    firestore_available = True
    logger.info("[Firestore] Client initialized")
except Exception as e:
    init_error = str(e)
    logger.error(f"[Firestore] Initialization failed: {e}", exc_info=True)
