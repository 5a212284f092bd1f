#!/usr/bin/env python3
"""
File listing route.
Any method is accepted; nothing is read from the request.
"""

import logging
import traceback

from flask import Blueprint, jsonify

from ..errors import UpstreamError
from ..fetcher import get_file_list_fetcher
from ..lib.app_config import is_development

# Create logger for this module
logger = logging.getLogger(__name__)

bp = Blueprint('files', __name__)

ALL_METHODS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']


def handle_fetch_files():
    """
    Serve the cached OneDrive listing, refreshing it from Graph when stale.

    Returns:
        (response, status) tuple: 200 with {files, source}, or 500 with
        {error, details} (plus stack when APP_ENV=development)
    """
    fetcher = get_file_list_fetcher()
    if fetcher is None:
        logger.error("[FetchFiles] Firestore not initialized, refusing request")
        return jsonify({
            'error': 'Server configuration error',
            'details': 'Firebase not initialized'
        }), 500

    try:
        return jsonify(fetcher.fetch()), 200
    except Exception as e:
        if isinstance(e, UpstreamError) and e.status_code is not None:
            logger.error(f"[FetchFiles] Graph responded with HTTP {e.status_code}")
        logger.error(f"[FetchFiles] Error fetching files: {e}", exc_info=True)
        body = {
            'error': 'Failed to fetch files',
            'details': str(e)
        }
        if is_development():
            body['stack'] = traceback.format_exc()
        return jsonify(body), 500


@bp.route('/api/fetchFiles', methods=ALL_METHODS)
def fetch_files():
    return handle_fetch_files()
