#!/usr/bin/env python3
"""
Flask app serving the OneDrive file listing from a Firestore cache
"""

import time
from datetime import datetime, timezone
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask, jsonify

from .lib.logging_config import setup_logging

# Get the directory where this file is located
BASE_DIR = Path(__file__).parent
PROJECT_ROOT = BASE_DIR.parent

# Load environment variables from .env file before the Firestore client is built
load_dotenv(PROJECT_ROOT / '.env')
setup_logging()

from .cache_manager import CACHE_DOCUMENT_ID
from .lib.app_config import get_missing_azure_env
from .routes.files_routes import bp as files_bp

app = Flask(__name__)


@app.route('/health', methods=['GET'])
def health_check():
    """
    Report Firestore availability and whether Graph credentials are configured.
    Returns 503 when Firestore is down; missing Graph credentials only degrade.
    """
    from . import db

    overall_status = "healthy"
    http_status = 200
    services = {}

    # Database health check
    db_status = "healthy"
    db_response_time_ms = None
    db_error = None

    if db.firestore_available and db.cache_collection is not None:
        try:
            start_time = time.time()
            db.cache_collection.document(CACHE_DOCUMENT_ID).get()
            db_response_time_ms = round((time.time() - start_time) * 1000, 2)
        except Exception as e:
            db_status = "unhealthy"
            db_error = str(e)
    else:
        db_status = "unhealthy"
        db_error = db.init_error or "Firestore connection not available"

    services['database'] = {
        'status': db_status,
        'available': db_status == "healthy",
        'response_time_ms': db_response_time_ms,
        'error': db_error
    }

    # Graph credentials check (no network call)
    missing_azure = get_missing_azure_env()
    services['graph'] = {
        'status': "degraded" if missing_azure else "healthy",
        'credentials_configured': not missing_azure,
        'error': f"Missing: {', '.join(missing_azure)}" if missing_azure else None
    }

    if db_status == "unhealthy":
        overall_status = "unhealthy"
        http_status = 503
    elif missing_azure:
        # Cache hits still work without credentials
        overall_status = "degraded"

    return jsonify({
        'status': overall_status,
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'services': services
    }), http_status


app.register_blueprint(files_bp)
