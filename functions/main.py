"""
Cloud Functions entry point for the file cache service
Uses functions-framework to run the Flask app as a Cloud Function
"""

import sys
from pathlib import Path

# Deployed from project root; make the filecache package importable
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from filecache.app import app

# functions-framework detects the Flask app and serves it over WSGI
filecache_app = app
