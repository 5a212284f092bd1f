"""
Single-route Cloud Function for the file listing
Deploy with --entry-point=fetch_files
"""

import sys
from pathlib import Path

# Add parent directory to path
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from functions_framework import http

# Importing the app module loads .env, sets up logging and the Firestore client
import filecache.app  # noqa: F401
from filecache.routes.files_routes import handle_fetch_files


@http
def fetch_files(request):
    """Cloud Function serving the cached OneDrive listing"""
    return handle_fetch_files()
