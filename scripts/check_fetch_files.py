#!/usr/bin/env python3
"""
Run the file listing handler locally against real Firestore and Graph

Usage:
    python scripts/check_fetch_files.py [--twice]

Examples:
    python scripts/check_fetch_files.py          # One call, prints the listing
    python scripts/check_fetch_files.py --twice  # Second call should come from cache
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Configure logging to show INFO level messages
logging.basicConfig(
    level=logging.INFO,
    format='%(message)s'  # Simple format for script output
)


def run_once(client, attempt):
    """Call the endpoint once and print a short summary"""
    print("=" * 80)
    print(f"Call #{attempt}: /api/fetchFiles")
    print("=" * 80)

    response = client.get('/api/fetchFiles')
    body = response.get_json()

    if response.status_code != 200:
        print(f"\n✗ Status {response.status_code}")
        print(json.dumps(body, indent=2))
        return False

    print(f"\n✓ Status 200, source={body['source']}, {len(body['files'])} file(s)")
    for entry in body['files']:
        print(f"  - {entry['name']} ({entry['size']} bytes, modified {entry['lastModifiedDateTime']})")
    return True


def main():
    parser = argparse.ArgumentParser(description='Run the file listing handler locally')
    parser.add_argument('--twice', action='store_true', help='Call twice to exercise the cache')
    args = parser.parse_args()

    # Importing the app loads .env before the Firestore client is created
    from filecache.app import app
    from filecache import db
    if not db.firestore_available:
        print("\n⚠ Firestore is not available.")
        print(f"   Reason: {db.init_error}")
        print("   Set FIREBASE_PROJECT_ID / FIREBASE_APP_ID in .env and")
        print("   GOOGLE_APPLICATION_CREDENTIALS or start the Firestore emulator.")

    client = app.test_client()

    calls = 2 if args.twice else 1
    ok = all([run_once(client, i + 1) for i in range(calls)])
    return 0 if ok else 1


if __name__ == '__main__':
    sys.exit(main())
