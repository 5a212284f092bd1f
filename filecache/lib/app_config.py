#!/usr/bin/env python3
"""
Configuration access for the file cache service.

Values come from environment variables first (a .env file at the project
root is loaded by the app). Firebase settings may also live in the
'firebase' section of app_config.json, which is used as a fallback.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

# Create logger for this module
logger = logging.getLogger(__name__)

# Get the project root directory
PROJECT_ROOT = Path(__file__).parent.parent.parent
APP_CONFIG_PATH = PROJECT_ROOT / 'app_config.json'

DEFAULT_FIREBASE_API_KEY = 'mock-key-for-dev'
DEFAULT_GRAPH_API_BASE = 'https://graph.microsoft.com/v1.0'
DEFAULT_GRAPH_DRIVE_PATH = '/me/drive'
DEFAULT_GRAPH_TIMEOUT_SECONDS = 30

# env var -> key in the 'firebase' section of app_config.json
FIREBASE_ENV_KEYS = {
    'FIREBASE_API_KEY': 'apiKey',
    'FIREBASE_AUTH_DOMAIN': 'authDomain',
    'FIREBASE_PROJECT_ID': 'projectId',
    'FIREBASE_STORAGE_BUCKET': 'storageBucket',
    'FIREBASE_MESSAGING_SENDER_ID': 'messagingSenderId',
    'FIREBASE_APP_ID': 'appId',
}

REQUIRED_FIREBASE_KEYS = ('apiKey', 'projectId', 'appId')
REQUIRED_AZURE_ENV = ('AZURE_TENANT_ID', 'AZURE_CLIENT_ID', 'AZURE_CLIENT_SECRET')

# Cache for the loaded config file
_config_cache = None


def get_app_config():
    """
    Load and return app_config.json as a dict (read once per process).

    Returns:
        dict: Configuration dictionary, empty if the file is missing or invalid
    """
    global _config_cache

    if _config_cache is None:
        try:
            if APP_CONFIG_PATH.exists():
                with open(APP_CONFIG_PATH, 'r', encoding='utf-8') as f:
                    _config_cache = json.load(f)
                    logger.debug(f"Loaded app config from {APP_CONFIG_PATH}")
            else:
                logger.debug(f"app_config.json not found at {APP_CONFIG_PATH}")
                _config_cache = {}
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse app_config.json: {e}")
            _config_cache = {}
        except OSError as e:
            logger.warning(f"Could not load app_config.json: {e}")
            _config_cache = {}

    return _config_cache.copy() if _config_cache else {}


def get_firebase_config() -> Dict[str, Optional[str]]:
    """
    Build the Firebase configuration.

    Environment variables win over app_config.json. The project id also
    accepts GCP_PROJECT / PROJECT_ID, which Cloud Functions sets for us.
    An unset API key falls back to a development placeholder.
    """
    file_config = get_app_config().get('firebase', {})

    config = {}
    for env_name, key in FIREBASE_ENV_KEYS.items():
        config[key] = os.environ.get(env_name) or file_config.get(key)

    if not config['projectId']:
        config['projectId'] = os.environ.get('GCP_PROJECT') or os.environ.get('PROJECT_ID')
    if not config['apiKey']:
        config['apiKey'] = DEFAULT_FIREBASE_API_KEY

    return config


def get_missing_firebase_keys(config: Dict[str, Optional[str]]) -> list:
    """Return the mandatory Firebase keys that are unset in config."""
    return [key for key in REQUIRED_FIREBASE_KEYS if not config.get(key)]


def get_azure_config() -> Dict[str, Optional[str]]:
    """
    Get Azure AD app credentials from environment variables

    Returns:
        Dictionary with tenant_id, client_id and client_secret (any may be None)
    """
    return {
        'tenant_id': os.environ.get('AZURE_TENANT_ID') or None,
        'client_id': os.environ.get('AZURE_CLIENT_ID') or None,
        'client_secret': os.environ.get('AZURE_CLIENT_SECRET') or None,
    }


def get_missing_azure_env() -> list:
    return [name for name in REQUIRED_AZURE_ENV if not os.environ.get(name)]


def get_graph_config() -> Dict[str, object]:
    """
    Get Microsoft Graph endpoint settings

    Returns:
        Dictionary with api_base, drive_path and timeout (seconds)
    """
    raw_timeout = os.environ.get('GRAPH_TIMEOUT_SECONDS')
    try:
        timeout = float(raw_timeout) if raw_timeout else DEFAULT_GRAPH_TIMEOUT_SECONDS
    except ValueError:
        logger.warning(f"Invalid GRAPH_TIMEOUT_SECONDS '{raw_timeout}', using {DEFAULT_GRAPH_TIMEOUT_SECONDS}")
        timeout = DEFAULT_GRAPH_TIMEOUT_SECONDS

    return {
        'api_base': os.environ.get('GRAPH_API_BASE', DEFAULT_GRAPH_API_BASE).rstrip('/'),
        'drive_path': os.environ.get('GRAPH_DRIVE_PATH', DEFAULT_GRAPH_DRIVE_PATH).rstrip('/'),
        'timeout': timeout,
    }


def is_development() -> bool:
    """True when APP_ENV is 'development' (enables stack traces in error bodies)."""
    return os.environ.get('APP_ENV', '').lower() == 'development'
