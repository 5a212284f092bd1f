#!/usr/bin/env python3
"""
Microsoft Graph service: app-only token acquisition and the OneDrive
root folder listing
"""

import logging
from typing import Any, Dict, Iterable, Optional

import msal
import requests

from ..errors import ConfigurationError, CredentialError, UpstreamError
from ..lib.app_config import get_azure_config, get_graph_config

# Create logger for this module
logger = logging.getLogger(__name__)

GRAPH_DEFAULT_SCOPE = 'https://graph.microsoft.com/.default'
AUTHORITY_URL = 'https://login.microsoftonline.com/{tenant_id}'

FILE_LIST_FIELDS = (
    'id',
    'name',
    'size',
    'lastModifiedDateTime',
    '@microsoft.graph.downloadUrl',
)


class GraphCredentialProvider:
    """Acquires access tokens with the OAuth client credentials flow."""

    def __init__(self, tenant_id: str, client_id: str, client_secret: str):
        self.tenant_id = tenant_id
        self.client_id = client_id
        self.client_secret = client_secret
        self._app = None

    @classmethod
    def from_env(cls) -> 'GraphCredentialProvider':
        """
        Build a provider from AZURE_TENANT_ID / AZURE_CLIENT_ID / AZURE_CLIENT_SECRET

        Raises:
            ConfigurationError: if any of the three is unset
        """
        config = get_azure_config()
        if not config['tenant_id'] or not config['client_id'] or not config['client_secret']:
            raise ConfigurationError("Missing Azure AD credentials")
        return cls(config['tenant_id'], config['client_id'], config['client_secret'])

    def _get_app(self) -> msal.ConfidentialClientApplication:
        if self._app is None:
            try:
                self._app = msal.ConfidentialClientApplication(
                    self.client_id,
                    authority=AUTHORITY_URL.format(tenant_id=self.tenant_id),
                    client_credential=self.client_secret,
                )
            except ValueError as e:
                # msal validates the authority on construction
                raise CredentialError(f"Invalid Azure AD authority: {e}") from e
        return self._app

    def acquire_token(self, scope: str = GRAPH_DEFAULT_SCOPE) -> str:
        """
        Get an access token for scope

        Returns:
            The bearer token string

        Raises:
            CredentialError: if Azure AD does not return a token
        """
        app = self._get_app()
        try:
            result = app.acquire_token_for_client(scopes=[scope])
        except requests.exceptions.RequestException as e:
            raise CredentialError(f"Token request failed: {e}") from e

        if not isinstance(result, dict) or not result.get('access_token'):
            error = result.get('error', 'unknown_error') if isinstance(result, dict) else 'unknown_error'
            description = result.get('error_description', '') if isinstance(result, dict) else ''
            logger.error(f"[Graph] Token acquisition failed: {error} {description}")
            raise CredentialError(f"Failed to acquire access token: {error}: {description}".rstrip(': '))

        logger.debug("[Graph] Access token acquired")
        return result['access_token']


class GraphClient:
    """Minimal Microsoft Graph REST client over requests."""

    def __init__(
        self,
        credential_provider: GraphCredentialProvider,
        api_base: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        graph_config = get_graph_config()
        self.credential_provider = credential_provider
        self.api_base = (api_base or graph_config['api_base']).rstrip('/')
        self.timeout = timeout if timeout is not None else graph_config['timeout']
        self.session = session or requests.Session()

    def list_children(self, path: str, fields: Iterable[str]) -> Dict[str, Any]:
        """
        GET the children of a drive item

        Args:
            path: Graph path, e.g. '/me/drive/root/children'
            fields: Properties to request via $select

        Returns:
            Parsed JSON body ({'value': [...]})

        Raises:
            CredentialError: token acquisition failed
            UpstreamError: transport failure, non-2xx status or invalid body
        """
        token = self.credential_provider.acquire_token(GRAPH_DEFAULT_SCOPE)
        url = f"{self.api_base}{path}"
        headers = {
            'Authorization': f'Bearer {token}',
            'Accept': 'application/json'
        }
        params = {'$select': ','.join(fields)}

        logger.debug(f"[Graph] GET {url}")
        try:
            response = self.session.get(url, headers=headers, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise UpstreamError(f"Graph request failed: {e}") from e

        logger.debug(f"[Graph] Response status: {response.status_code}")
        if not response.ok:
            error_text = response.text[:500] if response.text else "No response body"
            logger.error(f"[Graph] Error response {response.status_code}: {error_text}")
            raise UpstreamError(
                f"Graph API returned {response.status_code}: {error_text}",
                status_code=response.status_code
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError(f"Graph API returned invalid JSON: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get('value'), list):
            raise UpstreamError("Graph API response has no 'value' list")

        return data


def build_graph_client() -> GraphClient:
    """Create a GraphClient from environment configuration."""
    return GraphClient(GraphCredentialProvider.from_env())


def get_root_children_path() -> str:
    return f"{get_graph_config()['drive_path']}/root/children"
