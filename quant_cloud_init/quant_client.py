"""
Quant Cloud API client.

A thin wrapper around a requests session covering the read-only endpoints
the init step needs. Every failure is raised as QuantApiError carrying the
HTTP status and the API's own message when the body has one.
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from .config import DEFAULT_BASE_URL, REQUEST_TIMEOUT_SECONDS
from .exceptions import QuantApiError
from .models import RegistryCredentials

logger = logging.getLogger(__name__)


class QuantClient:
    """Client for the Quant Cloud v3 API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: int = REQUEST_TIMEOUT_SECONDS,
    ):
        """Initialize the client.

        Args:
            api_key: Quant Cloud API key, sent as a bearer token
            base_url: API root
            session: Optional preconfigured session (used by tests)
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
        })

    def _get(self, *path: str) -> Any:
        url = "/".join([self.base_url] + [quote(part, safe="") for part in path])
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as err:
            raise QuantApiError(f"Request to Quant Cloud API failed: {type(err).__name__}") from err

        if not response.ok:
            api_message = _extract_message(response)
            raise QuantApiError(
                api_message or f"Quant Cloud API returned HTTP {response.status_code}",
                status=response.status_code,
                api_message=api_message,
            )

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as err:
            raise QuantApiError(
                "Quant Cloud API returned an invalid JSON response", status=response.status_code
            ) from err

    def list_applications(self, organization: str) -> List[Dict[str, Any]]:
        """List the applications of an organization."""
        data = self._get("organizations", organization, "applications")
        if isinstance(data, dict):
            data = data.get("data", [])
        return list(data or [])

    def get_registry_credentials(self, organization: str) -> Optional[RegistryCredentials]:
        """Fetch image registry login credentials.

        Returns:
            RegistryCredentials, or None if the response is missing any field
        """
        data = self._get("organizations", organization, "applications", "ecr-login")
        if not isinstance(data, dict):
            return None
        endpoint = data.get("endpoint")
        username = data.get("username")
        password = data.get("password")
        if not endpoint or not username or not password:
            return None
        return RegistryCredentials(endpoint=endpoint, username=username, password=password)

    def get_application(self, organization: str, application: str) -> Dict[str, Any]:
        return self._get("organizations", organization, "applications", application)

    def get_environment(self, organization: str, application: str, environment: str) -> Dict[str, Any]:
        return self._get("organizations", organization, "applications", application, "environments", environment)


def _extract_message(response: requests.Response) -> Optional[str]:
    """Return the 'message' field of an error body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return None
