"""HTTP API client for the portfolio backend."""

import logging
from typing import Dict, Optional, Any

import requests

from .config import get_config, AppConfig
from .core.exceptions import NotFound, RequestFailed
from .core.schemas import ResourceSchema

logger = logging.getLogger(__name__)


class ApiClient:
    """Synchronous HTTP client for the portfolio backend."""

    def __init__(self, config: Optional[AppConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or get_config()
        self.base_url = self.config.api_base_url.rstrip("/")
        self.timeout = self.config.api_timeout_sec
        self.session = session or requests.Session()
        self.session.headers.setdefault("Content-Type", "application/json")

    def _url(self, path: str) -> str:
        """Build full URL from path."""
        return f"{self.base_url}{path}"

    def _request(
        self,
        method: str,
        path: str,
        json: Optional[Dict] = None,
        **kwargs,
    ) -> Dict[str, Any]:
        """Make HTTP request and return JSON response."""
        url = self._url(path)
        try:
            response = self.session.request(
                method=method,
                url=url,
                json=json,
                timeout=self.timeout,
                **kwargs,
            )
            logger.info(f"{method} {path} -> {response.status_code}")
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code
            if status == 404:
                raise NotFound(_error_message(e.response)) from e
            raise RequestFailed(status, _error_message(e.response)) from e
        except requests.exceptions.RequestException as e:
            raise RequestFailed(0, f"Connection error: {e}") from e

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            logger.warning(f"{method} {path} returned a non-JSON body")
            return {}

    def _get(self, path: str) -> Dict[str, Any]:
        """HTTP GET request."""
        return self._request("GET", path)

    def _post(self, path: str, json: Optional[Dict] = None) -> Dict[str, Any]:
        """HTTP POST request."""
        return self._request("POST", path, json=json)

    def _put(self, path: str, json: Optional[Dict] = None) -> Dict[str, Any]:
        """HTTP PUT request."""
        return self._request("PUT", path, json=json)

    def _delete(self, path: str) -> Dict[str, Any]:
        """HTTP DELETE request."""
        return self._request("DELETE", path)

    # Health check
    def health_check(self) -> bool:
        """Check if the API is reachable."""
        try:
            response = self.session.get(self.base_url, timeout=self.timeout)
            return response.status_code < 500
        except requests.exceptions.RequestException:
            return False

    def resource(self, schema: ResourceSchema) -> "ResourceClient":
        """Get a client bound to one resource endpoint."""
        return ResourceClient(self, schema)


def _error_message(response: requests.Response) -> str:
    """Prefer the server-provided error message, fall back to the status."""
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        message = data.get("error") or data.get("detail") or data.get("message")
        if message:
            return str(message)
    return f"HTTP error! status: {response.status_code}"


class ResourceClient:
    """GET/POST/PUT/DELETE against a single singleton resource."""

    def __init__(self, api: ApiClient, schema: ResourceSchema):
        self.api = api
        self.schema = schema

    @property
    def path(self) -> str:
        return self.schema.path

    def get(self) -> Optional[Dict[str, Any]]:
        """Fetch the document. Returns None when it does not exist yet (404)."""
        try:
            return self.api._get(self.path)
        except NotFound:
            return None

    def create(self, body: Dict[str, Any]) -> Dict[str, Any]:
        """Create the document (POST)."""
        return self.api._post(self.path, json=body)

    def replace(self, body: Dict[str, Any]) -> Dict[str, Any]:
        """Replace the existing document (PUT)."""
        return self.api._put(self.path, json=body)

    def delete(self) -> None:
        """Remove the document (DELETE)."""
        self.api._delete(self.path)


# Global client instance
_client: Optional[ApiClient] = None


def get_client() -> ApiClient:
    """Get the global API client instance."""
    global _client
    if _client is None:
        _client = ApiClient()
    return _client


def set_client(client: ApiClient) -> None:
    """Set the global API client instance."""
    global _client
    _client = client

