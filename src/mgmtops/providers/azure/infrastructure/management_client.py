import json
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter

from mgmtops.infrastructure.exceptions import TransportError
from mgmtops.infrastructure.logging.logger import get_logger
from mgmtops.providers.azure.auth.context import AzureContext

logger = get_logger(__name__)

ASYNC_OPERATION_HEADER = "Azure-AsyncOperation"
LOCATION_HEADER = "Location"


class TransportResponse:
    """Raw status, headers and decoded body of one management call."""

    def __init__(self, status_code: int, headers: Optional[Dict[str, str]] = None, text: str = ""):
        self.status_code = status_code
        self.headers = {k.lower(): v for k, v in (headers or {}).items()}
        self.text = text or ""

    def header(self, name: str) -> Optional[str]:
        return self.headers.get(name.lower())

    @property
    def body(self) -> Dict[str, Any]:
        """JSON body, or an empty dict for empty and non-object bodies."""
        if not self.text.strip():
            return {}
        try:
            data = json.loads(self.text)
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    @property
    def operation_link(self) -> Optional[str]:
        return self.header(ASYNC_OPERATION_HEADER) or self.header(LOCATION_HEADER)

    def __repr__(self) -> str:
        return f"TransportResponse(status_code={self.status_code})"


class ManagementClient:
    """
    Thin resource-manager HTTP client.

    Each call is exactly one request: the session is mounted without retries
    and faults are raised as TransportError with the raw status and body.
    """

    def __init__(
        self,
        context: AzureContext,
        timeout: float = 60.0,
        session: Optional[requests.Session] = None,
    ):
        self._context = context
        self._timeout = timeout
        self._session = session or self._create_session()

    @staticmethod
    def _create_session() -> requests.Session:
        session = requests.Session()
        adapter = HTTPAdapter(max_retries=0)
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        return session

    def subscription_path(self, *segments: str) -> str:
        """Build /subscriptions/{id}/... from path segments."""
        tail = "/".join(segment.strip("/") for segment in segments if segment)
        return f"/subscriptions/{self._context.subscription_id}/{tail}"

    def send(
        self,
        method: str,
        path: str,
        api_version: str,
        body: Optional[Dict[str, Any]] = None,
    ) -> TransportResponse:
        """
        Issue one management request against the configured endpoint.

        Args:
            method: HTTP method
            path: Path relative to the endpoint, starting with /
            api_version: Resource provider API version
            body: JSON body, if any

        Returns:
            TransportResponse for a 2xx answer

        Raises:
            TransportError: For non-2xx answers and connection failures
        """
        url = f"{self._context.endpoint}{path}"
        return self._execute(method, url, params={"api-version": api_version}, body=body)

    def poll(self, link: str) -> TransportResponse:
        """GET an operation status link exactly as the service issued it."""
        return self._execute("GET", link)

    def _execute(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, str]] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> TransportResponse:
        headers = {
            "Authorization": f"Bearer {self._context.get_access_token()}",
            "Accept": "application/json",
        }
        logger.debug("%s %s", method, url)
        try:
            response = self._session.request(
                method,
                url,
                params=params,
                json=body,
                headers=headers,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            raise TransportError(None, str(e), f"Request to {url} failed: {str(e)}")

        if not 200 <= response.status_code < 300:
            logger.debug("%s %s answered %s", method, url, response.status_code)
            raise TransportError(response.status_code, response.text)

        return TransportResponse(response.status_code, dict(response.headers), response.text)
