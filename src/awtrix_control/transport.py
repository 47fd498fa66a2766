"""HTTP transport for the device JSON API."""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from awtrix_control.exceptions import wrap_transport_error

logger = logging.getLogger(__name__)


class HttpTransport:
    """
    Blocking HTTP client bound to one device.

    Requests go to ``http://<host>/api/<path>``. POST bodies are sent as
    JSON. Response status codes are not checked: the body of whatever the
    device answered is returned as text. Failures to exchange a request at
    all (refused connection, timeout) raise a DeviceError subclass.

    Example:
        ```python
        with HttpTransport("192.168.1.50") as transport:
            transport.post("notify", {"text": "Hello"})
            stats = transport.get("stats")
        ```
    """

    def __init__(self, host: str, timeout: float = 5.0, client: httpx.Client | None = None):
        """
        Initialize the transport.

        Args:
            host: Device IP address or hostname, optionally with a scheme
            timeout: Request timeout in seconds
            client: Pre-configured httpx client (a new one is created if None)
        """
        self.host = host
        self.timeout = timeout
        base = host if "://" in host else f"http://{host}"
        self.base_url = f"{base.rstrip('/')}/api/"
        self._client = client or httpx.Client(timeout=timeout)

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def url_for(self, path: str) -> str:
        """Return the absolute URL of an API path."""
        return self.base_url + path.lstrip("/")

    def get(self, path: str) -> str:
        """Issue a GET request and return the response body."""
        return self._request("GET", path)

    def post(
        self,
        path: str,
        payload: Any = None,
        query_params: Mapping[str, str] | None = None,
    ) -> str:
        """
        Issue a POST request with a JSON body and return the response body.

        Args:
            path: API path relative to ``/api/``
            payload: JSON-serializable body; None sends no body
            query_params: Query parameters appended to the URL
        """
        return self._request("POST", path, payload=payload, query_params=query_params)

    def _request(
        self,
        method: str,
        path: str,
        payload: Any = None,
        query_params: Mapping[str, str] | None = None,
    ) -> str:
        url = self.url_for(path)
        logger.debug(f"{method} {url} params={dict(query_params or {})} body={payload!r}")

        try:
            response = self._client.request(
                method,
                url,
                params=dict(query_params) if query_params else None,
                json=payload,
            )
        except httpx.HTTPError as e:
            logger.error(f"{method} {url} failed: {e}")
            raise wrap_transport_error(e, self.host, timeout=self.timeout) from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        return response.text
