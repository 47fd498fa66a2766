"""Protocol definitions for the seams between apps, devices and HTTP.

- Transport: sends GET/POST requests to the device API
- AppRegistry: what a DisplayApp needs from the device that owns it

Both are structural, so tests can pass any object with the right methods.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from awtrix_control.app import DisplayApp


@runtime_checkable
class Transport(Protocol):
    """
    Sends requests to ``http://<host>/api/<path>`` and returns the raw body.

    Status codes are not interpreted: the body of any response that was
    received is returned as text.
    """

    def get(self, path: str) -> str:
        """Issue a GET request for ``path`` and return the response body."""
        ...

    def post(
        self,
        path: str,
        payload: Any = None,
        query_params: Mapping[str, str] | None = None,
    ) -> str:
        """
        Issue a POST request with ``payload`` serialized as JSON.

        Args:
            path: API path relative to ``/api/``
            payload: JSON-serializable body, or None for an empty body
            query_params: Query parameters, URL-encoded by the transport
        """
        ...


@runtime_checkable
class AppRegistry(Protocol):
    """
    The owner side of a DisplayApp.

    A device registers apps by name and pushes or deletes them remotely.
    """

    def add_app(self, app: "DisplayApp") -> "DisplayApp":
        """Register ``app`` under its name, replacing any previous entry."""
        ...

    def push_app(self, name_or_app: "str | DisplayApp") -> Any:
        """Send the registered app's payload to the device."""
        ...

    def delete_app(self, name_or_app: "str | DisplayApp") -> Any:
        """Delete the app remotely and drop it from the registry."""
        ...
