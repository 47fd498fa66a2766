"""Pytest fixtures for tests."""

import json
import logging
from pathlib import Path
from tempfile import TemporaryDirectory

import httpx
import pytest

from awtrix_control.device import Device
from awtrix_control.transport import HttpTransport

FIXTURES_DIR = Path(__file__).parent / "fixtures"

HOST = "192.168.1.50"


class FakeDisplay:
    """
    Stand-in for the device HTTP API.

    Answers GET requests from the JSON files in ``tests/fixtures`` and POST
    requests with ``OK``. Every request is recorded.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responses: dict[str, str] = {
            path.stem: path.read_text() for path in FIXTURES_DIR.glob("*.json")
        }
        self.fail_with: type[httpx.HTTPError] | None = None
        self.fail_on: str | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api/")

        if self.fail_with is not None and self.fail_on in (None, path):
            raise self.fail_with("simulated failure", request=request)

        if request.method == "GET":
            return httpx.Response(200, text=self.responses.get(path, "{}"))
        return httpx.Response(200, text="OK")

    @property
    def calls(self) -> list[tuple[str, str, dict, object]]:
        """Recorded requests as (method, path, query params, decoded JSON body)."""
        return [
            (
                request.method,
                request.url.path.removeprefix("/api/"),
                dict(request.url.params),
                json.loads(request.content) if request.content else None,
            )
            for request in self.requests
        ]

    @property
    def hosts(self) -> list[str]:
        return [request.url.host for request in self.requests]

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fake_display():
    """Fake device API recording every request."""
    return FakeDisplay()


@pytest.fixture
def transport(fake_display):
    """HttpTransport wired to the fake display."""
    with HttpTransport(HOST, client=fake_display.client()) as transport:
        yield transport


@pytest.fixture
def device(transport):
    """Device talking to the fake display."""
    return Device(HOST, transport=transport)


@pytest.fixture
def make_device(fake_display):
    """Factory for extra devices sharing the fake display."""
    def _make(host: str) -> Device:
        return Device(host, transport=HttpTransport(host, client=fake_display.client()))

    return _make


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Remove handlers the CLI installs on the package logger."""
    yield
    package_logger = logging.getLogger("awtrix_control")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
