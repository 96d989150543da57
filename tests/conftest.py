import sys
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mailerlite import Client  # noqa: E402

API_KEY = "test-api-key"


def pytest_configure(config):
    # Register the asyncio marker so pytest doesn't warn when it's used.
    config.addinivalue_line(
        "markers", "asyncio: mark test to run in an asyncio event loop"
    )
    # Add custom markers for test organization
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Keep the developer's MailerLite environment out of the tests.

    Settings fall back to environment variables, so every variable the
    client reads is removed before each test.
    """
    for name in (
        "MAILERLITE_API_KEY",
        "MAILERLITE_BASE_URL",
        "MAILERLITE_USER_AGENT",
        "MAILERLITE_TIMEOUT",
        "MAILERLITE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest_asyncio.fixture
async def make_client():
    """Factory for clients whose transport is an ``httpx.MockTransport``.

    The handler receives each ``httpx.Request`` and returns the
    ``httpx.Response`` to hand back to the client.
    """
    http_clients = []

    def _make(handler, **kwargs):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        http_clients.append(http_client)
        kwargs.setdefault("http_client", http_client)
        return Client(API_KEY, **kwargs)

    yield _make

    for http_client in http_clients:
        await http_client.aclose()


@pytest.fixture
def recorder():
    """Handler that records requests and replies with a canned response."""

    class Recorder:
        def __init__(self):
            self.requests = []
            self.status_code = 200
            self.kwargs = {"json": {}}

        def reply(self, status_code=200, **kwargs):
            self.status_code = status_code
            self.kwargs = kwargs

        def __call__(self, request):
            self.requests.append(request)
            return httpx.Response(self.status_code, **self.kwargs)

        @property
        def last(self):
            return self.requests[-1]

    return Recorder()
