from typing import Callable, Iterator

import httpx
import pytest

from bluebox import ApiSettings, BlueBoxClient

Handler = Callable[[httpx.Request], httpx.Response]

TEST_BASE_URL = "https://boxpanel.bluebox.net"
TEST_CUSTOMER_ID = "customer-123"
TEST_API_KEY = "secret-key"


class FixtureServer:
    """Routes requests by URL path to registered handlers, like a test mux."""

    def __init__(self) -> None:
        self.routes: dict[str, Handler] = {}
        self.requests: list[httpx.Request] = []

    def route(self, path: str, handler: Handler) -> None:
        self.routes[path] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get(request.url.path)
        if handler is None:
            return httpx.Response(404)
        return handler(request)


@pytest.fixture
def settings() -> ApiSettings:
    return ApiSettings(base_url=TEST_BASE_URL, _env_file=None)


@pytest.fixture
def server() -> FixtureServer:
    return FixtureServer()


@pytest.fixture
def http_client(server: FixtureServer) -> Iterator[httpx.Client]:
    client = httpx.Client(transport=httpx.MockTransport(server))
    yield client
    client.close()


@pytest.fixture
def client(settings: ApiSettings, http_client: httpx.Client) -> BlueBoxClient:
    return BlueBoxClient(
        TEST_CUSTOMER_ID,
        TEST_API_KEY,
        settings=settings,
        http_client=http_client,
    )
