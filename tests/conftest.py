"""
Shared test configuration and fixtures.
"""

import httpx
import pytest

from exchangerate import Exchange, ExchangeRateTransport, Settings

TEST_BASE_URL = "https://api.exchangerate.test"


class FakeAPI:
    """Stands in for exchangerate.host behind an httpx.MockTransport."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.payload = {"success": True}
        self.status_code = 200
        self.content: bytes | None = None

    def respond(self, payload=None, status_code=200, content=None):
        self.payload = payload
        self.status_code = status_code
        self.content = content

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_params(self) -> dict[str, str]:
        return dict(self.last_request.url.params)


@pytest.fixture
def settings():
    return Settings(BASE_URL=TEST_BASE_URL, ACCESS_KEY="", TIMEOUT=5)


@pytest.fixture
def fake_api():
    return FakeAPI()


@pytest.fixture
async def transport(settings, fake_api):
    client = httpx.AsyncClient(transport=httpx.MockTransport(fake_api))
    yield ExchangeRateTransport(settings=settings, client=client)
    await client.aclose()


@pytest.fixture
def exchange(transport):
    return Exchange("USD", transport=transport)
