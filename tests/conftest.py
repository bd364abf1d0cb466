"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Callable, Generator
from typing import Any

import httpx
import pytest
import pytest_asyncio

from catstronomy.config import Settings
from catstronomy.graphql.context import RequestContext, build_data_sources

BASE_URL = "https://catstronomy.test/"

TRACKS = [
    {
        "id": "c_0",
        "title": "Cat-stronomy, an introduction",
        "authorId": "cat-1",
        "thumbnail": "https://res.cloudinary.com/dety84pbu/image/upload/v1598465568/nebula_cat_djkt9r.jpg",
        "topic": "Cat-stronomy",
        "length": 1916,
        "modulesCount": 10,
        "description": "Navigate the depths of the cat-galaxy",
        "numberOfViews": 163,
    },
    {
        "id": "c_1",
        "title": "Kitty space suit design",
        "authorId": "cat-1",
        "thumbnail": "https://res.cloudinary.com/dety84pbu/image/upload/v1598474100/famous_cats_epuqcr.jpg",
        "length": 2377,
        "modulesCount": 14,
        "numberOfViews": 2,
    },
]

AUTHOR = {
    "id": "cat-1",
    "name": "Grumpy Cat",
    "photo": "https://images.unsplash.com/photo-1593627010886-d34828365da7",
}

MODULES = [
    {"id": "l_0", "title": "Exploring Time and Space", "length": 4},
    {"id": "l_1", "title": "Building a Cat Shaped Ship", "length": 7},
]


class RemoteStub:
    """Fake track catalogue served through ``httpx.MockTransport``.

    Routes map a URL path to a JSON payload (served with 200), an exception
    to raise, or a callable returning an ``httpx.Response``. Unknown paths
    answer 404. Every outgoing request is recorded.
    """

    def __init__(self, routes: dict[str, Any] | None = None):
        self.routes: dict[str, Any] = dict(routes or {})
        self.calls: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": "not found"})
        if isinstance(route, Exception):
            raise route
        if callable(route):
            return route(request)
        return httpx.Response(200, json=route)

    def count(self, path: str) -> int:
        return sum(1 for call in self.calls if call.url.path == path)

    @staticmethod
    def reply(status_code: int, **kwargs: Any) -> Callable[[httpx.Request], httpx.Response]:
        """Route that answers with a fixed status and body."""
        return lambda request: httpx.Response(status_code, **kwargs)


@pytest.fixture
def remote() -> RemoteStub:
    return RemoteStub(
        {
            "/tracks": TRACKS,
            "/track/c_0": TRACKS[0],
            "/track/c_0/modules": MODULES,
            "/author/cat-1": AUTHOR,
            "/module/l_0": MODULES[0],
        }
    )


@pytest_asyncio.fixture
async def http_client(remote: RemoteStub) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(remote)) as client:
        yield client


@pytest.fixture
def test_settings() -> Settings:
    return Settings(tracks_api_url=BASE_URL)


@pytest.fixture
def make_context(
    http_client: httpx.AsyncClient, test_settings: Settings
) -> Callable[[], RequestContext]:
    """Build a fresh request context, as the server does for each request."""

    def factory() -> RequestContext:
        return RequestContext(data_sources=build_data_sources(http_client, test_settings))

    return factory


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
