"""
Pytest configuration and fixtures.

HTTP traffic never leaves the process: every client is bound to an
`httpx.MockTransport` backed by `FakeBackend`.
"""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from contactform.api.client import create_http_client
from contactform.api.executor import ApiExecutor
from contactform.config import Settings
from contactform.contacts.store import ContactStore
from contactform.shared.notifications import RecordingNotifier

Route = tuple[int, Any] | Exception | Callable[[httpx.Request], httpx.Response]


class FakeBackend:
    """Route table keyed by (method, path) that records every request."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Route] = {}
        self.requests: list[httpx.Request] = []

    def on(self, method: str, path: str, route: Route) -> None:
        self.routes[(method.upper(), path)] = route

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"error": {"message": "Not Found"}})
        if isinstance(route, Exception):
            raise route
        if callable(route):
            return route(request)
        status_code, body = route
        if isinstance(body, (dict, list)):
            return httpx.Response(status_code, json=body)
        return httpx.Response(status_code, text=body or "")

    def json_body(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        app_env="dev",
        debug=False,
        log_level="DEBUG",
        api_base_url="http://cms.example.com",
        api_prefix="/api",
        api_token="",
        request_timeout_seconds=5,
        default_page_size=25,
    )


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def http_client(test_settings: Settings, backend: FakeBackend) -> httpx.AsyncClient:
    return create_http_client(test_settings, transport=httpx.MockTransport(backend))


@pytest.fixture
def executor(http_client: httpx.AsyncClient, notifier: RecordingNotifier) -> ApiExecutor:
    return ApiExecutor(http_client, notifier=notifier)


@pytest.fixture
def store(
    executor: ApiExecutor,
    notifier: RecordingNotifier,
    test_settings: Settings,
) -> ContactStore:
    return ContactStore(executor, notifier=notifier, settings=test_settings)


def contact_payload(
    id: int,
    name: str = "Jane Doe",
    email: str = "jane@example.com",
    message: str = "Hello there, this is a message.",
    created_at: str = "2024-01-15T10:30:00.000Z",
) -> dict[str, Any]:
    return {
        "id": id,
        "name": name,
        "email": email,
        "message": message,
        "createdAt": created_at,
    }
