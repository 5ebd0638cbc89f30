"""Tests for the HTTP client factory and the store factory."""

import logging

import httpx
import pytest

from contactform.api.client import build_headers, create_http_client
from contactform.api.executor import ApiExecutor
from contactform.config import Settings
from contactform.contacts.factory import build_contact_store
from contactform.contacts.store import ContactStore
from contactform.shared.notifications import RecordingNotifier


class TestCreateHttpClient:
    def test_base_url_and_timeout(self) -> None:
        client = create_http_client(
            Settings(api_base_url="https://cms.example.com/", request_timeout_seconds=12)
        )

        assert str(client.base_url) == "https://cms.example.com/api/"
        assert client.timeout.read == 12

    def test_headers_without_token(self) -> None:
        headers = build_headers(Settings(api_token=""))

        assert headers["Accept"] == "application/json"
        assert "Authorization" not in headers

    @pytest.mark.asyncio
    async def test_bearer_token_sent(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        client = create_http_client(
            Settings(api_token="secret-token"),
            transport=httpx.MockTransport(handler),
        )
        async with client:
            await client.get("/contacts")

        assert seen[0].headers["Authorization"] == "Bearer secret-token"

    @pytest.mark.asyncio
    async def test_redirect_followed_by_executor_calls(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/api/contacts":
                return httpx.Response(301, headers={"Location": "/api/contacts/"})
            return httpx.Response(200, json={"data": []})

        client = create_http_client(Settings(), transport=httpx.MockTransport(handler))
        executor = ApiExecutor(client, notifier=RecordingNotifier())

        async with client:
            result = await executor.get("/contacts")

        assert result == {"data": []}
        assert executor.error is None

    @pytest.mark.asyncio
    async def test_unauthorized_logged_in_development(self, caplog: pytest.LogCaptureFixture) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(401, json={}))
        client = create_http_client(Settings(app_env="dev"), transport=transport)

        with caplog.at_level(logging.WARNING, logger="contactform.api.client"):
            async with client:
                response = await client.get("/contacts")

        assert response.status_code == 401
        assert [r.getMessage() for r in caplog.records] == ["Unauthorized access"]

    @pytest.mark.asyncio
    async def test_unauthorized_silent_in_production(self, caplog: pytest.LogCaptureFixture) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(401, json={}))
        client = create_http_client(Settings(app_env="prod", debug=False), transport=transport)

        with caplog.at_level(logging.WARNING, logger="contactform.api.client"):
            async with client:
                await client.get("/contacts")

        assert caplog.records == []


class TestBuildContactStore:
    def test_wires_store(self) -> None:
        notifier = RecordingNotifier()

        store = build_contact_store(Settings(default_page_size=10), notifier=notifier)

        assert isinstance(store, ContactStore)
        assert store.pagination.page_size == 10
        assert store.contacts == []
        assert store.loading is False
