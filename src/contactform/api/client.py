"""
HTTP client factory for the content-management backend.
"""

from __future__ import annotations

import logging

import httpx

from contactform.config import Settings, get_settings

logger = logging.getLogger(__name__)


def _log_unauthorized(settings: Settings):
    async def hook(response: httpx.Response) -> None:
        if response.status_code == 401 and settings.is_development:
            logger.warning(
                "Unauthorized access",
                extra={
                    "method": response.request.method,
                    "url": str(response.request.url),
                },
            )

    return hook


def build_headers(settings: Settings) -> dict[str, str]:
    headers = {
        "Accept": "application/json",
        "User-Agent": settings.app_name,
    }
    if settings.api_token:
        headers["Authorization"] = f"Bearer {settings.api_token}"
    return headers


def create_http_client(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an async client bound to the backend API URL.

    Args:
        settings: Application settings; loaded from the environment when omitted.
        transport: Optional transport override (e.g. ``httpx.MockTransport``).

    Returns:
        Configured ``httpx.AsyncClient``. The caller owns it and must close it.
    """
    settings = settings or get_settings()
    return httpx.AsyncClient(
        base_url=settings.api_url,
        headers=build_headers(settings),
        timeout=httpx.Timeout(settings.request_timeout_seconds),
        follow_redirects=True,
        event_hooks={"response": [_log_unauthorized(settings)]},
        transport=transport,
    )
