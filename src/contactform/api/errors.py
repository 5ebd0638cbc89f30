"""
Error message extraction.

Backend failures arrive in different shapes: a nested ``{"error": {"message"}}``
body, a flat ``{"message"}`` body, a bare transport exception. The extractors
below are tried in order and the first non-empty message wins.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

import httpx

from contactform.shared.exceptions import TransportError

DEFAULT_ERROR_MESSAGE = "An unexpected error occurred"

ErrorExtractor = Callable[[BaseException], Optional[str]]


def response_payload(response: httpx.Response) -> Any:
    """Decode a response body as JSON, or return None when it is not JSON."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def _payload_of(exc: BaseException) -> Any:
    if isinstance(exc, TransportError):
        return exc.payload
    if isinstance(exc, httpx.HTTPStatusError):
        return response_payload(exc.response)
    return None


def _as_message(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def nested_error_message(exc: BaseException) -> str | None:
    payload = _payload_of(exc)
    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        return _as_message(payload["error"].get("message"))
    return None


def payload_message(exc: BaseException) -> str | None:
    payload = _payload_of(exc)
    if isinstance(payload, dict):
        return _as_message(payload.get("message"))
    return None


def exception_message(exc: BaseException) -> str | None:
    return _as_message(str(exc))


EXTRACTORS: tuple[ErrorExtractor, ...] = (
    nested_error_message,
    payload_message,
    exception_message,
)


def extract_error_message(
    exc: BaseException,
    default: str = DEFAULT_ERROR_MESSAGE,
    extractors: tuple[ErrorExtractor, ...] = EXTRACTORS,
) -> str:
    """Return the first message any extractor finds, else ``default``."""
    for extractor in extractors:
        message = extractor(exc)
        if message:
            return message
    return default


def to_transport_error(exc: httpx.HTTPError) -> TransportError:
    """Convert an httpx failure into a TransportError with an extracted message."""
    status_code: int | None = None
    payload: Any = None
    if isinstance(exc, httpx.HTTPStatusError):
        status_code = exc.response.status_code
        payload = response_payload(exc.response)
    return TransportError(
        message=extract_error_message(exc),
        status_code=status_code,
        payload=payload,
    )
