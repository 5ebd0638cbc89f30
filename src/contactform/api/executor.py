"""
Request executor.

Wraps outbound HTTP calls with busy/error state, error-message extraction,
user notifications and optional response transformation, and orchestrates
batches of calls either sequentially or concurrently.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

import httpx

from contactform.api.errors import (
    extract_error_message,
    response_payload,
    to_transport_error,
)
from contactform.api.query import compact, flatten_params
from contactform.shared.exceptions import BatchPartialFailure
from contactform.shared.notifications import LoggingNotifier, Notifier

logger = logging.getLogger(__name__)

Operation = Callable[[], Awaitable[httpx.Response]]
BatchRequest = Callable[[], Awaitable[Any]]

BATCH_ERROR_MESSAGE = "Batch request failed"


@dataclass(frozen=True)
class CallOptions:
    """Per-call behaviour of `ApiExecutor.make_api_call`.

    Attributes:
        show_toast: Emit notifications for this call.
        success_message: Notified on success, only when `show_toast` is set.
        error_message: Replaces the extracted message in the error notification.
        transform_response: Applied to the decoded body before it is returned.
    """

    show_toast: bool = True
    success_message: str | None = None
    error_message: str | None = None
    transform_response: Callable[[Any], Any] | None = None


@dataclass(frozen=True)
class BatchOptions:
    """Behaviour of `ApiExecutor.batch`."""

    concurrent: bool = False
    show_toast: bool = True
    fail_fast: bool = True


@dataclass
class CallState:
    """Observable state of the executor's current call."""

    loading: bool = False
    error: str | None = None


@dataclass(frozen=True)
class FailedRequest:
    """Placeholder left in sequential best-effort batch results."""

    error: BaseException


class ApiExecutor:
    """Generic request wrapper bound to one HTTP client.

    One executor is typically owned by one consumer (e.g. a store). Its
    `loading`/`error` state is shared by every call made through it, so two
    overlapping calls race on it and the last one to finish wins.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        notifier: Notifier | None = None,
    ) -> None:
        self._client = client
        self._notifier = notifier or LoggingNotifier()
        self.state = CallState()

    @property
    def loading(self) -> bool:
        return self.state.loading

    @property
    def error(self) -> str | None:
        return self.state.error

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    def clear_error(self) -> None:
        self.state.error = None

    async def make_api_call(
        self,
        operation: Operation,
        options: CallOptions | None = None,
    ) -> Any:
        """Run one request and return its (optionally transformed) JSON body.

        Raises:
            TransportError: On network failure or a non-2xx response.
            Exception: Anything else raised by `operation` or the transform.
        """
        options = options or CallOptions()

        self.state.loading = True
        self.state.error = None

        try:
            try:
                response = await operation()
                response.raise_for_status()
            except httpx.HTTPError as exc:
                raise to_transport_error(exc) from exc

            result = response_payload(response)

            if options.transform_response is not None:
                result = options.transform_response(result)

            if options.show_toast and options.success_message:
                self._notifier.success(options.success_message)

            return result
        except Exception as exc:
            extracted = extract_error_message(exc)
            self.state.error = extracted

            logger.debug(
                "API call failed",
                extra={"error": extracted, "error_type": type(exc).__name__},
            )

            if options.show_toast:
                self._notifier.error(options.error_message or extracted)

            raise
        finally:
            self.state.loading = False

    async def get(
        self,
        url: str,
        params: Mapping[str, Any] | None = None,
        options: CallOptions | None = None,
    ) -> Any:
        query = flatten_params(compact(params))
        return await self.make_api_call(
            lambda: self._client.get(url, params=query),
            options,
        )

    async def post(
        self,
        url: str,
        data: Mapping[str, Any] | None = None,
        options: CallOptions | None = None,
    ) -> Any:
        body = compact(data)
        return await self.make_api_call(
            lambda: self._client.post(url, json=body),
            options,
        )

    async def put(
        self,
        url: str,
        data: Mapping[str, Any] | None = None,
        options: CallOptions | None = None,
    ) -> Any:
        body = compact(data)
        return await self.make_api_call(
            lambda: self._client.put(url, json=body),
            options,
        )

    async def patch(
        self,
        url: str,
        data: Mapping[str, Any] | None = None,
        options: CallOptions | None = None,
    ) -> Any:
        body = compact(data)
        return await self.make_api_call(
            lambda: self._client.patch(url, json=body),
            options,
        )

    async def delete(
        self,
        url: str,
        options: CallOptions | None = None,
    ) -> Any:
        return await self.make_api_call(
            lambda: self._client.delete(url),
            options,
        )

    async def batch(
        self,
        requests: Sequence[BatchRequest],
        options: BatchOptions | None = None,
    ) -> list[Any]:
        """Run several requests and collect their results in request order.

        Concurrent mode waits for every request to settle. With `fail_fast`
        any failure raises `BatchPartialFailure` and the successful results
        are discarded; otherwise failed slots are dropped.

        Sequential mode runs requests one at a time. With `fail_fast` the
        first failure is re-raised and the remaining requests never start;
        otherwise a `FailedRequest` takes the failed slot.
        """
        options = options or BatchOptions()

        self.state.loading = True
        self.state.error = None

        try:
            results: list[Any]

            if options.concurrent:
                settled = await asyncio.gather(
                    *(request() for request in requests),
                    return_exceptions=True,
                )
                failures = [r for r in settled if isinstance(r, BaseException)]

                if options.fail_fast and failures:
                    raise BatchPartialFailure(
                        failure_count=len(failures),
                        details={"total": len(settled)},
                    )

                results = [r for r in settled if not isinstance(r, BaseException)]
            else:
                results = []
                for request in requests:
                    try:
                        results.append(await request())
                    except Exception as exc:
                        if options.fail_fast:
                            raise
                        results.append(FailedRequest(error=exc))

            if options.show_toast:
                self._notifier.success(f"Completed {len(results)} requests")

            return results
        except Exception as exc:
            extracted = str(exc) or BATCH_ERROR_MESSAGE
            self.state.error = extracted

            if options.show_toast:
                self._notifier.error(extracted)

            raise
        finally:
            self.state.loading = False
