"""
Shared exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class AppError(Exception):
    message: str = "Application error"
    details: Optional[dict[str, Any]] = None

    def __str__(self) -> str:
        return self.message


class ValidationError(AppError):
    """Contact draft rejected before reaching the backend."""


class TransportError(AppError):
    """Network failure or non-2xx response from the backend."""

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        status_code: int | None = None,
        payload: Any = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)
        self.status_code = status_code
        self.payload = payload


class BatchPartialFailure(AppError):
    """One or more requests of a concurrent fail-fast batch failed."""

    def __init__(self, failure_count: int, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message=f"{failure_count} requests failed", details=details)
        self.failure_count = failure_count
