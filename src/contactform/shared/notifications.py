"""
User-facing notification channel.

The library never renders notifications itself. It hands a severity and a
message to a `Notifier`; front-ends plug in their own implementation.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum


logger = logging.getLogger(__name__)


class Severity(str, Enum):
    """Notification severity values."""

    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
    WARNING = "warning"


@dataclass(frozen=True)
class Notification:
    """A single message emitted to the user."""

    severity: Severity
    message: str


class Notifier(ABC):
    """Abstract interface for notification sinks."""

    @abstractmethod
    def notify(self, severity: Severity, message: str) -> None:
        """Emit one notification."""
        raise NotImplementedError

    def success(self, message: str) -> None:
        self.notify(Severity.SUCCESS, message)

    def error(self, message: str) -> None:
        self.notify(Severity.ERROR, message)

    def info(self, message: str) -> None:
        self.notify(Severity.INFO, message)


class LoggingNotifier(Notifier):
    """Default notifier: writes notifications to the application log."""

    def notify(self, severity: Severity, message: str) -> None:
        level = logging.ERROR if severity == Severity.ERROR else logging.INFO
        logger.log(level, message, extra={"severity": severity.value})


@dataclass
class RecordingNotifier(Notifier):
    """In-memory notifier for headless callers and tests."""

    notifications: list[Notification] = field(default_factory=list)

    def notify(self, severity: Severity, message: str) -> None:
        self.notifications.append(Notification(severity=severity, message=message))

    def last(self) -> Notification | None:
        return self.notifications[-1] if self.notifications else None

    def messages(self, severity: Severity | None = None) -> list[str]:
        return [
            n.message
            for n in self.notifications
            if severity is None or n.severity == severity
        ]

    def clear(self) -> None:
        self.notifications.clear()
