from contactform.shared.exceptions import (
    AppError,
    BatchPartialFailure,
    TransportError,
    ValidationError,
)
from contactform.shared.notifications import (
    LoggingNotifier,
    Notification,
    Notifier,
    RecordingNotifier,
    Severity,
)

__all__ = [
    "AppError",
    "BatchPartialFailure",
    "LoggingNotifier",
    "Notification",
    "Notifier",
    "RecordingNotifier",
    "Severity",
    "TransportError",
    "ValidationError",
]
