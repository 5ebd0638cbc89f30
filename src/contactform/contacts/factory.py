"""
Contact store factory.

Single place that wires settings, logging, the HTTP client, the notifier,
the executor and the store together.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from contactform.api.client import create_http_client
from contactform.api.executor import ApiExecutor
from contactform.config import Settings, get_settings
from contactform.contacts.store import ContactStore
from contactform.shared.logging import setup_logging
from contactform.shared.notifications import LoggingNotifier, Notifier

logger = logging.getLogger(__name__)


def build_contact_store(
    settings: Settings | None = None,
    notifier: Notifier | None = None,
) -> ContactStore:
    """Build a store with its own HTTP client and executor."""
    settings = settings or get_settings()
    notifier = notifier or LoggingNotifier()

    executor = ApiExecutor(create_http_client(settings), notifier=notifier)

    logger.info(
        "Contact store configured",
        extra={
            "api_url": settings.api_url,
            "app_env": settings.app_env,
            "has_api_token": bool(settings.api_token),
        },
    )
    return ContactStore(executor, notifier=notifier, settings=settings)


@lru_cache(maxsize=1)
def get_contact_store() -> ContactStore:
    """Create and cache the process-wide store with logging configured."""
    settings = get_settings()
    setup_logging(settings)
    return build_contact_store(settings)
