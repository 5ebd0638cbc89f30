"""
Contact store: in-memory contact list synchronized with the backend.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from typing import Any

from contactform.api.errors import extract_error_message
from contactform.api.executor import ApiExecutor, CallOptions
from contactform.config import Settings, get_settings
from contactform.contacts import analytics
from contactform.contacts.models import Contact, ContactDraft, ContactStats, Pagination
from contactform.contacts.validation import validate_contact_data
from contactform.shared.exceptions import ValidationError
from contactform.shared.notifications import Notifier

logger = logging.getLogger(__name__)

CONTACTS_PATH = "/contacts"
CREATE_CONTACT_PATH = "/contact"
DEFAULT_SORT = "createdAt:desc"

CREATE_SUCCESS_MESSAGE = "Contact message sent successfully!"
CREATE_ERROR_MESSAGE = "Failed to send contact message"


def _contacts_from(result: Any) -> list[Contact]:
    if not isinstance(result, Mapping):
        return []
    return [
        Contact.from_record(item)
        for item in result.get("data") or []
        if isinstance(item, Mapping)
    ]


def _pagination_meta(result: Any) -> Mapping[str, Any]:
    if not isinstance(result, Mapping):
        return {}
    meta = result.get("meta")
    if not isinstance(meta, Mapping):
        return {}
    pagination = meta.get("pagination")
    return pagination if isinstance(pagination, Mapping) else {}


class ContactStore:
    """Owns the contact list and pagination of one client session.

    `loading` and `error` track the store operation currently running. They are
    not guarded: overlapping operations overwrite each other's state.
    """

    def __init__(
        self,
        executor: ApiExecutor,
        notifier: Notifier | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._api = executor
        self._notifier = notifier or executor.notifier
        self._settings = settings or get_settings()

        self.contacts: list[Contact] = []
        self.pagination = Pagination(page_size=self._settings.default_page_size)
        self.loading = False
        self.error: str | None = None

    def clear_error(self) -> None:
        self.error = None

    def _log_failure(self, message: str, exc: BaseException) -> None:
        if self._settings.is_development:
            logger.error(message, exc_info=exc, extra={"error": self.error})

    async def _load(self, params: Mapping[str, Any], error_message: str) -> None:
        self.loading = True
        self.error = None

        try:
            result = await self._api.get(
                CONTACTS_PATH,
                params,
                CallOptions(show_toast=False, error_message=error_message),
            )

            contacts = _contacts_from(result)
            pagination = self.pagination.merged(_pagination_meta(result))

            self.contacts = contacts
            self.pagination = pagination
        except Exception as exc:
            self.error = extract_error_message(exc)
            self._log_failure(error_message, exc)
        finally:
            self.loading = False

    async def fetch_contacts(self, page: int = 1, page_size: int | None = None) -> None:
        """Load one page of contacts, newest first. Never raises."""
        params = {
            "pagination": {
                "page": page,
                "pageSize": page_size or self._settings.default_page_size,
            },
            "sort": DEFAULT_SORT,
        }
        await self._load(params, "Failed to fetch contacts")

    async def fetch_all_contacts(self, params: Mapping[str, Any] | None = None) -> None:
        """Load contacts with caller-supplied query parameters. Never raises."""
        query = {"sort": DEFAULT_SORT, **(params or {})}
        await self._load(query, "Failed to fetch all contacts")

    async def create_contact(self, draft: Mapping[str, Any] | ContactDraft) -> Contact | None:
        """Validate and submit a draft, then prepend the created record.

        Raises:
            ValidationError: The draft failed a client-side check; nothing was sent.
            TransportError: The backend rejected the submission or was unreachable.
        """
        self.loading = True
        self.error = None

        try:
            cleaned = validate_contact_data(draft)

            result = await self._api.post(
                CREATE_CONTACT_PATH,
                {"data": cleaned},
                CallOptions(
                    show_toast=True,
                    success_message=CREATE_SUCCESS_MESSAGE,
                    error_message=CREATE_ERROR_MESSAGE,
                ),
            )

            record = result.get("data") if isinstance(result, Mapping) else None
            if not isinstance(record, Mapping) or not record:
                return None

            contact = Contact.from_record(record)
            self.contacts = [contact, *self.contacts]
            self.pagination = self.pagination.model_copy(
                update={"total": self.pagination.total + 1}
            )
            return contact
        except Exception as exc:
            self.error = extract_error_message(exc)
            # Backend failures were already notified by the executor
            if isinstance(exc, ValidationError):
                self._notifier.error(self.error)
            self._log_failure("Failed to create contact", exc)
            raise
        finally:
            self.loading = False

    def search_contacts(self, term: str | None) -> list[Contact]:
        return analytics.search_contacts(self.contacts, term)

    def group_contacts_by_date(self) -> dict[str, list[Contact]]:
        return analytics.group_by_date(self.contacts)

    def get_contacts_stats(self) -> ContactStats:
        return analytics.get_contact_stats(self.contacts)

    def filter_contacts_by_date_range(
        self,
        start: date | None = None,
        end: date | None = None,
    ) -> list[Contact]:
        return analytics.filter_by_date_range(self.contacts, start, end)

    def filter_contacts_by_domain(self, domain: str) -> list[Contact]:
        return analytics.filter_by_domain(self.contacts, domain)

