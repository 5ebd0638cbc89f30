"""
Pydantic models for contact records, drafts, pagination and statistics.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError


class Contact(BaseModel):
    """Contact record as returned by the backend.

    Text fields are nullable because the backend does not enforce them on
    stored records.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: int | str | None = None
    name: str | None = None
    email: str | None = None
    message: str | None = None
    created_at: datetime | None = Field(default=None, alias="createdAt")

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Contact":
        """Parse a backend record, dropping fields that do not validate."""
        try:
            return cls.model_validate(record)
        except PydanticValidationError as exc:
            rejected = {error["loc"][0] for error in exc.errors() if error["loc"]}
            for name, field in cls.model_fields.items():
                if field.alias in rejected:
                    rejected.add(name)
            return cls.model_validate(
                {key: value for key, value in record.items() if key not in rejected}
            )


class ContactDraft(BaseModel):
    """Unvalidated contact input, prior to submission."""

    name: str | None = None
    email: str | None = None
    message: str | None = None


class Pagination(BaseModel):
    """Listing pagination state."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=25, ge=1, alias="pageSize")
    page_count: int = Field(default=1, ge=0, alias="pageCount")
    total: int = Field(default=0, ge=0)

    def merged(self, meta: Mapping[str, Any] | None) -> "Pagination":
        """Return a copy updated only with the usable fields present in ``meta``.

        Missing, null and out-of-range values keep their current value.
        """
        if not meta:
            return self.model_copy()

        update: dict[str, Any] = {}
        for name, field in Pagination.model_fields.items():
            key = field.alias if field.alias in meta else name
            value = meta.get(key)
            if value is None:
                continue
            try:
                incoming = Pagination.model_validate({name: value})
            except PydanticValidationError:
                continue
            update[name] = getattr(incoming, name)
        return self.model_copy(update=update)


class DomainCount(BaseModel):
    domain: str
    count: int


class ContactStats(BaseModel):
    """Aggregates over the in-memory contact list."""

    model_config = ConfigDict(populate_by_name=True)

    total: int = 0
    by_month: dict[str, int] = Field(default_factory=dict, alias="byMonth")
    average_message_length: float = Field(default=0, alias="averageMessageLength")
    unique_emails: int = Field(default=0, alias="uniqueEmails")
    top_domains: list[DomainCount] = Field(default_factory=list, alias="topDomains")
    recent_contacts: list[Contact] = Field(default_factory=list, alias="recentContacts")
