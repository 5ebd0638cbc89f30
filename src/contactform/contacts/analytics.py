"""
Search, grouping and statistics over an in-memory contact list.

All functions are pure: they read the given sequence and never mutate it.
Timestamps are bucketed in UTC; naive datetimes are taken to be UTC.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date, datetime, timezone

from contactform.contacts.models import Contact, ContactStats, DomainCount
from contactform.contacts.validation import is_valid_email

TOP_DOMAINS_LIMIT = 5
RECENT_CONTACTS_LIMIT = 5
UNKNOWN_BUCKET = "unknown"

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _created(contact: Contact) -> datetime | None:
    return _as_utc(contact.created_at) if contact.created_at else None


def email_domain(email: str | None) -> str | None:
    """Domain part of a well-formed address, lower-cased."""
    if not is_valid_email(email):
        return None
    return email.strip().rpartition("@")[2].lower()


def search_contacts(contacts: Sequence[Contact], term: str | None) -> list[Contact]:
    """Case-insensitive containment match on name, email and message."""
    needle = (term or "").strip().lower()
    if not needle:
        return list(contacts)
    return [
        contact
        for contact in contacts
        if any(needle in (value or "").lower() for value in (contact.name, contact.email, contact.message))
    ]


def group_by_date(contacts: Sequence[Contact]) -> dict[str, list[Contact]]:
    """Bucket contacts by calendar day (``YYYY-MM-DD``) in first-seen order."""
    groups: dict[str, list[Contact]] = {}
    for contact in contacts:
        created = _created(contact)
        key = created.date().isoformat() if created else UNKNOWN_BUCKET
        groups.setdefault(key, []).append(contact)
    return groups


def _month_key(contact: Contact) -> str:
    created = _created(contact)
    if created is None:
        return UNKNOWN_BUCKET
    return f"{created.year}-{created.month}"


def _top_domains(contacts: Sequence[Contact]) -> list[DomainCount]:
    counts: dict[str, int] = {}
    for contact in contacts:
        domain = email_domain(contact.email)
        if domain:
            counts[domain] = counts.get(domain, 0) + 1
    # sorted() is stable, so ties keep first-encountered order
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [DomainCount(domain=domain, count=count) for domain, count in ranked[:TOP_DOMAINS_LIMIT]]


def get_contact_stats(contacts: Sequence[Contact]) -> ContactStats:
    if not contacts:
        return ContactStats()

    by_month: dict[str, int] = {}
    for contact in contacts:
        key = _month_key(contact)
        by_month[key] = by_month.get(key, 0) + 1

    recent = sorted(
        contacts,
        key=lambda c: _created(c) or _EPOCH,
        reverse=True,
    )

    return ContactStats(
        total=len(contacts),
        by_month=by_month,
        average_message_length=sum(len(c.message or "") for c in contacts) / len(contacts),
        unique_emails=len({c.email for c in contacts}),
        top_domains=_top_domains(contacts),
        recent_contacts=recent[:RECENT_CONTACTS_LIMIT],
    )


def make_memoized_stats() -> Callable[[Sequence[Contact]], ContactStats]:
    """Return a `get_contact_stats` cached on the sequence of contact ids."""
    cache: dict[tuple, ContactStats] = {}

    def stats(contacts: Sequence[Contact]) -> ContactStats:
        key = tuple(contact.id for contact in contacts)
        if key not in cache:
            cache[key] = get_contact_stats(contacts)
        return cache[key]

    return stats


def _within(created: datetime, start: date | None, end: date | None) -> bool:
    if start is not None:
        if isinstance(start, datetime):
            if created < _as_utc(start):
                return False
        elif created.date() < start:
            return False
    if end is not None:
        if isinstance(end, datetime):
            if created > _as_utc(end):
                return False
        elif created.date() > end:
            return False
    return True


def filter_by_date_range(
    contacts: Sequence[Contact],
    start: date | None = None,
    end: date | None = None,
) -> list[Contact]:
    """Contacts created within ``[start, end]``.

    Bounds are inclusive and either may be None. A plain `date` bound compares
    by calendar day. Contacts without a timestamp only pass an unbounded range.
    """
    if start is None and end is None:
        return list(contacts)
    result = []
    for contact in contacts:
        created = _created(contact)
        if created is not None and _within(created, start, end):
            result.append(contact)
    return result


def filter_by_domain(contacts: Sequence[Contact], domain: str) -> list[Contact]:
    """Contacts whose email domain equals ``domain`` (case-insensitive)."""
    wanted = (domain or "").strip().lstrip("@").lower()
    if not wanted:
        return []
    return [
        contact
        for contact in contacts
        if "@" in (contact.email or "")
        and contact.email.strip().rpartition("@")[2].lower() == wanted
    ]
