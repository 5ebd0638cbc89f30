from contactform.contacts.analytics import (
    filter_by_date_range,
    filter_by_domain,
    get_contact_stats,
    group_by_date,
    make_memoized_stats,
    search_contacts,
)
from contactform.contacts.formatting import capitalize_name, format_date, smart_truncate
from contactform.contacts.models import (
    Contact,
    ContactDraft,
    ContactStats,
    DomainCount,
    Pagination,
)
from contactform.contacts.validation import clean_contact_data, validate_contact_data

__all__ = [
    "Contact",
    "ContactDraft",
    "ContactStats",
    "DomainCount",
    "Pagination",
    "capitalize_name",
    "clean_contact_data",
    "filter_by_date_range",
    "filter_by_domain",
    "format_date",
    "get_contact_stats",
    "group_by_date",
    "make_memoized_stats",
    "search_contacts",
    "smart_truncate",
    "validate_contact_data",
]
