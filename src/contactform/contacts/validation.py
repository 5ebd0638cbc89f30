"""
Client-side validation of contact drafts.
"""

import re
from collections.abc import Mapping
from typing import Any

from email_validator import EmailNotValidError, validate_email

from contactform.contacts.models import ContactDraft
from contactform.shared.exceptions import ValidationError


ALLOWED_FIELDS = ("name", "email", "message")
NAME_MAX_LENGTH = 255
MESSAGE_MIN_LENGTH = 10
MESSAGE_MAX_LENGTH = 1000

NAME_PATTERN = re.compile(r"^[a-zA-Z\s]+$")

INVALID_NAME_MESSAGE = "Please enter a valid name"
INVALID_EMAIL_MESSAGE = "Please enter a valid email address"
INVALID_MESSAGE_MESSAGE = (
    f"Message must be between {MESSAGE_MIN_LENGTH} and {MESSAGE_MAX_LENGTH} characters"
)


def _non_blank(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def is_valid_name(name: Any) -> bool:
    if not _non_blank(name):
        return False
    trimmed = name.strip()
    return bool(NAME_PATTERN.match(trimmed)) and len(trimmed) <= NAME_MAX_LENGTH


def is_valid_email(email: Any) -> bool:
    if not _non_blank(email):
        return False
    try:
        validate_email(email.strip(), check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_valid_message(message: Any) -> bool:
    if not _non_blank(message):
        return False
    return MESSAGE_MIN_LENGTH <= len(message.strip()) <= MESSAGE_MAX_LENGTH


def clean_contact_data(data: Mapping[str, Any] | ContactDraft) -> dict[str, Any]:
    """Keep only the submittable fields and trim string values."""
    if isinstance(data, ContactDraft):
        data = data.model_dump(exclude_unset=True)
    return {
        key: value.strip() if isinstance(value, str) else value
        for key, value in data.items()
        if key in ALLOWED_FIELDS
    }


def validate_contact_data(data: Mapping[str, Any] | ContactDraft) -> dict[str, Any]:
    """Clean a draft and check name, email and message in that order.

    Returns:
        The cleaned draft.

    Raises:
        ValidationError: On the first field that fails its check.
    """
    cleaned = clean_contact_data(data)

    if not is_valid_name(cleaned.get("name")):
        raise ValidationError(INVALID_NAME_MESSAGE, details={"field": "name"})

    if not is_valid_email(cleaned.get("email")):
        raise ValidationError(INVALID_EMAIL_MESSAGE, details={"field": "email"})

    if not is_valid_message(cleaned.get("message")):
        raise ValidationError(INVALID_MESSAGE_MESSAGE, details={"field": "message"})

    return cleaned
