"""
Display helpers for contact fields.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any

OMISSION = "..."
DEFAULT_DATE_FORMAT = "%b {day}, %Y, %I:%M %p"

# Word boundary used when truncating: optional comma followed by spaces
_BOUNDARY = re.compile(r",? +")
_WORD = re.compile(r"[A-Za-z0-9]+")


def smart_truncate(text: str | None, length: int = 100) -> str | None:
    """Shorten ``text`` to at most ``length`` characters on a word boundary."""
    if text is None or len(text) <= length:
        return text

    budget = length - len(OMISSION)
    if budget < 1:
        return OMISSION[:length]

    head = text[:budget]
    cut = None
    for match in _BOUNDARY.finditer(head):
        cut = match.start()
    if cut:
        head = head[:cut]
    return f"{head}{OMISSION}"


def format_date(value: Any, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    """Render a timestamp like ``Jan 5, 2024, 10:30 AM``.

    Accepts a `datetime` or an ISO-8601 string (a trailing ``Z`` is allowed).
    The ``{day}`` placeholder in ``fmt`` expands to the unpadded day.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return "Unknown date"

    try:
        if isinstance(value, datetime):
            moment = value
        else:
            moment = datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
        return moment.strftime(fmt.replace("{day}", str(moment.day)))
    except (TypeError, ValueError):
        return "Invalid date"


def capitalize_name(name: Any) -> str:
    """Title-case each word of ``name``: ``"jOHN o'neil"`` -> ``"John O Neil"``."""
    if not isinstance(name, str):
        return ""
    return " ".join(word.capitalize() for word in _WORD.findall(name.strip().lower()))
