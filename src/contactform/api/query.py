"""
Request payload and query-string helpers.

The backend expects nested query parameters in bracketed form, e.g.
``pagination[page]=1&pagination[pageSize]=25&sort=createdAt:desc``.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from typing import Any
from urllib.parse import quote

# Characters left unescaped by encodeURIComponent-style value encoding
_VALUE_SAFE = "-_.!~*'()"


def compact(data: Mapping[str, Any] | None) -> dict[str, Any]:
    """Return a copy of ``data`` without ``None``-valued keys.

    Nested mappings are compacted too; sequences are left untouched.
    """
    if not data:
        return {}
    cleaned: dict[str, Any] = {}
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, Mapping):
            value = compact(value)
        cleaned[key] = value
    return cleaned


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def _flatten(name: str, value: Any, out: list[tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            _flatten(f"{name}[{key}]", item, out)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _flatten(f"{name}[{index}]", item, out)
    else:
        out.append((name, _render(value)))


def flatten_params(params: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Serialize nested query parameters into bracketed ``(key, value)`` pairs.

    >>> flatten_params({"pagination": {"page": 2}, "tags": ["a", "b"]})
    [('pagination[page]', '2'), ('tags[0]', 'a'), ('tags[1]', 'b')]
    """
    out: list[tuple[str, str]] = []
    for key, value in (params or {}).items():
        _flatten(str(key), value, out)
    return out


def stringify(params: Mapping[str, Any] | None) -> str:
    """Render ``params`` as a query string, encoding values only."""
    return "&".join(
        f"{key}={quote(value, safe=_VALUE_SAFE)}"
        for key, value in flatten_params(params)
    )
