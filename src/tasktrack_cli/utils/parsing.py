"""Parsing of user-typed command text into task values.

The interactive shell uses a ``/flag value`` grammar::

    add Buy milk /due 2025-08-31 /p high /tags home,errands
    edit 3 /t New title /due none

Flags are lower-cased; a flag's value is every following token up to the
next flag, joined by single spaces.
"""

from __future__ import annotations

from datetime import date

from tasktrack_cli.adapters.tsv.codec import parse_date as parse_iso_date
from tasktrack_cli.models import InvalidInputError, Priority, normalize_tags

NONE_KEYWORD = "none"

PRIORITY_ALIASES = {
    "h": Priority.HIGH,
    "hi": Priority.HIGH,
    "high": Priority.HIGH,
    "l": Priority.LOW,
    "lo": Priority.LOW,
    "low": Priority.LOW,
}


def parse_flags(text: str | None) -> dict[str, str]:
    """Collect ``/flag value`` pairs; text before the first flag is ignored.

    A repeated flag keeps its last value. A flag with no value maps to ``""``.
    """
    flags: dict[str, str] = {}
    if not text:
        return flags

    current: str | None = None
    value: list[str] = []
    for token in text.split():
        if token.startswith("/"):
            if current is not None:
                flags[current] = " ".join(value)
            current = token.lower()
            value = []
        elif current is not None:
            value.append(token)
    if current is not None:
        flags[current] = " ".join(value)
    return flags


def leading_text(text: str | None) -> str:
    """Return the free text before the first `` /`` flag.

    Text that itself starts with a flag has no leading text.
    """
    if not text or text.lstrip().startswith("/"):
        return ""
    idx = text.find(" /")
    return (text[:idx] if idx >= 0 else text).strip()


def parse_date(value: str | None) -> date | None:
    """Parse a ``YYYY-MM-DD`` due date; blank or ``none`` means no date.

    Raises:
        InvalidInputError: If the date is malformed
    """
    if value is None or not value.strip() or value.strip().lower() == NONE_KEYWORD:
        return None
    try:
        return parse_iso_date(value.strip())
    except ValueError as e:
        raise InvalidInputError(
            f"Invalid date {value.strip()!r}, expected YYYY-MM-DD"
        ) from e


def parse_priority(value: str | None) -> Priority:
    """Map ``h/hi/high`` and ``l/lo/low`` to HIGH and LOW; anything else is MEDIUM."""
    if value is None or not value.strip():
        return Priority.MEDIUM
    return PRIORITY_ALIASES.get(value.strip().lower(), Priority.MEDIUM)


def parse_tags(value: str | None) -> list[str]:
    """Split a comma-separated tag list; blank or ``none`` means no tags."""
    if value is None or not value.strip() or value.strip().lower() == NONE_KEYWORD:
        return []
    return normalize_tags(value.split(","))


def parse_id(value: str | None) -> int:
    """Parse a task id.

    Raises:
        InvalidInputError: If ``value`` is not an integer
    """
    try:
        return int((value or "").strip())
    except ValueError:
        raise InvalidInputError("Provide a numeric id") from None
