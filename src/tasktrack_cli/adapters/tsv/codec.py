"""Line codec for the TSV task file.

One task is one line of six tab-separated fields::

    id <TAB> done <TAB> priority <TAB> due <TAB> title <TAB> tags

``title`` and the comma-joined ``tags`` are escaped so that backslashes,
tabs and newlines inside them survive the trip through a line-based file.
Commas inside a tag are not escaped: such a tag splits into several tags on
decode.
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import ValidationError

from tasktrack_cli.models import FormatError, Priority, Task

FIELD_SEPARATOR = "\t"
TAG_SEPARATOR = ","
ESCAPE_CHAR = "\\"
DATE_FORMAT = "%Y-%m-%d"

FIELD_NAMES = ("id", "done", "priority", "due", "title", "tags")
FIELD_COUNT = len(FIELD_NAMES)


def escape(text: str | None) -> str:
    """Escape backslashes, tabs and newlines of a free-text field."""
    if text is None:
        return ""
    return (
        text.replace(ESCAPE_CHAR, ESCAPE_CHAR * 2)
        .replace("\t", ESCAPE_CHAR + "t")
        .replace("\n", ESCAPE_CHAR + "n")
    )


def unescape(text: str) -> str:
    """Reverse :func:`escape`.

    ``\\t`` and ``\\n`` become tab and newline, a backslash before any other
    character yields that character, and a trailing lone backslash is
    dropped.
    """
    out: list[str] = []
    after_escape = False
    for char in text:
        if after_escape:
            if char == "t":
                out.append("\t")
            elif char == "n":
                out.append("\n")
            else:
                out.append(char)
            after_escape = False
        elif char == ESCAPE_CHAR:
            after_escape = True
        else:
            out.append(char)
    return "".join(out)


def split_fields(line: str, expected: int = FIELD_COUNT) -> list[str]:
    """Split a line on unescaped tabs.

    Escape sequences are kept verbatim (backslash included) for
    :func:`unescape`. The result is padded with empty strings up to
    ``expected`` fields.
    """
    fields: list[str] = []
    current: list[str] = []
    after_escape = False
    for char in line:
        if after_escape:
            current.append(ESCAPE_CHAR)
            current.append(char)
            after_escape = False
        elif char == ESCAPE_CHAR:
            after_escape = True
        elif char == FIELD_SEPARATOR:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
    fields.append("".join(current))
    while len(fields) < expected:
        fields.append("")
    return fields


def format_date(value: date | None) -> str:
    """Render a due date as ``YYYY-MM-DD`` (empty string for no date)."""
    return "" if value is None else value.isoformat()


def parse_date(raw: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` date.

    Raises:
        ValueError: If ``raw`` is not a valid, zero-padded ISO date
    """
    digits = raw[:4] + raw[5:7] + raw[8:]
    if (
        len(raw) != 10
        or raw[4] != "-"
        or raw[7] != "-"
        or not (digits.isascii() and digits.isdigit())
    ):
        raise ValueError(f"expected YYYY-MM-DD, got {raw!r}")
    return datetime.strptime(raw, DATE_FORMAT).date()


def encode_task(task: Task) -> str:
    """Encode a task as one TSV line (without the trailing newline)."""
    fields = (
        str(task.id),
        "1" if task.done else "0",
        task.priority.name,
        format_date(task.due),
        escape(task.title),
        escape(TAG_SEPARATOR.join(task.tags)),
    )
    return FIELD_SEPARATOR.join(fields)


def _decode_id(raw: str) -> int:
    if not (raw.isascii() and raw.isdigit()) or int(raw) < 1:
        raise FormatError(f"Invalid id {raw!r}", field="id")
    return int(raw)


def _decode_priority(raw: str) -> Priority:
    try:
        return Priority[raw]
    except KeyError:
        names = "|".join(p.name for p in Priority)
        raise FormatError(
            f"Unknown priority {raw!r} (expected {names})", field="priority"
        ) from None


def _decode_due(raw: str) -> date | None:
    if raw == "":
        return None
    try:
        return parse_date(raw)
    except ValueError as e:
        raise FormatError(f"Invalid due date {raw!r}", field="due") from e


def _decode_tags(raw: str) -> list[str]:
    text = unescape(raw)
    if text == "":
        return []
    return text.split(TAG_SEPARATOR)


def decode_task(line: str) -> Task:
    """Decode one TSV line into a task.

    Raises:
        FormatError: If the id, priority or due field is malformed
    """
    try:
        raw_id, raw_done, raw_priority, raw_due, raw_title, raw_tags = split_fields(
            line
        )[:FIELD_COUNT]
        return Task(
            id=_decode_id(raw_id),
            done=raw_done == "1",
            priority=_decode_priority(raw_priority),
            due=_decode_due(raw_due),
            title=unescape(raw_title),
            tags=_decode_tags(raw_tags),
        )
    except FormatError as e:
        raise FormatError(e.message, line=line, field=e.field) from e
    except ValidationError as e:
        raise FormatError(f"Invalid record: {e}", line=line) from e
