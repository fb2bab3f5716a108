"""Task data models."""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Priority(str, Enum):
    """Task priority. Declaration order is the sort order (LOW < HIGH)."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @property
    def rank(self) -> int:
        return list(Priority).index(self)


def normalize_tags(tags: list[str] | tuple[str, ...] | None) -> list[str]:
    """Trim tags, drop empty ones and collapse duplicates keeping first-seen order."""
    if not tags:
        return []
    trimmed = (tag.strip() for tag in tags)
    return list(dict.fromkeys(tag for tag in trimmed if tag))


class Task(BaseModel):
    """Task model representing one persisted record.

    Attributes:
        id: Unique, immutable identifier allocated by the store
        title: Free-text title (may contain tabs, newlines, backslashes)
        due: Optional due date (no time component)
        priority: Priority level, MEDIUM when unspecified
        done: Completion flag
        tags: Insertion-ordered, duplicate-free labels
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(gt=0)
    title: str
    due: date | None = None
    priority: Priority = Priority.MEDIUM
    done: bool = False
    tags: list[str] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        return normalize_tags(list(value))


class TaskUpdate(BaseModel):
    """Model for updating an existing task.

    All fields are optional - only fields explicitly passed are applied, so
    ``TaskUpdate(due=None)`` clears the due date while ``TaskUpdate()``
    leaves it untouched.

    Attributes:
        title: New title
        due: New due date, or None to clear it
        priority: New priority
        done: New completion flag
        tags: Replacement tag list
    """

    title: str | None = None
    due: date | None = None
    priority: Priority | None = None
    done: bool | None = None
    tags: list[str] | None = None

    def changes(self) -> dict:
        """Return only the explicitly supplied fields."""
        return {name: getattr(self, name) for name in self.model_fields_set}
