"""Custom exceptions for tasktrack."""

from __future__ import annotations


class TaskTrackError(Exception):
    """Base exception for all tasktrack errors."""


class FormatError(TaskTrackError, ValueError):
    """Raised when a persisted line (or one of its fields) cannot be decoded."""

    def __init__(
        self,
        message: str,
        *,
        line: str | None = None,
        line_number: int | None = None,
        field: str | None = None,
    ):
        self.message = message
        self.line = line
        self.line_number = line_number
        self.field = field
        super().__init__(message)

    def at_line(self, line_number: int, line: str) -> FormatError:
        """Return a copy of this error annotated with its position in a file."""
        return FormatError(
            self.message, line=line, line_number=line_number, field=self.field
        )

    def __str__(self) -> str:
        message = self.message
        if self.line_number is not None:
            message = f"line {self.line_number}: {message}"
        if self.line is not None:
            message = f"{message} ({self.line!r})"
        return message


class NotFoundError(TaskTrackError, LookupError):
    """Raised when an operation addresses a task id that does not exist."""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"No task with id {task_id}")


class StorageError(TaskTrackError, OSError):
    """Raised when the data file or its sidecar cannot be read or written."""

    def __init__(self, message: str, *, path=None):
        self.path = path
        super().__init__(message)


class InvalidInputError(TaskTrackError, ValueError):
    """Raised when user-supplied text cannot be turned into task values."""
