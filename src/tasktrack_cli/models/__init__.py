"""tasktrack domain models.

This package contains the Pydantic models and exceptions that represent the
core domain entities of tasktrack.
"""

from .config_models import AppConfig, OutputConfig, StorageConfig
from .exceptions import (
    FormatError,
    InvalidInputError,
    NotFoundError,
    StorageError,
    TaskTrackError,
)
from .task import Priority, Task, TaskUpdate, normalize_tags

__all__ = [
    # Task models
    "Priority",
    "Task",
    "TaskUpdate",
    "normalize_tags",
    # Config models
    "AppConfig",
    "OutputConfig",
    "StorageConfig",
    # Errors
    "TaskTrackError",
    "FormatError",
    "NotFoundError",
    "StorageError",
    "InvalidInputError",
]
