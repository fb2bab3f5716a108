"""Repository abstraction layer for tasktrack.

This module defines the abstract base class (interface) for task storage,
following the Ports & Adapters pattern: the service layer only depends on
this contract, the TSV file adapter implements it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from datetime import date

from tasktrack_cli.models import Priority, Task, TaskUpdate


class TaskRepository(ABC):
    """Abstract base class for task persistence operations.

    Mutations only change in-memory state; callers persist them with
    :meth:`save`.
    """

    @abstractmethod
    def insert(
        self,
        title: str,
        due: date | None = None,
        priority: Priority | None = None,
        tags: Iterable[str] | None = None,
    ) -> Task:
        """Create a task with a freshly allocated id.

        Args:
            title: Task title
            due: Optional due date
            priority: Priority level, MEDIUM when None
            tags: Optional tags

        Returns:
            The new Task, appended after every existing task
        """
        raise NotImplementedError("TaskRepository.insert() must be implemented by adapter")

    @abstractmethod
    def get(self, task_id: int) -> Task:
        """Get a task by id.

        Raises:
            NotFoundError: If the task does not exist
        """
        raise NotImplementedError("TaskRepository.get() must be implemented by adapter")

    @abstractmethod
    def delete(self, task_id: int) -> bool:
        """Delete a task.

        Returns:
            True if a task was removed, False if the id was unknown
        """
        raise NotImplementedError("TaskRepository.delete() must be implemented by adapter")

    @abstractmethod
    def update(self, task_id: int, changes: TaskUpdate) -> Task:
        """Apply the explicitly supplied fields of ``changes`` in place.

        Raises:
            NotFoundError: If the task does not exist
        """
        raise NotImplementedError("TaskRepository.update() must be implemented by adapter")

    @abstractmethod
    def remove_where(self, predicate: Callable[[Task], bool]) -> int:
        """Delete every task matching ``predicate``.

        Returns:
            Number of tasks removed
        """
        raise NotImplementedError(
            "TaskRepository.remove_where() must be implemented by adapter"
        )

    @abstractmethod
    def all(self) -> list[Task]:
        """Return all tasks in insertion order."""
        raise NotImplementedError("TaskRepository.all() must be implemented by adapter")

    @abstractmethod
    def size(self) -> int:
        """Return the number of tasks."""
        raise NotImplementedError("TaskRepository.size() must be implemented by adapter")

    @abstractmethod
    def load(self) -> None:
        """Replace in-memory state with the persisted state.

        Raises:
            FormatError: If a persisted record is malformed
            StorageError: If the storage cannot be read
        """
        raise NotImplementedError("TaskRepository.load() must be implemented by adapter")

    @abstractmethod
    def save(self) -> None:
        """Persist the in-memory state.

        Raises:
            StorageError: If the storage cannot be written
        """
        raise NotImplementedError("TaskRepository.save() must be implemented by adapter")
