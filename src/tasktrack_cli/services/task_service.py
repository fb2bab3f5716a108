"""Task service - Business logic for task operations.

This service layer sits between commands and the repository. Every mutating
operation is written through: the repository is saved before the call
returns.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date
from functools import lru_cache

from tasktrack_cli.adapters.tsv import TsvTaskStore
from tasktrack_cli.models import (
    InvalidInputError,
    NotFoundError,
    Priority,
    Task,
    TaskUpdate,
)
from tasktrack_cli.repositories import TaskRepository
from tasktrack_cli.services.config_service import get_config_service

logger = logging.getLogger(__name__)

LIST_SCOPES = ("open", "done", "all")
SORT_KEYS = ("id", "due", "prio")


class TaskService:
    """Service for task business logic.

    This service encapsulates business rules and orchestrates task
    operations using the task repository.
    """

    def __init__(self, task_repository: TaskRepository):
        """Initialize the task service.

        Args:
            task_repository: TaskRepository implementation for data access
        """
        self.repository = task_repository

    def load(self) -> None:
        """Load persisted tasks. Must be called once before anything else."""
        self.repository.load()
        logger.info("loaded %d task(s)", self.repository.size())

    def save(self) -> None:
        """Persist the current state."""
        self.repository.save()

    def list_tasks(
        self,
        scope: str = "open",
        sort: str = "id",
        reverse: bool = False,
    ) -> list[Task]:
        """List tasks filtered by completion and sorted.

        Args:
            scope: "open" (default, also ""), "done" or "all"
            sort: "id", "due" (no due date last) or "prio" (HIGH first)
            reverse: Reverse the final order

        Returns:
            List of Task objects

        Raises:
            InvalidInputError: If scope or sort is unknown
        """
        scope = (scope or "open").lower()
        sort = (sort or "id").lower()
        if scope not in LIST_SCOPES:
            raise InvalidInputError(
                f"Unknown list scope {scope!r}, expected one of {', '.join(LIST_SCOPES)}"
            )
        if sort not in SORT_KEYS:
            raise InvalidInputError(
                f"Unknown sort key {sort!r}, expected one of {', '.join(SORT_KEYS)}"
            )

        tasks = self.repository.all()
        if scope == "open":
            tasks = [task for task in tasks if not task.done]
        elif scope == "done":
            tasks = [task for task in tasks if task.done]

        if sort == "due":
            tasks.sort(key=lambda t: (t.due is None, t.due or date.min, t.id))
        elif sort == "prio":
            tasks.sort(key=lambda t: (-t.priority.rank, t.id))
        else:
            tasks.sort(key=lambda t: t.id)

        if reverse:
            tasks.reverse()
        return tasks

    def search(self, text: str) -> list[Task]:
        """Find tasks whose title or any tag contains ``text`` (case-insensitive).

        Raises:
            InvalidInputError: If ``text`` is blank
        """
        query = (text or "").strip().lower()
        if not query:
            raise InvalidInputError("Usage: search <text>")
        return [
            task
            for task in self.repository.all()
            if query in task.title.lower()
            or any(query in tag.lower() for tag in task.tags)
        ]

    def get_task(self, task_id: int) -> Task:
        """Get a specific task by ID.

        Raises:
            NotFoundError: If the task does not exist
        """
        return self.repository.get(task_id)

    def add_task(
        self,
        title: str,
        *,
        due: date | None = None,
        priority: Priority | None = None,
        tags: Iterable[str] | None = None,
    ) -> Task:
        """Create a new task and save.

        Raises:
            InvalidInputError: If the title is blank
        """
        title = (title or "").strip()
        if not title:
            raise InvalidInputError(
                "Title is required. Try: add Buy milk /due 2025-08-31 /p high"
            )
        task = self.repository.insert(title, due=due, priority=priority, tags=tags)
        self.save()
        logger.info("added task %d", task.id)
        return task

    def edit_task(self, task_id: int, changes: TaskUpdate) -> Task:
        """Apply a partial update and save.

        Raises:
            InvalidInputError: If a new title is supplied but blank
            NotFoundError: If the task does not exist
        """
        if "title" in changes.model_fields_set:
            title = (changes.title or "").strip()
            if not title:
                raise InvalidInputError("Title cannot be empty")
            changes.title = title
        task = self.repository.update(task_id, changes)
        self.save()
        logger.info("edited task %d (%s)", task_id, ", ".join(sorted(changes.model_fields_set)))
        return task

    def complete_task(self, task_id: int) -> Task:
        """Mark a task as done and save."""
        return self.edit_task(task_id, TaskUpdate(done=True))

    def reopen_task(self, task_id: int) -> Task:
        """Mark a task as not done and save."""
        return self.edit_task(task_id, TaskUpdate(done=False))

    def delete_task(self, task_id: int) -> None:
        """Delete a task and save.

        Raises:
            NotFoundError: If the task does not exist
        """
        if not self.repository.delete(task_id):
            raise NotFoundError(task_id)
        self.save()
        logger.info("deleted task %d", task_id)

    def clear_completed(self) -> int:
        """Remove every completed task and save.

        Returns:
            Number of tasks removed
        """
        removed = self.repository.remove_where(lambda task: task.done)
        self.save()
        logger.info("cleared %d completed task(s)", removed)
        return removed


@lru_cache(maxsize=1)
def get_task_service() -> TaskService:
    """Build the process-wide task service from configuration and load it."""
    config_svc = get_config_service()
    store = TsvTaskStore(config_svc.data_path, config_svc.sidecar_path)
    service = TaskService(store)
    service.load()
    return service
