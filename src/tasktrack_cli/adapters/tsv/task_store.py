"""TSV file implementation of TaskRepository."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from datetime import date
from pathlib import Path

from tasktrack_cli.adapters.tsv.codec import FIELD_NAMES, decode_task, encode_task
from tasktrack_cli.models import (
    FormatError,
    NotFoundError,
    Priority,
    StorageError,
    Task,
    TaskUpdate,
)
from tasktrack_cli.repositories import TaskRepository

logger = logging.getLogger(__name__)

FORMAT_MARKER = "# tasktrack TSV v1"
COLUMN_HEADER = "# " + "\t".join(FIELD_NAMES)
SIDECAR_SUFFIX = ".meta"
INITIAL_ID = 1

# Fields that may be set back to None through an update.
_NULLABLE_FIELDS = {"due"}


def default_sidecar_path(path: Path, suffix: str = SIDECAR_SUFFIX) -> Path:
    """Return the next-id sidecar location for a task file (``tasks.tsv.meta``)."""
    return path.with_name(path.name + suffix)


def _is_skippable(line: str) -> bool:
    return line.startswith("#") or not line.strip()


def _decode_line(raw: bytes, line_number: int) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        # Tabs before the bad byte tell which field it sits in
        field_index = min(raw[: e.start].count(b"\t"), len(FIELD_NAMES) - 1)
        raise FormatError(
            f"Invalid UTF-8 at byte {e.start}",
            line=raw.decode("utf-8", errors="replace"),
            line_number=line_number,
            field=FIELD_NAMES[field_index],
        ) from e


class TsvTaskStore(TaskRepository):
    """In-memory task collection persisted to a TSV file.

    Tasks are kept in insertion order, keyed by id. The next-id counter is
    written to a sidecar file on every save so that an id retired by a
    delete is never handed out again after a restart.

    Every public method holds the store lock, so a snapshot from
    :meth:`all` never interleaves with a mutation from another thread.
    """

    def __init__(self, path: str | Path, sidecar_path: str | Path | None = None):
        """Initialize the store. Nothing is read until :meth:`load` is called.

        Args:
            path: Task file location
            sidecar_path: Next-id sidecar location, defaults to ``<path>.meta``
        """
        self.path = Path(path)
        self.sidecar_path = (
            Path(sidecar_path)
            if sidecar_path is not None
            else default_sidecar_path(self.path)
        )
        self._tasks: dict[int, Task] = {}
        self._next_id = INITIAL_ID
        self._lock = threading.RLock()

    @property
    def next_id(self) -> int:
        """The id the next insert will receive."""
        with self._lock:
            return self._next_id

    def __len__(self) -> int:
        return self.size()

    def insert(
        self,
        title: str,
        due: date | None = None,
        priority: Priority | None = None,
        tags: Iterable[str] | None = None,
    ) -> Task:
        with self._lock:
            task = Task(
                id=self._next_id,
                title=title,
                due=due,
                priority=priority or Priority.MEDIUM,
                tags=tags,
            )
            self._tasks[task.id] = task
            self._next_id += 1
            return task

    def get(self, task_id: int) -> Task:
        task = self.find(task_id)
        if task is None:
            raise NotFoundError(task_id)
        return task

    def find(self, task_id: int) -> Task | None:
        """Get a task by id, or None if it does not exist."""
        with self._lock:
            return self._tasks.get(task_id)

    def delete(self, task_id: int) -> bool:
        with self._lock:
            return self._tasks.pop(task_id, None) is not None

    def update(self, task_id: int, changes: TaskUpdate) -> Task:
        with self._lock:
            task = self.get(task_id)
            for field, value in changes.changes().items():
                if value is None and field not in _NULLABLE_FIELDS:
                    continue
                setattr(task, field, value)
            return task

    def remove_where(self, predicate: Callable[[Task], bool]) -> int:
        with self._lock:
            doomed = [task_id for task_id, task in self._tasks.items() if predicate(task)]
            for task_id in doomed:
                del self._tasks[task_id]
            return len(doomed)

    def all(self) -> list[Task]:
        with self._lock:
            return list(self._tasks.values())

    def size(self) -> int:
        with self._lock:
            return len(self._tasks)

    def load(self) -> None:
        """Replace the in-memory state with the contents of the task file.

        A missing task file yields an empty store. The store stays empty if
        any record fails to decode.

        Raises:
            FormatError: If a record is malformed or an id is duplicated
            StorageError: If the task file cannot be read
        """
        with self._lock:
            self._tasks = {}
            self._next_id = INITIAL_ID

            if not self.path.exists():
                logger.debug("task file %s does not exist, starting empty", self.path)
                return

            tasks = self._read_tasks()
            next_id = max(tasks, default=INITIAL_ID - 1) + 1
            sidecar_id = self._read_sidecar()
            if sidecar_id is not None and sidecar_id > next_id:
                next_id = sidecar_id

            self._tasks = tasks
            self._next_id = max(next_id, INITIAL_ID)
            logger.debug(
                "loaded %d task(s) from %s, next id %d",
                len(tasks),
                self.path,
                self._next_id,
            )

    def _read_tasks(self) -> dict[int, Task]:
        tasks: dict[int, Task] = {}
        try:
            # Binary lines split on b"\n" only: a stray \r inside a title
            # must not end the record
            with self.path.open("rb") as f:
                for line_number, raw in enumerate(f, start=1):
                    line = _decode_line(raw.removesuffix(b"\n"), line_number)
                    if _is_skippable(line):
                        continue
                    try:
                        task = decode_task(line)
                    except FormatError as e:
                        raise e.at_line(line_number, line) from e
                    if task.id in tasks:
                        raise FormatError(
                            f"Duplicate id {task.id}",
                            line=line,
                            line_number=line_number,
                            field="id",
                        )
                    tasks[task.id] = task
        except OSError as e:
            raise StorageError(
                f"Failed to load tasks from {self.path}: {e}", path=self.path
            ) from e
        return tasks

    def _read_sidecar(self) -> int | None:
        if not self.sidecar_path.exists():
            return None
        try:
            return int(self.sidecar_path.read_text(encoding="utf-8").strip())
        except (OSError, ValueError) as e:
            logger.warning("ignoring unreadable id sidecar %s: %s", self.sidecar_path, e)
            return None

    def save(self) -> None:
        """Rewrite the task file and the next-id sidecar.

        The task file is truncated and rewritten in place; a failure part way
        through leaves whatever was written so far.

        Raises:
            StorageError: If either file cannot be written
        """
        with self._lock:
            lines = [FORMAT_MARKER, COLUMN_HEADER]
            lines.extend(encode_task(task) for task in self._tasks.values())
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                with self.path.open("w", encoding="utf-8", newline="\n") as f:
                    f.write("\n".join(lines) + "\n")
            except OSError as e:
                raise StorageError(
                    f"Failed to save tasks to {self.path}: {e}", path=self.path
                ) from e

            try:
                self.sidecar_path.write_text(str(self._next_id), encoding="utf-8")
            except OSError as e:
                raise StorageError(
                    f"Failed to save id counter to {self.sidecar_path}: {e}",
                    path=self.sidecar_path,
                ) from e

            logger.debug(
                "saved %d task(s) to %s, next id %d",
                len(self._tasks),
                self.path,
                self._next_id,
            )
