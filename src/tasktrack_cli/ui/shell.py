"""Interactive shell: one command per line, ``/flag value`` arguments."""

from __future__ import annotations

import logging
from collections.abc import Callable

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory

from tasktrack_cli.models import InvalidInputError, TaskTrackError, TaskUpdate
from tasktrack_cli.services.task_service import LIST_SCOPES, SORT_KEYS, TaskService
from tasktrack_cli.utils.parsing import (
    leading_text,
    parse_date,
    parse_flags,
    parse_id,
    parse_priority,
    parse_tags,
)
from tasktrack_cli.utils.ui.console import get_console
from tasktrack_cli.utils.ui.formatters import (
    format_error,
    format_warning,
    render_task_table,
)

logger = logging.getLogger(__name__)

HELP_TEXT = """\
  add <title> [/due yyyy-mm-dd] [/p low|med|high] [/tags tag1,tag2]
  list [all|open|done] [/sort id|due|prio] [/rev]
  done <id>      mark complete
  undone <id>    mark incomplete
  edit <id> [/t new title] [/due yyyy-mm-dd|none] [/p low|med|high] [/tags list|none]
  del <id>       delete task
  search <text>  find in titles or tags
  clear          remove all completed tasks
  save           persist now (auto-saves on exit)
  exit           save & quit"""


class TaskShell:
    """Read-eval-print loop over a :class:`TaskService`."""

    def __init__(
        self,
        service: TaskService,
        storage_label: str = "",
        title_width: int = 40,
        tags_width: int = 20,
    ):
        self.service = service
        self.storage_label = storage_label
        self.title_width = title_width
        self.tags_width = tags_width
        self.console = get_console()
        self._handlers: dict[str, Callable[[str], None]] = {
            "help": self._help,
            "?": self._help,
            "add": self._add,
            "list": self._list,
            "ls": self._list,
            "done": lambda rest: self._set_done(rest, True),
            "undone": lambda rest: self._set_done(rest, False),
            "edit": self._edit,
            "del": self._delete,
            "rm": self._delete,
            "search": self._search,
            "clear": self._clear,
            "save": self._save,
        }

    @property
    def command_names(self) -> list[str]:
        return [*self._handlers, "exit", "quit"]

    def run(self, session: PromptSession | None = None) -> None:
        """Prompt for commands until ``exit``/``quit`` or end of input."""
        if session is None:
            session = PromptSession(
                history=InMemoryHistory(),
                completer=WordCompleter(self.command_names, sentence=True),
            )
        self.console.print("\n[bold]===== tasktrack =====[/bold]")
        if self.storage_label:
            self.console.print(f"Storage: {self.storage_label}", markup=False)
        self._help("")
        while True:
            try:
                line = session.prompt("\n> ")
            except KeyboardInterrupt:
                continue
            except EOFError:
                self.execute("exit")
                return
            if not self.execute(line):
                return

    def execute(self, line: str) -> bool:
        """Run one command line. Returns False when the shell should stop."""
        line = line.strip()
        if not line:
            return True
        op, _, rest = line.partition(" ")
        op = op.lower()
        rest = rest.strip()

        if op in ("exit", "quit"):
            try:
                self.service.save()
            except TaskTrackError as e:
                format_error(str(e))
                return True
            self.console.print("Saved. Bye!")
            return False

        handler = self._handlers.get(op)
        if handler is None:
            self.console.print("Unknown command. Type 'help' for commands.")
            return True
        try:
            handler(rest)
        except TaskTrackError as e:
            logger.info("shell command %r failed: %s", op, e)
            format_error(str(e))
        return True

    def _render(self, tasks) -> None:
        render_task_table(tasks, title_width=self.title_width, tags_width=self.tags_width)

    def _help(self, rest: str) -> None:
        self.console.print("\n[bold]Commands:[/bold]")
        self.console.print(HELP_TEXT, markup=False, highlight=False)

    def _add(self, rest: str) -> None:
        flags = parse_flags(rest)
        task = self.service.add_task(
            leading_text(rest),
            due=parse_date(flags.get("/due")),
            priority=parse_priority(flags.get("/p")),
            tags=parse_tags(flags.get("/tags")),
        )
        self.console.print(f"Added #{task.id}: {task.title}", markup=False)

    def _list(self, rest: str) -> None:
        flags = parse_flags(rest)
        scope = leading_text(rest).lower()
        sort = (flags.get("/sort") or "id").lower()
        if sort not in SORT_KEYS:
            format_warning(f"Unknown sort key '{sort}', sorting by id.")
            sort = "id"
        if scope and scope not in LIST_SCOPES:
            format_warning(f"Unknown list scope '{scope}', showing open tasks.")
            scope = "open"
        reverse = "/rev" in flags
        self._render(self.service.list_tasks(scope=scope, sort=sort, reverse=reverse))

    def _set_done(self, rest: str, done: bool) -> None:
        task_id = parse_id(rest)
        if done:
            self.service.complete_task(task_id)
            self.console.print(f"Completed #{task_id}.")
        else:
            self.service.reopen_task(task_id)
            self.console.print(f"Reopened #{task_id}.")

    def _edit(self, rest: str) -> None:
        id_text, _, flag_text = rest.partition(" ")
        if not id_text:
            raise InvalidInputError("Usage: edit <id> [flags]")
        task_id = parse_id(id_text)
        flags = parse_flags(flag_text)

        fields = {}
        if "/t" in flags:
            fields["title"] = flags["/t"]
        if "/due" in flags:
            fields["due"] = parse_date(flags["/due"])
        if "/p" in flags:
            fields["priority"] = parse_priority(flags["/p"])
        if "/tags" in flags:
            fields["tags"] = parse_tags(flags["/tags"])

        if fields:
            self.service.edit_task(task_id, TaskUpdate(**fields))
        else:
            self.service.get_task(task_id)
        self.console.print(f"Edited #{task_id}.")

    def _delete(self, rest: str) -> None:
        task_id = parse_id(rest)
        self.service.delete_task(task_id)
        self.console.print(f"Deleted #{task_id}.")

    def _search(self, rest: str) -> None:
        self._render(self.service.search(rest))

    def _clear(self, rest: str) -> None:
        removed = self.service.clear_completed()
        self.console.print(f"Removed {removed} completed task(s).")

    def _save(self, rest: str) -> None:
        self.service.save()
        self.console.print("Saved.")
