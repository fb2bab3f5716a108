"""Command 'add' of tasktrack"""

from typing import Annotated

import typer

from tasktrack_cli.services.task_service import get_task_service
from tasktrack_cli.utils.parsing import parse_date, parse_priority, parse_tags
from tasktrack_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper

app = typer.Typer()


@app.command("add")
@command_wrapper
def add(
    title: Annotated[list[str], typer.Argument(help="Task title (words are joined)")],
    due: Annotated[
        str | None, typer.Option("--due", "-d", help="Due date (YYYY-MM-DD)")
    ] = None,
    priority: Annotated[
        str | None, typer.Option("--priority", "-p", help="Priority (low/med/high)")
    ] = None,
    tags: Annotated[
        str | None, typer.Option("--tags", "-t", help="Comma-separated tags")
    ] = None,
) -> None:
    """
    Add a task.

    Examples:
      tasktrack add Buy milk --due 2025-08-31 -p high -t home,errands
      tasktrack add "Write report"
    """
    service = get_task_service()
    task = service.add_task(
        " ".join(title),
        due=parse_date(due),
        priority=parse_priority(priority),
        tags=parse_tags(tags),
    )
    format_success(f"Added #{task.id}: {task.title}")
