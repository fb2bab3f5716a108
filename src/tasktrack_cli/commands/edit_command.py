"""Command 'edit' of tasktrack"""

from typing import Annotated, Any

import typer

from tasktrack_cli.models import InvalidInputError, TaskUpdate
from tasktrack_cli.services.task_service import get_task_service
from tasktrack_cli.utils.parsing import parse_date, parse_priority, parse_tags
from tasktrack_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper

app = typer.Typer()


@app.command("edit")
@command_wrapper
def edit(
    task_id: Annotated[int, typer.Argument(help="Task ID")],
    title: Annotated[str | None, typer.Option("--title", "-T", help="New title")] = None,
    due: Annotated[
        str | None, typer.Option("--due", "-d", help="New due date (YYYY-MM-DD or none)")
    ] = None,
    priority: Annotated[
        str | None, typer.Option("--priority", "-p", help="New priority (low/med/high)")
    ] = None,
    tags: Annotated[
        str | None, typer.Option("--tags", "-t", help="Replacement tags (comma list or none)")
    ] = None,
) -> None:
    """Edit a task. Only the options given are changed."""
    fields: dict[str, Any] = {}
    if title is not None:
        fields["title"] = title
    if due is not None:
        fields["due"] = parse_date(due)
    if priority is not None:
        fields["priority"] = parse_priority(priority)
    if tags is not None:
        fields["tags"] = parse_tags(tags)
    if not fields:
        raise InvalidInputError("Nothing to change. Use --title, --due, --priority or --tags")

    get_task_service().edit_task(task_id, TaskUpdate(**fields))
    format_success(f"Edited #{task_id}.")
