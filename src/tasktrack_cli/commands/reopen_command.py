"""Command 'undone' of tasktrack"""

from typing import Annotated

import typer

from tasktrack_cli.services.task_service import get_task_service
from tasktrack_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper

app = typer.Typer()


@app.command("undone")
@command_wrapper
def undone(
    task_ids: Annotated[list[int], typer.Argument(help="Task ID(s) - can specify multiple")],
) -> None:
    """Reopen one or more completed tasks."""
    service = get_task_service()
    for task_id in task_ids:
        service.reopen_task(task_id)
        format_success(f"Reopened #{task_id}.")
