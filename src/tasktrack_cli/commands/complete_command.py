"""Command 'done' of tasktrack"""

from typing import Annotated

import typer

from tasktrack_cli.services.task_service import get_task_service
from tasktrack_cli.utils.ui.console import get_console
from tasktrack_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper

app = typer.Typer()
console = get_console()


@app.command("done")
@command_wrapper
def done(
    task_ids: Annotated[list[int], typer.Argument(help="Task ID(s) - can specify multiple")],
) -> None:
    """Mark one or more tasks as completed."""
    service = get_task_service()
    for task_id in task_ids:
        service.complete_task(task_id)
        format_success(f"Completed #{task_id}.")
    console.print(f"[dim]To undo: tasktrack undone {' '.join(map(str, task_ids))}[/dim]")
