"""Command 'delete' of tasktrack"""

from typing import Annotated

import typer

from tasktrack_cli.services.task_service import get_task_service
from tasktrack_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper

app = typer.Typer()


@app.command("delete")
@command_wrapper
def delete(
    task_id: Annotated[int, typer.Argument(help="Task ID")],
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Skip confirmation prompt")
    ] = False,
) -> None:
    """Delete a task."""
    service = get_task_service()
    task = service.get_task(task_id)
    if not force:
        typer.confirm(f"Delete #{task.id} '{task.title}'?", abort=True)
    service.delete_task(task_id)
    format_success(f"Deleted #{task_id}.")
