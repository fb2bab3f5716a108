"""Command 'clear' of tasktrack"""

import typer

from tasktrack_cli.services.task_service import get_task_service
from tasktrack_cli.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper

app = typer.Typer()


@app.command("clear")
@command_wrapper
def clear() -> None:
    """Remove all completed tasks."""
    removed = get_task_service().clear_completed()
    if removed == 0:
        format_info("No completed tasks to clear.")
        return
    format_success(f"Removed {removed} completed task(s).")
