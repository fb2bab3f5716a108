"""Command 'shell' of tasktrack"""

import typer

from tasktrack_cli.services.config_service import get_config_service
from tasktrack_cli.services.task_service import get_task_service
from tasktrack_cli.ui.shell import TaskShell

from .decorators import command_wrapper

app = typer.Typer()


@app.command("shell")
@command_wrapper
def shell() -> None:
    """
    Start an interactive session.

    Commands use a /flag syntax, e.g. `add Buy milk /due 2025-08-31 /p high`.
    Type `help` inside the shell for the full list; `exit` saves and quits.
    """
    config_svc = get_config_service()
    output_config = config_svc.config.output
    TaskShell(
        get_task_service(),
        storage_label=str(config_svc.data_path),
        title_width=output_config.title_width,
        tags_width=output_config.tags_width,
    ).run()
