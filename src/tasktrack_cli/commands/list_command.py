"""Command 'list' of tasktrack"""

from typing import Annotated

import typer

from tasktrack_cli.services.config_service import get_config_service
from tasktrack_cli.services.task_service import get_task_service
from tasktrack_cli.utils.ui.formatters import format_output

from .decorators import command_wrapper

app = typer.Typer()


@app.command("list")
@command_wrapper
def list_tasks(
    scope: Annotated[
        str, typer.Argument(help="Which tasks to show: open, done or all")
    ] = "open",
    sort: Annotated[
        str, typer.Option("--sort", "-s", help="Sort by id, due or prio")
    ] = "id",
    rev: Annotated[bool, typer.Option("--rev", "-r", help="Reverse the order")] = False,
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Output format (table/json/yaml)")
    ] = None,
    json_opt: Annotated[
        bool, typer.Option("--json", help="Output as JSON (alias for --output json)")
    ] = False,
) -> None:
    """List tasks (open tasks by default)."""
    output_config = get_config_service().config.output
    if json_opt:
        output = "json"

    tasks = get_task_service().list_tasks(scope=scope, sort=sort, reverse=rev)
    format_output(
        tasks,
        output or output_config.format,
        title_width=output_config.title_width,
        tags_width=output_config.tags_width,
    )
