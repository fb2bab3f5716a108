"""Command 'search' of tasktrack"""

from typing import Annotated

import typer

from tasktrack_cli.services.config_service import get_config_service
from tasktrack_cli.services.task_service import get_task_service
from tasktrack_cli.utils.ui.formatters import format_output

from .decorators import command_wrapper

app = typer.Typer()


@app.command("search")
@command_wrapper
def search(
    text: Annotated[list[str], typer.Argument(help="Text to find in titles or tags")],
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Output format (table/json/yaml)")
    ] = None,
) -> None:
    """Find tasks whose title or tags contain TEXT (case-insensitive)."""
    output_config = get_config_service().config.output
    matches = get_task_service().search(" ".join(text))
    format_output(
        matches,
        output or output_config.format,
        title_width=output_config.title_width,
        tags_width=output_config.tags_width,
    )
