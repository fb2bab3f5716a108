"""Main entry point for tasktrack."""

from pathlib import Path
from typing import Annotated

import typer

from tasktrack_cli import __version__
from tasktrack_cli.commands import (
    add_command,
    clear_command,
    complete_command,
    config,
    delete_command,
    edit_command,
    list_command,
    reopen_command,
    search_command,
    shell_command,
)
from tasktrack_cli.services.config_service import get_config_service
from tasktrack_cli.utils import exit_codes
from tasktrack_cli.utils.typer_helpers import SuggestingGroup
from tasktrack_cli.utils.ui.console import get_console, set_color
from tasktrack_cli.utils.ui.formatters import format_error

# Create main app with custom group class
app = typer.Typer(
    name="tasktrack",
    cls=SuggestingGroup,
    help="A single-user task tracker that keeps its tasks in a TSV file",
    no_args_is_help=True,
)

console = get_console()


@app.callback()
def main_callback(
    file: Annotated[
        Path | None,
        typer.Option(
            "--file",
            "-f",
            help="Task file to use (overrides $TASKTRACK_FILE and storage.path)",
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """A single-user task tracker that keeps its tasks in a TSV file."""
    config_svc = get_config_service()
    if file is not None:
        config_svc.data_file_override = file
    try:
        output_config = config_svc.config.output
    except RuntimeError as e:
        format_error(str(e))
        raise typer.Exit(code=exit_codes.ERROR_GENERAL) from e
    set_color(output_config.color)


# Add subcommands
app.add_typer(config.app, name="config", help="Configuration management")

# Add top-level commands
app.command("add")(add_command.add)
app.command("list")(list_command.list_tasks)
app.command("ls", hidden=True)(list_command.list_tasks)
app.command("done")(complete_command.done)
app.command("undone")(reopen_command.undone)
app.command("edit")(edit_command.edit)
app.command("delete")(delete_command.delete)
app.command("rm", hidden=True)(delete_command.delete)
app.command("search")(search_command.search)
app.command("clear")(clear_command.clear)
app.command("shell")(shell_command.shell)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]tasktrack[/bold] version [cyan]{__version__}[/cyan]")


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
