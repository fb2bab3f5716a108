"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from tasktrack_cli.models import Priority, Task
from tasktrack_cli.utils.ui.console import get_console

console = get_console()

DEFAULT_TITLE_WIDTH = 40
DEFAULT_TAGS_WIDTH = 20

PRIORITY_STYLES = {
    Priority.HIGH: "bold red",
    Priority.MEDIUM: "yellow",
    Priority.LOW: "dim",
}


def truncate(text: str | None, max_len: int) -> str:
    """Cut ``text`` to ``max_len`` characters, ending with an ellipsis when cut."""
    if text is None:
        return ""
    if len(text) <= max_len:
        return text
    return text[: max(0, max_len - 1)] + "…"


def _single_line(text: str) -> str:
    # Tabs and newlines are legal in titles but would break table rows.
    return text.replace("\t", " ").replace("\n", " ")


def format_output(
    tasks: list[Task],
    output_format: str = "table",
    title_width: int = DEFAULT_TITLE_WIDTH,
    tags_width: int = DEFAULT_TAGS_WIDTH,
) -> None:
    """Format and display tasks based on format."""
    if output_format == "json":
        print(json.dumps(tasks_to_dicts(tasks), indent=2, ensure_ascii=False))
    elif output_format == "yaml":
        print(
            yaml.safe_dump(
                tasks_to_dicts(tasks),
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            ),
            end="",
        )
    else:
        render_task_table(tasks, title_width=title_width, tags_width=tags_width)


def tasks_to_dicts(tasks: list[Task]) -> list[dict[str, Any]]:
    """Convert tasks into JSON-friendly dictionaries."""
    return [task.model_dump(mode="json") for task in tasks]


def render_task_table(
    tasks: list[Task],
    title_width: int = DEFAULT_TITLE_WIDTH,
    tags_width: int = DEFAULT_TAGS_WIDTH,
) -> None:
    """Render tasks as a table: ID, done mark, due date, priority, title, tags."""
    if not tasks:
        console.print("[dim](no tasks)[/dim]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("✔", justify="center")
    table.add_column("Due")
    table.add_column("Prio")
    table.add_column("Title", overflow="fold")
    table.add_column("Tags")

    for task in tasks:
        table.add_row(
            str(task.id),
            "✔" if task.done else "",
            task.due.isoformat() if task.due else "",
            Text(task.priority.name, style=PRIORITY_STYLES[task.priority]),
            Text(truncate(_single_line(task.title), title_width)),
            Text(truncate(_single_line(",".join(task.tags)), tags_width), style="green"),
        )

    console.print(table)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {escape(message)}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {escape(message)}")
