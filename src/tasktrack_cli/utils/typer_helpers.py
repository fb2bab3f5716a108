"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from rich.markup import escape
from typer.core import TyperGroup

from tasktrack_cli.utils import exit_codes
from tasktrack_cli.utils.ui.console import get_console


class SuggestingGroup(TyperGroup):
    """Top-level group that answers a mistyped command with close matches.

    Hidden aliases (``ls``, ``rm``) are never offered as suggestions.
    """

    max_suggestions = 3
    cutoff = 0.6

    def suggestions_for(self, attempted: str) -> list[str]:
        visible = [name for name, cmd in self.commands.items() if not cmd.hidden]
        return get_close_matches(
            attempted.lower(), visible, n=self.max_suggestions, cutoff=self.cutoff
        )

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            if not args:
                raise
            suggestions = self.suggestions_for(args[0])
            if not suggestions:
                raise

            console = get_console()
            console.print(f"[red]Error:[/red] no such command '{escape(args[0])}'")
            console.print(
                "[yellow]Did you mean:[/yellow] " + ", ".join(suggestions)
            )
            raise typer.Exit(exit_codes.ERROR_INVALID_ARGS) from e
