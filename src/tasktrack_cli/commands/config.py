"""Configuration management commands."""

from typing import Optional

import typer

from tasktrack_cli.services.config_service import get_config_service
from tasktrack_cli.utils import exit_codes
from tasktrack_cli.utils.logger import get_log_file
from tasktrack_cli.utils.ui.console import get_console
from tasktrack_cli.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management commands")
console = get_console()


@app.command("show")
@command_wrapper
def show_config() -> None:
    """Show the current configuration and the resolved task file."""
    config_svc = get_config_service()
    console.print(f"[bold]Config file:[/bold] {config_svc.config_path}")
    console.print(f"[bold]Task file:[/bold]   {config_svc.data_path}")
    console.print(f"[bold]Id sidecar:[/bold]  {config_svc.sidecar_path}")
    console.print(f"[bold]Log file:[/bold]    {get_log_file()}")
    console.print_json(config_svc.config.model_dump_json())


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., storage.path)"),
) -> None:
    """Get a configuration value."""
    try:
        value = get_config_service().get(key)
    except KeyError:
        raise AppError(
            f"Configuration key '{key}' not found", exit_codes.ERROR_INVALID_ARGS
        ) from None
    console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., output.format)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    try:
        get_config_service().set(key, value)
    except KeyError:
        raise AppError(
            f"Configuration key '{key}' not found", exit_codes.ERROR_INVALID_ARGS
        ) from None
    except ValueError as e:
        raise AppError(str(e), exit_codes.ERROR_INVALID_ARGS) from e
    format_success(f"Configuration '{key}' set to '{value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        target = f"'{key}'" if key else "all configuration"
        typer.confirm(f"Reset {target} to defaults?", abort=True)
    try:
        get_config_service().reset(key)
    except KeyError:
        raise AppError(
            f"Configuration key '{key}' not found", exit_codes.ERROR_INVALID_ARGS
        ) from None
    format_success("Configuration reset to defaults")
