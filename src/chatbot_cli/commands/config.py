"""Configuration management commands."""

from typing import Optional

import typer

from chatbot_cli.models.config_models import AppConfig
from chatbot_cli.services.config_service import get_config_service
from chatbot_cli.utils.ui.console import get_console
from chatbot_cli.utils.ui.formatters import format_error, format_success

from .decorators import command_wrapper

app = typer.Typer(help="Configuration management commands")
console = get_console()


@app.command("view")
@command_wrapper
def view_config() -> None:
    """View current configuration."""
    config = get_config_service().config
    for key, value in config.model_dump().items():
        console.print(f"[bold]{key}[/bold] = {value}", highlight=False)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g. data_file)"),
) -> None:
    """Get a configuration value."""
    value = get_config_service().get(key)
    if value is None:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(1)
    console.print(value, highlight=False)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g. log_level)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    if key not in AppConfig.model_fields:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(1)

    parsed_value: str | bool = value
    if value.lower() in ("true", "false"):
        parsed_value = value.lower() == "true"

    try:
        get_config_service().set(key, parsed_value)
    except ValueError as e:
        format_error(str(e))
        raise typer.Exit(1) from e
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if key is not None and key not in AppConfig.model_fields:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(1)

    target = f"'{key}'" if key else "all settings"
    if not yes and not typer.confirm(f"Reset {target} to defaults?"):
        console.print("[yellow]Reset cancelled.[/yellow]")
        return

    get_config_service().reset_config(key)
    format_success(f"Reset {target} to defaults")
