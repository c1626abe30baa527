"""Configuration management commands."""

from typing import Any, Optional

import typer

from pomorock.services.config_service import get_config_service
from pomorock.utils.ui.console import get_console
from pomorock.utils.ui.formatters import format_config, format_error, format_success

from .decorators import command_wrapper

app = typer.Typer(help="Configuration management commands")
console = get_console()


def parse_value(value: str) -> Any:
    """Convert a command-line string to the type it looks like."""
    lowered = value.lower()
    if lowered in ("none", "null", ""):
        return None
    if lowered in ("true", "false"):
        return lowered == "true"
    if value.isdigit():
        return int(value)
    return value


@app.command("view")
@command_wrapper
def view_config() -> None:
    """View current configuration."""
    svc = get_config_service()
    format_config(svc.config.model_dump())
    console.print(f"\n[dim]{svc.config_path}[/dim]")


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., timer.session_minutes)"),
) -> None:
    """Get a configuration value."""
    value = get_config_service().get(key)
    if isinstance(value, dict):
        format_config(value, prefix=f"{key}.")
    else:
        console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., audio.player)"),
    value: str = typer.Argument(..., help="Configuration value ('none' to unset)"),
) -> None:
    """Set a configuration value."""
    parsed_value = parse_value(value)
    get_config_service().set(key, parsed_value)
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        if not typer.confirm(f"Are you sure you want to reset {msg}?"):
            format_error("Cancelled")
            raise typer.Exit(0)

    get_config_service().reset(key)
    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")
