"""Output formatters for messages and usage reports."""

from rich.table import Table

from pomorock.utils.ui.console import get_console

console = get_console()


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")


def format_config(data: dict, prefix: str = "") -> None:
    """Print a nested config dictionary as dot-separated key/value lines."""
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict):
            format_config(value, prefix=f"{full_key}.")
        else:
            shown = "[dim]unset[/dim]" if value is None else value
            console.print(f"[cyan]{full_key}[/cyan] = {shown}")


def usage_table(by_day: dict[str, int]) -> Table:
    """Build a table of focused minutes per day."""
    table = Table(title="Focus history", show_header=True)
    table.add_column("Date", style="cyan")
    table.add_column("Minutes", justify="right")
    table.add_column("Hours", justify="right")

    for day, minutes in sorted(by_day.items()):
        table.add_row(day, str(minutes), f"{minutes / 60:.1f}")

    return table
