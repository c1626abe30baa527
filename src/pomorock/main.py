"""Main entry point for Pomorock."""

from typing import Optional

import typer

from pomorock import __version__
from pomorock.commands import config, timer
from pomorock.utils.exit_codes import SUCCESS
from pomorock.utils.ui.console import get_console

app = typer.Typer(
    name="pomorock",
    help="Pomodoro-style focus timer: sessions, breaks, alarms and history",
)
console = get_console()

app.add_typer(config.app, name="config", help="Configuration management")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    session_minutes: Optional[int] = typer.Option(
        None, "--time", "-t", min=1, help="Session length in minutes [default: 50]"
    ),
    break_minutes: Optional[int] = typer.Option(
        None, "--break", "-d", min=1, help="Break length in minutes [default: 5]"
    ),
    sessions: Optional[int] = typer.Option(
        None, "--sessions", "-n", min=1, help="Number of sessions [default: 3]"
    ),
    alarm: Optional[str] = typer.Option(
        None, "--alarm", help="Alarm sound played when a break starts"
    ),
    ambient: Optional[str] = typer.Option(
        None, "--ambient", help="Background sound looped during sessions"
    ),
    player: Optional[str] = typer.Option(
        None, "--player", help="Audio player name or path (default: auto-detect)"
    ),
    log_file: Optional[str] = typer.Option(
        None, "--log-file", help="CSV usage log to append to"
    ),
    report: bool = typer.Option(
        False, "--report", "-r", help="Print total focused hours and exit"
    ),
) -> None:
    """Run the focus timer. Press 's' to skip a phase, 'q' to quit."""
    if ctx.invoked_subcommand is not None:
        return

    if report:
        timer.show_report(log_file)
        raise typer.Exit(SUCCESS)

    timer.run_timer(
        session_minutes=session_minutes,
        break_minutes=break_minutes,
        sessions=sessions,
        alarm=alarm,
        ambient=ambient,
        player=player,
        log_file=log_file,
    )


@app.command("report")
def report_command(
    log_file: Optional[str] = typer.Option(None, "--log-file", help="CSV usage log"),
) -> None:
    """Show total focused hours and a per-day breakdown."""
    timer.show_report(log_file)


@app.command("players")
def players_command(
    player: Optional[str] = typer.Option(
        None, "--player", help="Audio player name or path to check"
    ),
) -> None:
    """List known audio players and the one that will be used."""
    timer.list_players(player)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Pomorock[/bold] version [cyan]{__version__}[/cyan]")


if __name__ == "__main__":
    app()
