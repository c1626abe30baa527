"""Focus timer, usage report and player listing commands."""

from pathlib import Path

from pomorock.models.audio import AudioTrack
from pomorock.models.timer import TimerConfig
from pomorock.services.config_service import get_config_service
from pomorock.services.history_service import HistoryService
from pomorock.services.player_service import PlayerService, resolve_player
from pomorock.timer import (
    CountdownController,
    InputMultiplexer,
    SessionOrchestrator,
    TerminalModeGuard,
    TimerDisplay,
    install_signal_handlers,
    restore_signal_handlers,
)
from pomorock.utils.exit_codes import ERROR_INVALID_ARGS
from pomorock.utils.ui.console import get_console
from pomorock.utils.ui.formatters import usage_table

from .decorators import AppError, command_wrapper

console = get_console()


def _history_service(log_file: str | None) -> HistoryService:
    configured = log_file or get_config_service().config.history.log_file
    return HistoryService(Path(configured) if configured else None)


@command_wrapper
def run_timer(
    session_minutes: int | None = None,
    break_minutes: int | None = None,
    sessions: int | None = None,
    alarm: str | None = None,
    ambient: str | None = None,
    player: str | None = None,
    log_file: str | None = None,
) -> None:
    """Run the sessions and breaks, then record the run."""
    settings = get_config_service().config

    try:
        config = TimerConfig.from_minutes(
            session_minutes or settings.timer.session_minutes,
            break_minutes or settings.timer.break_minutes,
            sessions or settings.timer.total_sessions,
        )
    except ValueError as e:
        raise AppError(str(e), exit_code=ERROR_INVALID_ARGS) from e

    player_command = resolve_player(player or settings.audio.player)
    alarm_track = AudioTrack.resolve(alarm or settings.audio.alarm_file)
    ambient_track = AudioTrack.resolve(ambient or settings.audio.ambient_file)
    history = _history_service(log_file)

    display = TimerDisplay(console)
    display.banner(config, player_command, alarm=alarm_track, ambient=ambient_track)

    # SIGINT/SIGTERM raise InterruptRequested from here until the guard has
    # put the terminal back.
    previous = install_signal_handlers()
    try:
        with TerminalModeGuard(console=console) as terminal:
            controller = CountdownController(
                InputMultiplexer(), display, player=player_command
            )
            orchestrator = SessionOrchestrator(
                controller,
                display,
                terminal,
                log_writer=history.append,
                ambient=ambient_track,
                alarm=alarm_track,
            )
            orchestrator.run(config)
    finally:
        restore_signal_handlers(previous)


@command_wrapper
def show_report(log_file: str | None = None) -> None:
    """Print total focused hours from the usage log."""
    history = _history_service(log_file)
    summary = history.summary()

    if summary.total_runs == 0:
        console.print(f"[yellow]No history yet in {history.log_file}[/yellow]")
        return

    console.print(usage_table(summary.by_day))
    console.print(
        f"\n{summary.total_sessions} sessions, {summary.total_minutes} minutes"
    )
    console.print(f"Total hours spent focused: {summary.total_hours}h 🍅🤓")


@command_wrapper
def list_players(player: str | None = None) -> None:
    """Show which known audio players are installed and which one is used."""
    service = PlayerService()
    preferred = player or get_config_service().config.audio.player
    selected = resolve_player(preferred, service=service)

    for name, path in service.available_players():
        if path:
            console.print(f"[green]✓[/green] {name:<8} {path}")
        else:
            console.print(f"[dim]✗ {name:<8} not installed[/dim]")

    if selected is None:
        console.print("\n[yellow]No audio player available, timer runs silently[/yellow]")
    else:
        console.print(f"\nUsing: [bold]{selected.executable}[/bold]")
