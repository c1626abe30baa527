"""Countdown rendering for the terminal."""

from rich.console import Console
from rich.control import Control
from rich.segment import ControlType

from pomorock.models.audio import AudioTrack, PlayerCommand
from pomorock.models.timer import Phase, PhaseKind, PhaseResult, TimerConfig
from pomorock.utils.ui.console import get_console


def format_remaining(seconds: int) -> str:
    """Format seconds as MM:SS (minutes are not wrapped at 60)."""
    seconds = max(0, seconds)
    mins, secs = divmod(seconds, 60)
    return f"{mins:02d}:{secs:02d}"


class TimerDisplay:
    """Writes the countdown line and the messages around it."""

    def __init__(self, console: Console | None = None):
        self.console = console or get_console()
        self._line_open = False

    def banner(
        self,
        config: TimerConfig,
        player: PlayerCommand | None,
        alarm: AudioTrack | None = None,
        ambient: AudioTrack | None = None,
    ) -> None:
        """Print the plan for the run and the key hints."""
        session = format_remaining(config.session_seconds)
        pause = format_remaining(config.break_seconds)
        self.console.print(
            f"[bold]🍅 Pomorock[/bold]: {config.total_sessions} x {session} focus, "
            f"{pause} breaks"
        )

        if player is None:
            self.console.print("[yellow]No audio player found, running silently[/yellow]")
        else:
            self.console.print(f"[dim]Audio player: {player.name}[/dim]")
            for label, track in (("Alarm", alarm), ("Ambient", ambient)):
                if track is not None and not track.exists:
                    self.console.print(
                        f"[yellow]{label} file not found: {track.path}[/yellow]"
                    )

        self.console.print("[dim]Press 's' to skip, 'q' to quit[/dim]\n")

    def phase_started(self, phase: Phase, total_sessions: int) -> None:
        if phase.kind == PhaseKind.SESSION:
            self.console.print(
                f"🍅 Session {phase.index}/{total_sessions} starting..."
            )
        else:
            self.console.print("🌿 Break starting...")

    def render_remaining(self, seconds: int) -> None:
        """Overwrite the current line with the time left."""
        self.console.control(
            Control(ControlType.CARRIAGE_RETURN, (ControlType.ERASE_IN_LINE, 2))
        )
        self.console.print(
            f"⏱️  {format_remaining(seconds)} remaining...", end="", highlight=False
        )
        self._line_open = True

    def end_line(self) -> None:
        """Move past the countdown line if one is being drawn."""
        if self._line_open:
            self.console.print()
            self._line_open = False

    def phase_finished(self, phase: Phase, result: PhaseResult) -> None:
        self.end_line()
        if result == PhaseResult.COMPLETED:
            self.console.print(f"[green]{phase.label} finished![/green]")
        elif result == PhaseResult.SKIPPED_BY_USER:
            self.console.print(f"[yellow]{phase.label} skipped.[/yellow]")

    def alarm_ringing(self) -> None:
        self.end_line()
        self.console.print("🔔 Time is up! Press any key to stop the alarm.")

    def farewell(self) -> None:
        self.end_line()
        self.console.print("👋 Bye! Quitting early, no history written.")

    def interrupted(self) -> None:
        self.end_line()
        self.console.print("Exiting.")

    def history_failed(self, error: Exception) -> None:
        self.end_line()
        self.console.print(f"[yellow]Could not write history: {error}[/yellow]")

    def all_done(self, config: TimerConfig) -> None:
        self.console.print(
            f"[bold green]🎉 All {config.total_sessions} sessions done![/bold green]"
        )
