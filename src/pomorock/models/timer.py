"""Timer configuration and phase state."""

from dataclasses import dataclass
from enum import Enum

from .audio import AudioTrack


@dataclass(frozen=True)
class TimerConfig:
    """Durations and session count for one run. Immutable once built."""

    session_seconds: int
    break_seconds: int
    total_sessions: int

    def __post_init__(self):
        for name in ("session_seconds", "break_seconds", "total_sessions"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

    @classmethod
    def from_minutes(
        cls, session_minutes: int, break_minutes: int, total_sessions: int
    ) -> "TimerConfig":
        """Build a config from minute values as given on the command line."""
        return cls(
            session_seconds=session_minutes * 60,
            break_seconds=break_minutes * 60,
            total_sessions=total_sessions,
        )

    @property
    def session_minutes(self) -> int:
        """Whole minutes per session, the unit written to the usage log."""
        return self.session_seconds // 60


class PhaseKind(str, Enum):
    SESSION = "session"
    BREAK = "break"


class PhaseResult(str, Enum):
    """How a single phase ended."""

    COMPLETED = "completed"
    SKIPPED_BY_USER = "skipped"
    QUIT_BY_USER = "quit"


class CountdownState(str, Enum):
    STARTING = "starting"
    RUNNING = "running"
    COMPLETED = "completed"
    SKIPPED = "skipped"
    QUITTING = "quitting"


class Key(str, Enum):
    """Keys the countdown reacts to. Everything else is discarded."""

    SKIP = "s"
    QUIT = "q"


@dataclass(frozen=True)
class Phase:
    """One timed interval and the audio that accompanies it.

    ``cue`` plays once as the phase begins; ``track`` starts after the cue
    has finished, so the two never overlap.
    """

    kind: PhaseKind
    index: int
    duration_seconds: int
    track: AudioTrack | None = None
    loop: bool = False
    cue: AudioTrack | None = None

    @property
    def label(self) -> str:
        return "Session" if self.kind == PhaseKind.SESSION else "Break"
