"""Usage log records and their aggregate."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class UsageRecord:
    """One completed run: ``sessions`` sessions of ``minutes`` minutes each."""

    day: date
    sessions: int
    minutes: int

    @property
    def focus_minutes(self) -> int:
        return self.sessions * self.minutes

    def to_row(self) -> list[str]:
        return [self.day.isoformat(), str(self.sessions), str(self.minutes)]


@dataclass
class UsageSummary:
    """Totals across the whole usage log."""

    total_runs: int = 0
    total_sessions: int = 0
    total_minutes: int = 0
    by_day: dict[str, int] = field(default_factory=dict)

    @property
    def total_hours(self) -> int:
        """Whole hours focused, rounded down."""
        return (self.total_minutes * 60) // 3600

    def add(self, record: UsageRecord) -> None:
        self.total_runs += 1
        self.total_sessions += record.sessions
        self.total_minutes += record.focus_minutes
        key = record.day.isoformat()
        self.by_day[key] = self.by_day.get(key, 0) + record.focus_minutes
