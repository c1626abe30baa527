"""Append-only CSV usage log and its aggregate report."""

import csv
from datetime import date
from pathlib import Path

from platformdirs import user_data_dir

from pomorock.models.history import UsageRecord, UsageSummary
from pomorock.utils.logger import get_logger

_LOG_FILE = "pomolog.csv"


class HistoryService:
    """Records finished runs as ``YYYY-MM-DD,sessions,minutes`` lines."""

    def __init__(self, log_file: Path | None = None):
        """Initialize with a log path, defaulting to the user data dir."""
        if log_file is None:
            log_file = Path(user_data_dir("pomorock")) / _LOG_FILE

        self.log_file = Path(log_file).expanduser()

    def append(
        self, total_sessions: int, session_minutes: int, day: date | None = None
    ) -> UsageRecord:
        """Append one run to the log."""
        record = UsageRecord(
            day=day or date.today(),
            sessions=total_sessions,
            minutes=session_minutes,
        )

        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.log_file, "a", newline="", encoding="utf-8") as f:
            csv.writer(f).writerow(record.to_row())

        return record

    def records(self) -> list[UsageRecord]:
        """Read every well-formed line of the log. Missing file means none."""
        if not self.log_file.exists():
            return []

        records = []
        with open(self.log_file, newline="", encoding="utf-8") as f:
            for line_no, row in enumerate(csv.reader(f), start=1):
                try:
                    day, sessions, minutes = row
                    records.append(
                        UsageRecord(
                            day=date.fromisoformat(day.strip()),
                            sessions=int(sessions),
                            minutes=int(minutes),
                        )
                    )
                except ValueError:
                    get_logger(__name__).warning(
                        "skipping malformed line %d in %s: %r",
                        line_no,
                        self.log_file,
                        row,
                    )

        return records

    def summary(self) -> UsageSummary:
        """Aggregate the whole log."""
        summary = UsageSummary()
        for record in self.records():
            summary.add(record)
        return summary
