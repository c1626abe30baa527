"""Tests for the CSV usage log."""

from __future__ import annotations

from datetime import date

from pomorock.services.history_service import HistoryService


class TestAppend:
    def test_writes_csv_line(self, tmp_path):
        log = tmp_path / "pomolog.csv"
        svc = HistoryService(log)

        svc.append(3, 50, day=date(2025, 3, 14))

        assert log.read_text() == "2025-03-14,3,50\n"

    def test_appends_not_overwrites(self, tmp_path):
        log = tmp_path / "pomolog.csv"
        log.write_text("2025-01-01,1,25\n")

        HistoryService(log).append(2, 50, day=date(2025, 1, 2))

        assert log.read_text().splitlines() == ["2025-01-01,1,25", "2025-01-02,2,50"]

    def test_defaults_to_today(self, tmp_path):
        record = HistoryService(tmp_path / "log.csv").append(1, 25)

        assert record.day == date.today()

    def test_default_location_is_user_data_dir(self, isolated_dirs):
        svc = HistoryService()

        svc.append(1, 1)

        assert svc.log_file == isolated_dirs / "data" / "pomolog.csv"
        assert svc.log_file.exists()


class TestSummary:
    def test_missing_file_is_empty(self, tmp_path):
        summary = HistoryService(tmp_path / "none.csv").summary()

        assert summary.total_runs == 0
        assert summary.total_hours == 0
        assert summary.by_day == {}

    def test_totals(self, tmp_path):
        log = tmp_path / "pomolog.csv"
        log.write_text(
            "2025-03-14,3,50\n"
            "2025-03-14,1,25\n"
            "2025-03-15,2,45\n"
        )

        summary = HistoryService(log).summary()

        assert summary.total_runs == 3
        assert summary.total_sessions == 6
        assert summary.total_minutes == 150 + 25 + 90
        assert summary.total_hours == 4  # 265 minutes, rounded down
        assert summary.by_day == {"2025-03-14": 175, "2025-03-15": 90}

    def test_malformed_lines_are_skipped(self, tmp_path):
        log = tmp_path / "pomolog.csv"
        log.write_text(
            "2025-03-14,3,50\n"
            "garbage\n"
            "\n"
            "2025-03-15,two,45\n"
            "not-a-date,1,60\n"
            "2025-03-16,1,60\n"
        )

        summary = HistoryService(log).summary()

        assert summary.total_runs == 2
        assert summary.total_minutes == 210
