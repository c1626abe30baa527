"""Configuration models for Pomorock.

The persisted configuration supplies defaults; command-line flags override
them for a single run.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class TimerSettings(BaseModel):
    """Timer defaults."""

    session_minutes: int = Field(default=50, ge=1)
    break_minutes: int = Field(default=5, ge=1)
    total_sessions: int = Field(default=3, ge=1)


class AudioSettings(BaseModel):
    """Audio configuration."""

    alarm_file: str | None = Field(default="./pomorock.mp3")
    ambient_file: str | None = Field(default=None)
    player: str | None = Field(default=None)  # None means auto-detect


class HistorySettings(BaseModel):
    """Usage log configuration."""

    log_file: str | None = Field(default=None)  # None means user_data_dir


class AppConfig(BaseModel):
    """Main configuration."""

    timer: TimerSettings = Field(default_factory=TimerSettings)
    audio: AudioSettings = Field(default_factory=AudioSettings)
    history: HistorySettings = Field(default_factory=HistorySettings)
