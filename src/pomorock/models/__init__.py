"""Data models for Pomorock."""

from .audio import AudioTrack, PlayerCommand
from .config_models import AppConfig, AudioSettings, HistorySettings, TimerSettings
from .history import UsageRecord, UsageSummary
from .timer import (
    CountdownState,
    Key,
    Phase,
    PhaseKind,
    PhaseResult,
    TimerConfig,
)

__all__ = [
    "AppConfig",
    "AudioSettings",
    "AudioTrack",
    "CountdownState",
    "HistorySettings",
    "Key",
    "Phase",
    "PhaseKind",
    "PhaseResult",
    "PlayerCommand",
    "TimerConfig",
    "TimerSettings",
    "UsageRecord",
    "UsageSummary",
]
