"""Interactive countdown core: audio child process, keyboard, terminal mode."""

from .audio import AudioProcessHandle
from .countdown import TICK_SECONDS, CountdownController
from .display import TimerDisplay, format_remaining
from .keyboard import InputMultiplexer
from .orchestrator import (
    SessionOrchestrator,
    install_signal_handlers,
    restore_signal_handlers,
)
from .terminal import TerminalModeGuard

__all__ = [
    "TICK_SECONDS",
    "AudioProcessHandle",
    "CountdownController",
    "InputMultiplexer",
    "SessionOrchestrator",
    "TerminalModeGuard",
    "TimerDisplay",
    "format_remaining",
    "install_signal_handlers",
    "restore_signal_handlers",
]
