"""Custom exceptions for Pomorock."""


class PomorockError(Exception):
    """Base exception for all Pomorock errors."""


class PlayerUnavailable(PomorockError):
    """Raised when no usable audio player executable can be found."""


class SpawnFailed(PomorockError):
    """Raised when the audio player process cannot be launched."""


class InputReadError(PomorockError):
    """Raised when a keystroke cannot be read from the terminal."""


class InterruptRequested(PomorockError):
    """Raised from the signal handler when the process is asked to stop."""

    def __init__(self, signum: int):
        super().__init__(f"Interrupted by signal {signum}")
        self.signum = signum


class ConfigError(PomorockError):
    """Raised when the configuration file cannot be read or written."""
