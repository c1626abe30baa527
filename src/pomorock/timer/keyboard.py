"""Timed keyboard polling for the countdown loop."""

import os
import select
import sys
import time
from collections.abc import Callable
from typing import Optional, TextIO

from pomorock.exceptions import InputReadError
from pomorock.models.timer import Key
from pomorock.utils.logger import get_logger

_KEYS = {key.value: key for key in Key}


class InputMultiplexer:
    """Waits for a skip or quit keystroke for at most one tick.

    Expects the terminal to already be in cbreak mode (see TerminalModeGuard).
    Bytes are read straight from the file descriptor so nothing is held back
    in Python's stdin buffer where ``select`` cannot see it.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.stream = stream if stream is not None else sys.stdin
        self._clock = clock
        self._sleep = sleep

    def fileno(self) -> int:
        try:
            return self.stream.fileno()
        except (AttributeError, OSError, ValueError) as e:
            raise InputReadError(f"stdin has no file descriptor: {e}") from e

    def _read_char(self, timeout: float) -> Optional[str]:
        """Read one character, or return None if nothing arrives in time."""
        fd = self.fileno()
        try:
            ready, _, _ = select.select([fd], [], [], timeout)
            if not ready:
                return None
            data = os.read(fd, 1)
        except (OSError, ValueError) as e:
            raise InputReadError(str(e)) from e

        if not data:
            raise InputReadError("end of input")
        return data.decode("utf-8", errors="ignore").lower()

    def poll_key(self, timeout: float) -> Optional[Key]:
        """
        Wait up to ``timeout`` seconds for 's' or 'q'.

        Returns the key as soon as one is pressed, or None once the budget is
        spent. Other keystrokes are consumed and ignored. A failed read counts
        as a timeout; the rest of the budget is slept away so the caller's
        tick keeps its length.
        """
        deadline = self._clock() + timeout

        while True:
            remaining = deadline - self._clock()
            if remaining <= 0:
                return None

            try:
                char = self._read_char(remaining)
            except InputReadError as e:
                get_logger(__name__).debug("keyboard read failed, treating as timeout: %s", e)
                remaining = deadline - self._clock()
                if remaining > 0:
                    self._sleep(remaining)
                return None

            if char is None:
                return None
            if char in _KEYS:
                return _KEYS[char]

    def drain(self) -> Optional[Key]:
        """Discard anything typed ahead of time.

        Returns ``Key.QUIT`` if a quit was among the discarded input so it is
        not lost between phases. A typed-ahead skip is dropped.
        """
        quit_typed = False
        try:
            fd = self.fileno()
            while select.select([fd], [], [], 0)[0]:
                data = os.read(fd, 1024)
                if not data:
                    break
                if Key.QUIT.value in data.decode("utf-8", errors="ignore").lower():
                    quit_typed = True
        except (InputReadError, OSError, ValueError):
            pass
        return Key.QUIT if quit_typed else None
