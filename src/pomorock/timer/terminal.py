"""Terminal line-discipline capture and restoration."""

import sys
import termios
import tty
from typing import Optional, TextIO

from rich.console import Console

from pomorock.utils.logger import get_logger
from pomorock.utils.ui.console import get_console


class TerminalModeGuard:
    """Puts the terminal in no-echo cbreak mode and guarantees it comes back.

    The original settings are captured once. ``restore`` may be called from
    any exit path, including a signal handler, any number of times; once a
    call has completed, later calls do nothing.
    """

    def __init__(
        self, stream: Optional[TextIO] = None, console: Optional[Console] = None
    ):
        self.stream = stream if stream is not None else sys.stdin
        self.console = console or get_console()
        self.fd: Optional[int] = None
        self.original: Optional[list] = None
        self.captured = False
        self.restored = False

    def capture(self) -> None:
        """Save the current settings, then disable echo and line buffering."""
        if self.captured:
            raise RuntimeError("Terminal mode has already been captured")
        self.captured = True

        try:
            fd = self.stream.fileno()
            self.original = termios.tcgetattr(fd)
            self.fd = fd
            tty.setcbreak(fd, termios.TCSAFLUSH)
        except (termios.error, AttributeError, OSError, ValueError) as e:
            # Not a TTY (piped input, CI): keys just won't be seen.
            get_logger(__name__).warning("terminal mode unchanged, stdin is not a tty: %s", e)

        self.console.show_cursor(False)

    def restore(self) -> None:
        """Put back the captured settings and show the cursor.

        Only marked done once both steps have run, so a call cut short by a
        signal is completed by the next one.
        """
        if not self.captured or self.restored:
            return

        if self.original is not None and self.fd is not None:
            try:
                termios.tcsetattr(self.fd, termios.TCSAFLUSH, self.original)
            except (termios.error, OSError) as e:
                get_logger(__name__).error("failed to restore terminal settings: %s", e)

        self.console.show_cursor(True)
        self.restored = True

    def __enter__(self) -> "TerminalModeGuard":
        self.capture()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()
