"""Sequencing of sessions and breaks for a whole run."""

import signal
from collections.abc import Callable, Iterator

from pomorock.exceptions import InterruptRequested
from pomorock.models.audio import AudioTrack
from pomorock.models.timer import Phase, PhaseKind, PhaseResult, TimerConfig
from pomorock.utils.exit_codes import SUCCESS
from pomorock.utils.logger import get_logger

from .countdown import CountdownController
from .display import TimerDisplay
from .terminal import TerminalModeGuard

_HANDLED_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def _raise_interrupt(signum, frame):
    # First signal wins: further ones are ignored while cleanup runs.
    for sig in _HANDLED_SIGNALS:
        signal.signal(sig, signal.SIG_IGN)
    raise InterruptRequested(signum)


def install_signal_handlers() -> dict:
    """Turn SIGINT/SIGTERM into InterruptRequested. Returns the old handlers.

    Signals already routed here by an outer call are left alone and not
    returned, so nested install/restore pairs never re-arm a handler the
    outer one has switched off.
    """
    previous = {}
    for sig in _HANDLED_SIGNALS:
        if signal.getsignal(sig) is _raise_interrupt:
            continue
        try:
            previous[sig] = signal.signal(sig, _raise_interrupt)
        except ValueError as e:
            # Only the main thread may install handlers.
            get_logger(__name__).warning("cannot install handler for %s: %s", sig, e)
    return previous


def restore_signal_handlers(previous: dict) -> None:
    for sig, handler in previous.items():
        signal.signal(sig, handler if handler is not None else signal.SIG_DFL)


class SessionOrchestrator:
    """Runs N sessions separated by N-1 breaks, then records the run.

    Quitting with 'q' or receiving SIGINT/SIGTERM restores the terminal and
    exits the process with status 0 straight away; the usage log is only
    written after every phase has run.
    """

    def __init__(
        self,
        controller: CountdownController,
        display: TimerDisplay,
        terminal: TerminalModeGuard,
        log_writer: Callable[[int, int], object],
        ambient: AudioTrack | None = None,
        alarm: AudioTrack | None = None,
    ):
        self.controller = controller
        self.display = display
        self.terminal = terminal
        self.log_writer = log_writer
        self.ambient = ambient
        self.alarm = alarm

    def phases(self, config: TimerConfig) -> Iterator[Phase]:
        """Yield Session, Break, Session, ... ending with a session.

        Every phase after the first opens with the alarm; sessions then loop
        the ambient track.
        """
        for i in range(1, config.total_sessions + 1):
            yield Phase(
                kind=PhaseKind.SESSION,
                index=i,
                duration_seconds=config.session_seconds,
                track=self.ambient,
                loop=True,
                cue=self.alarm if i > 1 else None,
            )
            if i < config.total_sessions:
                yield Phase(
                    kind=PhaseKind.BREAK,
                    index=i,
                    duration_seconds=config.break_seconds,
                    cue=self.alarm,
                )

    def run(self, config: TimerConfig) -> None:
        logger = get_logger(__name__)
        previous = install_signal_handlers()
        try:
            for phase in self.phases(config):
                self.display.phase_started(phase, config.total_sessions)
                result = self.controller.run(phase)
                if result == PhaseResult.QUIT_BY_USER:
                    logger.info("quit requested during %s %d", phase.label, phase.index)
                    self._shutdown(self.display.farewell)

            self.controller.ring(self.alarm)
            self._write_log(config)
        except (InterruptRequested, KeyboardInterrupt) as e:
            logger.warning("run interrupted: %s", e)
            self._shutdown(self.display.interrupted)
        finally:
            self.terminal.restore()
            restore_signal_handlers(previous)

        self.display.all_done(config)

    def _write_log(self, config: TimerConfig) -> None:
        logger = get_logger(__name__)
        try:
            self.log_writer(config.total_sessions, config.session_minutes)
        except OSError as e:
            logger.error("failed to write usage log: %s", e)
            self.display.history_failed(e)
        else:
            logger.info(
                "usage logged: %d sessions x %d min",
                config.total_sessions,
                config.session_minutes,
            )

    def _shutdown(self, message: Callable[[], None]) -> None:
        self.terminal.restore()
        message()
        raise SystemExit(SUCCESS)
