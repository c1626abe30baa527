"""State machine driving a single timed phase."""

import math
import time
from collections.abc import Callable

from pomorock.models.audio import AudioTrack, PlayerCommand
from pomorock.models.timer import CountdownState, Key, Phase, PhaseResult
from pomorock.utils.logger import get_logger

from .audio import AudioProcessHandle
from .display import TimerDisplay
from .keyboard import InputMultiplexer

TICK_SECONDS = 1.0
ALARM_LIMIT_SECONDS = 30.0

_RESULTS = {
    CountdownState.COMPLETED: PhaseResult.COMPLETED,
    CountdownState.SKIPPED: PhaseResult.SKIPPED_BY_USER,
    CountdownState.QUITTING: PhaseResult.QUIT_BY_USER,
}


class CountdownController:
    """Runs one phase: starts its audio, counts down, reacts to keys.

    The audio handle is torn down before ``run`` returns, whichever way the
    phase ends, including when an exception (an interrupt) unwinds through it.
    At most one player process is alive at a time: a phase's cue is reaped
    before its track starts.
    """

    def __init__(
        self,
        keyboard: InputMultiplexer,
        display: TimerDisplay,
        player: PlayerCommand | None = None,
        clock: Callable[[], float] = time.monotonic,
        tick: float = TICK_SECONDS,
        alarm_limit: float = ALARM_LIMIT_SECONDS,
    ):
        self.keyboard = keyboard
        self.display = display
        self.player = player
        self.tick = tick
        self.alarm_limit = alarm_limit
        self._clock = clock
        self.state = CountdownState.STARTING
        self.handle: AudioProcessHandle | None = None

    def run(self, phase: Phase) -> PhaseResult:
        logger = get_logger(__name__)
        self.state = CountdownState.STARTING

        # A quit typed between phases still counts; a stray skip does not.
        if self.keyboard.drain() == Key.QUIT:
            logger.info("%s %d: quit typed before start", phase.label, phase.index)
            self.state = CountdownState.QUITTING
            self.handle = AudioProcessHandle()
            result = _RESULTS[self.state]
            self.display.phase_finished(phase, result)
            return result

        cue_playing = phase.cue is not None
        if cue_playing:
            self.handle = AudioProcessHandle.start(self.player, phase.cue)
        else:
            self.handle = AudioProcessHandle.start(
                self.player, phase.track, loop=phase.loop
            )
        logger.info(
            "%s %d started: %ds, audio pid=%s",
            phase.label,
            phase.index,
            phase.duration_seconds,
            self.handle.pid,
        )

        self.state = CountdownState.RUNNING
        started = self._clock()
        try:
            while self.state == CountdownState.RUNNING:
                if cue_playing and not self.handle.running:
                    self.handle.terminate()
                    self.handle = AudioProcessHandle.start(
                        self.player, phase.track, loop=phase.loop
                    )
                    cue_playing = False

                remaining = phase.duration_seconds - (self._clock() - started)
                if remaining <= 0:
                    self.state = CountdownState.COMPLETED
                    break

                self.display.render_remaining(math.ceil(remaining))
                key = self.keyboard.poll_key(min(self.tick, remaining))
                if key == Key.SKIP:
                    self.state = CountdownState.SKIPPED
                elif key == Key.QUIT:
                    self.state = CountdownState.QUITTING
        finally:
            self.handle.terminate()

        result = _RESULTS[self.state]
        logger.info(
            "%s %d ended: %s after %.1fs",
            phase.label,
            phase.index,
            result.value,
            self._clock() - started,
        )
        self.display.phase_finished(phase, result)
        return result

    def ring(self, track: AudioTrack | None) -> None:
        """Play ``track`` once and wait for it to end, a key press, or the limit."""
        self.handle = AudioProcessHandle.start(self.player, track)
        try:
            if not self.handle.running:
                return
            self.display.alarm_ringing()
            deadline = self._clock() + self.alarm_limit
            while self.handle.running:
                remaining = deadline - self._clock()
                if remaining <= 0:
                    break
                if self.keyboard.poll_key(min(self.tick, remaining)) is not None:
                    break
        finally:
            self.handle.terminate()
