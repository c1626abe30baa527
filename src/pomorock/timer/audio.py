"""Lifecycle of the external audio player process."""

import subprocess

from pomorock.exceptions import SpawnFailed
from pomorock.models.audio import AudioTrack, PlayerCommand
from pomorock.utils.logger import get_logger


class AudioProcessHandle:
    """Owns at most one audio player child process.

    A handle without a process is inert: ``running`` is False and
    ``terminate`` does nothing. Playback is best-effort, so a missing player,
    a missing track or a failed spawn all yield an inert handle.
    """

    def __init__(
        self,
        track: AudioTrack | None = None,
        process: subprocess.Popen | None = None,
    ):
        self.track = track
        self._process = process

    @classmethod
    def start(
        cls,
        command: PlayerCommand | None,
        track: AudioTrack | None,
        loop: bool = False,
    ) -> "AudioProcessHandle":
        """Spawn the player for ``track`` and return a handle to it."""
        logger = get_logger(__name__)

        if command is None:
            logger.debug("audio skipped: no audio player available")
            return cls(track=track)

        if track is None or not track.exists:
            logger.debug("audio skipped: track %s not available", track)
            return cls(track=track)

        argv = command.build_argv(track, loop=loop)
        try:
            process = cls._spawn(argv)
        except SpawnFailed as e:
            logger.error("audio player failed to start: %s", e)
            return cls(track=track)

        logger.info("audio player started: pid=%s argv=%s", process.pid, argv)
        return cls(track=track, process=process)

    @staticmethod
    def _spawn(argv: list[str]) -> subprocess.Popen:
        # The player must never read from the terminal the countdown polls.
        try:
            return subprocess.Popen(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except (OSError, ValueError) as e:
            raise SpawnFailed(f"{argv[0]}: {e}") from e

    @property
    def pid(self) -> int | None:
        return self._process.pid if self._process is not None else None

    @property
    def running(self) -> bool:
        """True while the child process is alive."""
        return self._process is not None and self._process.poll() is None

    def terminate(self) -> None:
        """Kill the child if it is alive and reap it. Safe to call repeatedly."""
        process = self._process
        if process is None:
            return

        if process.poll() is None:
            try:
                process.kill()
            except ProcessLookupError:
                pass  # exited between poll() and kill()
        process.wait()

        get_logger(__name__).info(
            "audio player stopped: pid=%s returncode=%s",
            process.pid,
            process.returncode,
        )
        self._process = None
