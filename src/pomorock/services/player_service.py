"""Discovery of an external audio player on this machine."""

import shutil
from collections.abc import Callable
from pathlib import Path

from pomorock.exceptions import PlayerUnavailable
from pomorock.models.audio import TRACK_PLACEHOLDER, PlayerCommand
from pomorock.utils.logger import get_logger

# name -> (arguments before the track, arguments that make it loop)
KNOWN_PLAYERS: dict[str, tuple[tuple[str, ...], tuple[str, ...]]] = {
    "mpv": (("--no-video", "--really-quiet"), ("--loop-file=inf",)),
    "ffplay": (("-nodisp", "-autoexit", "-loglevel", "quiet"), ("-loop", "0")),
    "paplay": ((), ()),
    "pw-play": ((), ()),
    "aplay": (("-q",), ()),
}

# Search order when no player is configured
PLAYER_ORDER = ("mpv", "ffplay", "paplay", "pw-play", "aplay")


class PlayerService:
    """Finds a player executable and describes how to invoke it."""

    def __init__(self, which: Callable[[str], str | None] | None = None):
        self._which = which or shutil.which

    @staticmethod
    def command_for(executable: str) -> PlayerCommand:
        """Build the command for an executable, using known flags if any."""
        args, loop_args = KNOWN_PLAYERS.get(Path(executable).name, ((), ()))
        return PlayerCommand(
            executable=executable,
            argv_template=(executable, *args, TRACK_PLACEHOLDER),
            loop_args=loop_args,
        )

    def find_player(self, preferred: str | None = None) -> PlayerCommand:
        """
        Resolve the player to use.

        Args:
            preferred: Name or path of a player to use instead of searching

        Returns:
            The player command

        Raises:
            PlayerUnavailable: If the preferred player is missing, or none of
                the known players is installed
        """
        if preferred:
            executable = self._which(preferred)
            if executable is None:
                raise PlayerUnavailable(f"Audio player '{preferred}' not found")
            return self.command_for(executable)

        for name in PLAYER_ORDER:
            executable = self._which(name)
            if executable is not None:
                return self.command_for(executable)

        raise PlayerUnavailable(
            f"None of the known audio players is installed: {', '.join(PLAYER_ORDER)}"
        )

    def available_players(self) -> list[tuple[str, str | None]]:
        """List every known player with its path, or None when missing."""
        return [(name, self._which(name)) for name in PLAYER_ORDER]


def resolve_player(
    preferred: str | None = None, service: PlayerService | None = None
) -> PlayerCommand | None:
    """Like ``find_player`` but returns None instead of raising.

    Audio is optional, so the timer runs silently without a player.
    """
    service = service or PlayerService()
    try:
        command = service.find_player(preferred)
    except PlayerUnavailable as e:
        get_logger(__name__).warning("running without audio: %s", e)
        return None

    get_logger(__name__).info("audio player selected: %s", command.executable)
    return command
