"""Audio track and player command descriptions."""

from dataclasses import dataclass, field
from pathlib import Path

TRACK_PLACEHOLDER = "{track}"


@dataclass(frozen=True)
class AudioTrack:
    """An audio file, checked for existence once when resolved."""

    path: str
    exists: bool

    @classmethod
    def resolve(cls, path: str | Path | None) -> "AudioTrack | None":
        """Resolve a configured path. Returns None when nothing is configured."""
        if not path:
            return None
        expanded = Path(path).expanduser()
        return cls(path=str(expanded), exists=expanded.is_file())


@dataclass(frozen=True)
class PlayerCommand:
    """How to invoke an external audio player.

    ``argv_template`` holds the full argument vector, executable first, with a
    single ``{track}`` slot. ``loop_args`` are inserted just before that slot
    when looping playback is requested; an empty tuple means the player
    cannot loop and plays the track once.
    """

    executable: str
    argv_template: tuple[str, ...]
    loop_args: tuple[str, ...] = field(default=())

    def __post_init__(self):
        if self.argv_template.count(TRACK_PLACEHOLDER) != 1:
            raise ValueError(
                f"argv_template must contain exactly one {TRACK_PLACEHOLDER} slot"
            )

    @property
    def name(self) -> str:
        return Path(self.executable).name

    @property
    def can_loop(self) -> bool:
        return bool(self.loop_args)

    def build_argv(self, track: AudioTrack, loop: bool = False) -> list[str]:
        """Build a fresh argument list with the track path in its slot."""
        argv: list[str] = []
        for arg in self.argv_template:
            if arg == TRACK_PLACEHOLDER:
                if loop:
                    argv.extend(self.loop_args)
                argv.append(track.path)
            else:
                argv.append(arg)
        return argv
