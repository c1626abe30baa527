"""Unit tests for TimerConfig, Phase and the audio descriptions."""

from __future__ import annotations

import pytest

from pomorock.models.audio import AudioTrack, PlayerCommand
from pomorock.models.timer import Phase, PhaseKind, TimerConfig


# ---------------------------------------------------------------------------
# TimerConfig
# ---------------------------------------------------------------------------


class TestTimerConfig:
    def test_from_minutes_converts_to_seconds(self) -> None:
        config = TimerConfig.from_minutes(50, 5, 3)

        assert config.session_seconds == 3000
        assert config.break_seconds == 300
        assert config.total_sessions == 3

    def test_session_minutes_rounds_down(self) -> None:
        assert TimerConfig(2, 1, 2).session_minutes == 0
        assert TimerConfig(150, 1, 1).session_minutes == 2

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"session_seconds": 0, "break_seconds": 1, "total_sessions": 1},
            {"session_seconds": 1, "break_seconds": -5, "total_sessions": 1},
            {"session_seconds": 1, "break_seconds": 1, "total_sessions": 0},
            {"session_seconds": 1.5, "break_seconds": 1, "total_sessions": 1},
        ],
    )
    def test_rejects_invalid_values(self, kwargs) -> None:
        with pytest.raises(ValueError):
            TimerConfig(**kwargs)

    def test_is_immutable(self) -> None:
        config = TimerConfig(60, 60, 1)
        with pytest.raises(AttributeError):
            config.total_sessions = 5  # type: ignore[misc]


class TestPhase:
    def test_labels(self) -> None:
        assert Phase(PhaseKind.SESSION, 1, 10).label == "Session"
        assert Phase(PhaseKind.BREAK, 1, 10).label == "Break"


# ---------------------------------------------------------------------------
# AudioTrack
# ---------------------------------------------------------------------------


class TestAudioTrack:
    def test_resolve_none_when_unset(self) -> None:
        assert AudioTrack.resolve(None) is None
        assert AudioTrack.resolve("") is None

    def test_resolve_existing_file(self, tmp_path) -> None:
        song = tmp_path / "alarm.mp3"
        song.write_bytes(b"ID3")

        track = AudioTrack.resolve(song)

        assert track is not None
        assert track.exists is True
        assert track.path == str(song)

    def test_resolve_missing_file_is_not_an_error(self, tmp_path) -> None:
        track = AudioTrack.resolve(tmp_path / "nope.mp3")

        assert track is not None
        assert track.exists is False


# ---------------------------------------------------------------------------
# PlayerCommand
# ---------------------------------------------------------------------------


class TestPlayerCommand:
    def _mpv(self) -> PlayerCommand:
        return PlayerCommand(
            executable="/usr/bin/mpv",
            argv_template=("/usr/bin/mpv", "--no-video", "{track}"),
            loop_args=("--loop-file=inf",),
        )

    def test_build_argv_substitutes_track(self) -> None:
        track = AudioTrack(path="/music/rain.ogg", exists=True)

        assert self._mpv().build_argv(track) == [
            "/usr/bin/mpv",
            "--no-video",
            "/music/rain.ogg",
        ]

    def test_build_argv_inserts_loop_args_before_track(self) -> None:
        track = AudioTrack(path="/music/rain.ogg", exists=True)

        assert self._mpv().build_argv(track, loop=True) == [
            "/usr/bin/mpv",
            "--no-video",
            "--loop-file=inf",
            "/music/rain.ogg",
        ]

    def test_build_argv_returns_fresh_list(self) -> None:
        command = self._mpv()
        track = AudioTrack(path="a.mp3", exists=True)

        first = command.build_argv(track)
        first.append("junk")

        assert command.build_argv(track) == ["/usr/bin/mpv", "--no-video", "a.mp3"]
        assert command.argv_template == ("/usr/bin/mpv", "--no-video", "{track}")

    def test_loop_ignored_when_player_cannot_loop(self) -> None:
        command = PlayerCommand("/usr/bin/paplay", ("/usr/bin/paplay", "{track}"))
        track = AudioTrack(path="a.wav", exists=True)

        assert command.can_loop is False
        assert command.build_argv(track, loop=True) == ["/usr/bin/paplay", "a.wav"]

    def test_name_is_basename(self) -> None:
        assert self._mpv().name == "mpv"

    @pytest.mark.parametrize(
        "template",
        [("mpv",), ("mpv", "{track}", "{track}")],
    )
    def test_template_needs_exactly_one_slot(self, template) -> None:
        with pytest.raises(ValueError):
            PlayerCommand("mpv", template)
