"""Tests for ConfigService."""

from __future__ import annotations

import json

import pytest

from pomorock.exceptions import ConfigError
from pomorock.models.config_models import AppConfig
from pomorock.services.config_service import ConfigService, get_config_service


@pytest.fixture()
def svc():
    return ConfigService()


class TestLoad:
    def test_defaults_on_first_run(self, svc):
        config = svc.config

        assert config == AppConfig()
        assert config.timer.session_minutes == 50
        assert config.timer.break_minutes == 5
        assert config.timer.total_sessions == 3
        assert config.audio.alarm_file == "./pomorock.mp3"

    def test_config_lives_in_user_config_dir(self, svc, isolated_dirs):
        assert svc.config_path == isolated_dirs / "config" / "config.json"

    def test_loads_saved_file(self, svc):
        svc.config_path.write_text(json.dumps({"timer": {"session_minutes": 25}}))

        assert svc.load_config().timer.session_minutes == 25
        assert svc.config.timer.break_minutes == 5

    def test_invalid_file_raises_config_error(self, svc):
        svc.config_path.write_text(json.dumps({"timer": {"session_minutes": 0}}))

        with pytest.raises(ConfigError):
            svc.load_config()

    def test_corrupt_json_raises_config_error(self, svc):
        svc.config_path.write_text("{not json")

        with pytest.raises(ConfigError):
            svc.load_config()


class TestGetSet:
    def test_get_nested_value(self, svc):
        assert svc.get("timer.total_sessions") == 3

    def test_get_section_returns_dict(self, svc):
        assert svc.get("audio") == {
            "alarm_file": "./pomorock.mp3",
            "ambient_file": None,
            "player": None,
        }

    def test_get_unknown_key_raises(self, svc):
        with pytest.raises(ConfigError):
            svc.get("timer.nope")

    def test_set_persists(self, svc):
        svc.set("audio.player", "mpv")

        saved = json.loads(svc.config_path.read_text())
        assert saved["audio"]["player"] == "mpv"
        assert ConfigService().config.audio.player == "mpv"

    def test_set_validates(self, svc):
        with pytest.raises(ConfigError):
            svc.set("timer.session_minutes", 0)

        assert svc.config.timer.session_minutes == 50

    def test_set_unknown_key_raises(self, svc):
        with pytest.raises(ConfigError):
            svc.set("timer.unknown", 1)


class TestReset:
    def test_reset_single_key(self, svc):
        svc.set("timer.session_minutes", 25)
        svc.set("timer.break_minutes", 10)

        svc.reset("timer.session_minutes")

        assert svc.config.timer.session_minutes == 50
        assert svc.config.timer.break_minutes == 10

    def test_reset_everything(self, svc):
        svc.set("audio.ambient_file", "rain.ogg")

        svc.reset()

        assert svc.config == AppConfig()
        assert json.loads(svc.config_path.read_text())["audio"]["ambient_file"] is None


def test_get_config_service_is_cached():
    assert get_config_service() is get_config_service()
