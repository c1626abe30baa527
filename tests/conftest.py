"""Shared test fixtures and configuration.

Keeps tests away from the real log, config and data directories.
"""

from __future__ import annotations

import io
import logging
from unittest.mock import patch

import pytest
from rich.console import Console


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point every platformdirs lookup at *tmp_path* and reset singletons."""
    import pomorock.utils.logger as logger_mod
    from pomorock.services.config_service import get_config_service

    logger_mod._logger = None
    logging.getLogger("pomorock").handlers.clear()
    get_config_service.cache_clear()

    tmpdir = str(tmp_path)
    with patch("pomorock.utils.logger.user_log_dir", return_value=tmpdir + "/logs"), \
            patch("pomorock.services.config_service.user_config_dir",
                  return_value=tmpdir + "/config"), \
            patch("pomorock.services.history_service.user_data_dir",
                  return_value=tmpdir + "/data"):
        yield tmp_path

    for handler in logging.getLogger("pomorock").handlers:
        handler.close()
    logging.getLogger("pomorock").handlers.clear()
    logger_mod._logger = None
    get_config_service.cache_clear()


@pytest.fixture()
def console():
    """A rich Console writing into a string buffer."""
    return Console(file=io.StringIO(), force_terminal=False, width=100)


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeKeyboard:
    """Stands in for InputMultiplexer.

    ``keys`` maps a tick number (0-based) to the key returned on that tick.
    Each poll advances the shared clock by the full timeout unless a key is
    returned, in which case it advances by ``key_delay``.
    ``typed_ahead`` lists what successive ``drain`` calls report.
    """

    def __init__(
        self,
        clock: FakeClock,
        keys: dict | None = None,
        key_delay: float = 0.3,
        typed_ahead: list | None = None,
    ):
        self.clock = clock
        self.typed_ahead = list(typed_ahead or [])
        self.keys = dict(keys or {})
        self.key_delay = key_delay
        self.polls: list[float] = []
        self.drained = 0

    def poll_key(self, timeout):
        tick = len(self.polls)
        self.polls.append(timeout)
        key = self.keys.get(tick)
        if isinstance(key, BaseException):
            raise key
        if key is not None:
            self.clock.advance(min(self.key_delay, timeout))
            return key
        self.clock.advance(timeout)
        return None

    def drain(self):
        self.drained += 1
        return self.typed_ahead.pop(0) if self.typed_ahead else None


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def make_keyboard(clock):
    """Build a FakeKeyboard sharing the ``clock`` fixture."""

    def _make(
        keys: dict | None = None,
        key_delay: float = 0.3,
        typed_ahead: list | None = None,
    ) -> FakeKeyboard:
        return FakeKeyboard(clock, keys, key_delay, typed_ahead)

    return _make
