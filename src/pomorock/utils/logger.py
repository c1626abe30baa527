"""File logging for Pomorock.

Nothing is logged to the terminal: while the timer runs, stdin is in cbreak
mode and stdout belongs to the countdown line, so log records go to a
rotating file under the platformdirs user log dir. Modules ask for a child
of the ``pomorock`` logger with ``get_logger(__name__)``.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "pomorock"
_LOG_FILE = "pomorock.log"
_MAX_BYTES = 1024 * 1024  # 1 MB
_BACKUP_COUNT = 2

_logger: logging.Logger | None = None


def _build_logger() -> logging.Logger:
    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s %(process)d [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)
    if not logger.handlers:
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, or its child for module ``name``.

    The file handler is attached to the ``pomorock`` logger on first use;
    children such as ``pomorock.timer.audio`` propagate into it. A name
    outside the package is nested under ``pomorock``.
    """
    global _logger
    if _logger is None:
        _logger = _build_logger()

    if not name or name == _APP_NAME:
        return _logger
    if name.startswith(_APP_NAME + "."):
        name = name[len(_APP_NAME) + 1:]
    return _logger.getChild(name)
