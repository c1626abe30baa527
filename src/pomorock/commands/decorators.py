"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from pomorock.exceptions import ConfigError, InterruptRequested
from pomorock.utils.exit_codes import ERROR_CONFIG, ERROR_GENERAL, SUCCESS
from pomorock.utils.logger import get_logger
from pomorock.utils.ui.console import get_console
from pomorock.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def command_wrapper(func: Callable):
    """Log the command, and turn errors into a message plus an exit code.

    ``typer.Exit`` and ``SystemExit`` (quit and interrupt) pass through. An
    interrupt that lands outside the timer loop also exits with status 0.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except AppError as e:
            elapsed = time.monotonic() - start
            logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, str(e))
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except ConfigError as e:
            elapsed = time.monotonic() - start
            logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, str(e))
            format_error(str(e))
            raise typer.Exit(code=ERROR_CONFIG) from e

        except (InterruptRequested, KeyboardInterrupt) as e:
            logger.warning("command interrupted: %s - %r", cmd, e)
            get_console().print("Exiting.")
            raise typer.Exit(code=SUCCESS) from e

        except typer.Exit:
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
