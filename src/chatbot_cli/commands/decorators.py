"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from chatbot_cli.exceptions import ChatBotError
from chatbot_cli.utils.exit_codes import ERROR_GENERAL, ERROR_INVALID_ARGS
from chatbot_cli.utils.logger import get_logger
from chatbot_cli.utils.ui.formatters import format_error


def command_wrapper(func: Callable):
    """Log a Typer command's lifetime and turn failures into exit codes.

    ``ChatBotError`` exits with ``ERROR_INVALID_ARGS``; anything unexpected
    is logged with its traceback and exits with ``ERROR_GENERAL``.
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

        except ChatBotError as e:
            elapsed = time.monotonic() - start
            logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, str(e))
            format_error(str(e))
            raise typer.Exit(code=ERROR_INVALID_ARGS) from e

        except typer.Exit:
            # Re-raise Typer's own exits (like --help or explicit Exit(0))
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
