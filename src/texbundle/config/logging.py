# topmark:header:start
#
#   project      : TexBundle
#   file         : logging.py
#   file_relpath : src/texbundle/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom TexBundle logging with TRACE logging.

This module extends the standard logging module with TexBundle-specific features,
including a custom TRACE level, a specialized logger class, and colored output formatting.

Registry mutations are logged at TRACE, bundle composition at DEBUG, and inputs that
are silently dropped or coerced during a permissive merge at WARNING.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from texbundle.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

# Define TRACE_LEVEL as a module-level constant
TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class TexbundleLogger(logging.Logger):
    """Custom logger class for TexBundle with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    # Expose TRACE_LEVEL as logging.TRACE
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(TexbundleLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record by severity with `yachalk`.

    ``LEVEL_COLORS`` is scanned from the most severe threshold down; records
    below TRACE are dimmed red.
    """

    LEVEL_COLORS: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
        (logging.CRITICAL, chalk.red_bright),
        (logging.ERROR, chalk.red),
        (logging.WARNING, chalk.yellow),
        (logging.INFO, chalk.green),
        (logging.DEBUG, chalk.gray),
        (TRACE_LEVEL, chalk.blue),
    )

    def format(self, record: logging.LogRecord) -> str:
        """Format the record, then colorize it.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized message.
        """
        message: str = super().format(record)
        for threshold, color in self.LEVEL_COLORS:
            if record.levelno >= threshold:
                return color(message)
        return chalk.dim.red(message)


_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level() -> int | None:
    """Return a logging level from environment or None if unset.

    Honors TEXBUNDLE_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    Unrecognized values resolve to None.
    """
    val = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a specified log level and colored output.

    If ``level`` is None, the environment is consulted via
    [`resolve_env_log_level`][texbundle.config.logging.resolve_env_log_level].
    Default is CRITICAL when unspecified.

    Output goes to ``sys.stderr`` so that machine output on stdout stays clean.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove all existing handlers to prevent duplicate log messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    # Use the compact format for info and above, the detailed one otherwise
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> TexbundleLogger:
    """Retrieve a TexbundleLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        TexbundleLogger: A TexbundleLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("TexbundleLogger", logger)
