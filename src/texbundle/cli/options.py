# topmark:header:start
#
#   project      : TexBundle
#   file         : options.py
#   file_relpath : src/texbundle/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click options and their resolution helpers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from texbundle.cli.cli_types import EnumChoiceParam
from texbundle.cli.errors import TexbundleUsageError
from texbundle.config.logging import TRACE_LEVEL
from texbundle.core.formats import OutputFormat

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int | None:
    """Resolve the logging level from the ``-v`` / ``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level, or ``None`` when neither flag was given.

    Raises:
        TexbundleUsageError: If both verbose and quiet flags are used.

    Behavior:
        Three or more -v flags set TRACE, two set DEBUG, one sets INFO.
        One or more -q flags set CRITICAL.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise TexbundleUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:
        return logging.CRITICAL
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting -v/--verbose and -q/--quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log critical problems.",
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--format`` option (text, json, ndjson) to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=OutputFormat.TEXT.value,
        show_default=True,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)


def bundle_files_argument(f: Callable[P, R]) -> Callable[P, R]:
    """Add the variadic FILES argument (existing TOML declaration files)."""
    return click.argument(
        "files",
        nargs=-1,
        required=True,
        type=click.Path(exists=True, dir_okay=False, path_type=str),
    )(f)
