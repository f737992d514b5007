# topmark:header:start
#
#   project      : TexBundle
#   file         : errors.py
#   file_relpath : src/texbundle/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the TexBundle CLI.

Raise these in CLI commands to signal errors with standardized messages and
exit codes. Library errors from [`texbundle.core.errors`][texbundle.core.errors]
are converted at the command boundary.
"""

from __future__ import annotations

import click

from texbundle.cli.exit_codes import ExitCode


class TexbundleError(click.ClickException):
    """Base class for all TexBundle CLI errors."""

    exit_code = ExitCode.FAILURE


class TexbundleUsageError(TexbundleError):
    """Error for command-line invocation errors (invalid flag combinations)."""

    exit_code = ExitCode.USAGE_ERROR


class TexbundleUnknownBundleError(TexbundleError):
    """Error when a requested bundle is not declared in the loaded files."""

    exit_code = ExitCode.UNKNOWN_BUNDLE


class TexbundleConfigError(TexbundleError):
    """Error for unreadable or malformed declaration files."""

    exit_code = ExitCode.CONFIG_ERROR
