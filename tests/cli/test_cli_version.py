# topmark:header:start
#
#   project      : TexBundle
#   file         : test_cli_version.py
#   file_relpath : tests/cli/test_cli_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Smoke tests for the `version` command and group-level options."""

from __future__ import annotations

from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli
from texbundle.constants import TEXBUNDLE_VERSION


@mark_cli
def test_version_prints_installed_version() -> None:
    """`texbundle version` prints the package version."""
    result = run_cli(["version"])

    assert_SUCCESS(result)
    assert result.output.strip() == TEXBUNDLE_VERSION


@mark_cli
def test_help_lists_commands() -> None:
    """The group help mentions every command."""
    result = run_cli(["--help"])

    assert_SUCCESS(result)
    for command in ("list", "show", "version"):
        assert command in result.output


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    """Combining -v and -q is a usage error."""
    result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.output
