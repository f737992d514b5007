# topmark:header:start
#
#   project      : TexBundle
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running TexBundle against declaration files.

Declaration files are written under `tmp_path` and passed to the CLI as
absolute paths, so the working directory does not matter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from texbundle.cli.exit_codes import ExitCode
from texbundle.cli.main import cli
from texbundle.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from pathlib import Path


BASE_TOML: str = """
[bundles.base]
handler = { character = ["command", "special"], macro = ["base-macros"], environment = ["environment"] }
fallback = { character = "Other", macro = "csUndefined", environment = "envUndefined" }
items = { start = "StartItem", stop = "StopItem" }
options = { maxMacros = 1000, strict = false }

[bundles.ams]
handler = { macro = ["ams-macros", "ams-math"], environment = ["ams-env"] }
tags = { ams = "AmsTags" }
options = { tagSide = "right" }
"""


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI in-process.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["list", "a.toml"]``.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["version"])
        assert_SUCCESS(result)
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv)


@pytest.fixture(autouse=True)
def restore_test_logging() -> Iterator[None]:
    """Reattach TRACE logging to the real stderr after each CLI run.

    The CLI reconfigures the root logger against the runner's captured stream,
    which is closed once the invocation ends.
    """
    yield
    setup_logging(level=TRACE_LEVEL)


@pytest.fixture
def bundles_file(tmp_path: Path) -> Path:
    """Write the standard ``base`` / ``ams`` declarations and return their path."""
    path: Path = tmp_path / "bundles.toml"
    path.write_text(BASE_TOML, encoding="utf-8")
    return path


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_UNKNOWN_BUNDLE(result: Result) -> None:
    """Assert that the command exited with UNKNOWN_BUNDLE (code 69).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.UNKNOWN_BUNDLE, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
