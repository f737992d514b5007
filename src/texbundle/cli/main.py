# topmark:header:start
#
#   project      : TexBundle
#   file         : main.py
#   file_relpath : src/texbundle/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TexBundle CLI entry point.

Group-level options are resolved once: ``-v``/``-q`` choose the log level, and
``TEXBUNDLE_LOG_LEVEL`` takes precedence when set. Logging goes to stderr so
machine output on stdout stays parseable.
"""

from __future__ import annotations

import click

from texbundle.cli.commands.list import list_command
from texbundle.cli.commands.show import show_command
from texbundle.cli.commands.version import version_command
from texbundle.cli.options import common_verbose_options, resolve_verbosity
from texbundle.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Inspect TexBundle parser configuration bundles declared in TOML files.",
)
@common_verbose_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
) -> None:
    """Entry point for the TexBundle CLI."""
    ctx.ensure_object(dict)
    level_cli: int | None = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    level: int | None = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = level
    setup_logging(level=level)
    logger.debug("Log level resolved to %s", level)


cli.add_command(version_command)

cli.add_command(list_command)

cli.add_command(show_command)

if __name__ == "__main__":
    cli()
