# topmark:header:start
#
#   project      : TexBundle
#   file         : version.py
#   file_relpath : src/texbundle/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TexBundle `version` command."""

from __future__ import annotations

import click

from texbundle.constants import TEXBUNDLE_VERSION


@click.command(
    name="version",
    help="Show the current version of TexBundle.",
)
def version_command() -> None:
    """Print the installed TexBundle version."""
    click.echo(TEXBUNDLE_VERSION)
