# topmark:header:start
#
#   project      : TexBundle
#   file         : list.py
#   file_relpath : src/texbundle/cli/commands/list.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TexBundle `list` command.

Loads bundle declaration files into a fresh registry and lists the bundles
they declare, in registration order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from texbundle.cli.options import bundle_files_argument, output_format_option
from texbundle.cli.utils import (
    echo_diagnostics,
    echo_lines,
    load_registry,
    render_bundle_summary,
    render_bundle_text,
)
from texbundle.core.formats import OutputFormat, is_machine_format
from texbundle.registry.machine import serialize_bundles

if TYPE_CHECKING:
    from texbundle.core.diagnostics import DiagnosticLog
    from texbundle.registry.registry import BundleRegistry


@click.command(
    name="list",
    help="List the bundles declared in one or more TOML files.",
    epilog="""
Files are loaded in the order given; a bundle may extend bundles declared in an earlier file.
A bundle declared twice is listed once, with the last declaration.
""",
)
@bundle_files_argument
@output_format_option
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show all facets of each bundle.",
)
def list_command(
    *,
    files: tuple[str, ...],
    output_format: OutputFormat,
    show_details: bool = False,
) -> None:
    """List declared bundles.

    Args:
        files (tuple[str, ...]): Declaration files to load.
        output_format (OutputFormat): Output format.
        show_details (bool): If True, render every facet instead of a summary.
    """
    registry: BundleRegistry
    diagnostics: DiagnosticLog
    registry, diagnostics = load_registry(files)

    if is_machine_format(output_format):
        echo_lines(
            serialize_bundles(
                registry,
                fmt=output_format,
                show_details=show_details,
                diagnostics=diagnostics,
            )
        )
        return

    echo_diagnostics(diagnostics)
    click.echo(f"Bundles ({len(registry)}):")
    for name, bundle in registry.as_mapping().items():
        if show_details:
            click.echo(render_bundle_text(bundle))
        else:
            click.echo(f"  {render_bundle_summary(name, bundle)}")
