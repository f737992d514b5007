# topmark:header:start
#
#   project      : TexBundle
#   file         : show.py
#   file_relpath : src/texbundle/cli/commands/show.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TexBundle `show` command.

Prints a single bundle, optionally composed with further bundles the same way a
parser session layers packages: ``--with`` bundles are appended in order to a
copy of the base bundle.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from texbundle.cli.errors import TexbundleUnknownBundleError, TexbundleUsageError
from texbundle.cli.options import bundle_files_argument, output_format_option
from texbundle.cli.utils import echo_diagnostics, load_registry, render_bundle_text
from texbundle.core.errors import UnknownBundleError
from texbundle.core.formats import OutputFormat
from texbundle.registry.machine import MachineKey, build_json_envelope, build_meta_payload

if TYPE_CHECKING:
    from texbundle.bundle.model import Bundle


@click.command(
    name="show",
    help="Show one bundle, optionally composed with others.",
)
@bundle_files_argument
@click.option(
    "--bundle",
    "-b",
    "bundle_name",
    required=True,
    help="Name of the bundle to show.",
)
@click.option(
    "--with",
    "-w",
    "layers",
    multiple=True,
    help="Append this bundle to the shown one (repeatable, applied in order).",
)
@output_format_option
def show_command(
    *,
    files: tuple[str, ...],
    bundle_name: str,
    layers: tuple[str, ...],
    output_format: OutputFormat,
) -> None:
    """Show a (possibly composed) bundle.

    Args:
        files (tuple[str, ...]): Declaration files to load.
        bundle_name (str): Name of the bundle to show.
        layers (tuple[str, ...]): Bundles appended to a copy of ``bundle_name``.
        output_format (OutputFormat): Output format (NDJSON is not supported).

    Raises:
        TexbundleUsageError: If NDJSON output is requested.
        TexbundleUnknownBundleError: If a named bundle is not declared.
    """
    if output_format == OutputFormat.NDJSON:
        raise TexbundleUsageError("The 'show' command supports only text and json output.")

    registry, diagnostics = load_registry(files)
    try:
        bundle: Bundle = registry.compose(bundle_name, *layers)
    except UnknownBundleError as exc:
        echo_diagnostics(diagnostics)
        raise TexbundleUnknownBundleError(str(exc)) from exc

    if output_format == OutputFormat.JSON:
        envelope: dict[str, object] = build_json_envelope(
            meta=build_meta_payload(),
            **{
                MachineKey.BUNDLE: bundle.to_dict(),
                MachineKey.DIAGNOSTICS: [d.to_dict() for d in diagnostics],
            },
        )
        click.echo(json.dumps(envelope, indent=2))
        return

    echo_diagnostics(diagnostics)
    click.echo(render_bundle_text(bundle))
