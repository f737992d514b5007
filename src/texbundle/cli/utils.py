# topmark:header:start
#
#   project      : TexBundle
#   file         : utils.py
#   file_relpath : src/texbundle/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the TexBundle CLI commands.

Loading declaration files, printing load diagnostics and rendering bundles as
human-readable text live here so the commands stay thin.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click
from yachalk import chalk

from texbundle.cli.errors import TexbundleConfigError
from texbundle.config.io import load_bundles_file
from texbundle.config.logging import get_logger
from texbundle.constants import VALUE_NOT_SET
from texbundle.core.diagnostics import DiagnosticLog
from texbundle.core.errors import BundleConfigError
from texbundle.core.handlers import describe_ref
from texbundle.registry.registry import BundleRegistry

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from texbundle.bundle.model import Bundle
    from texbundle.config.logging import TexbundleLogger

logger: TexbundleLogger = get_logger(__name__)


def load_registry(files: Sequence[str]) -> tuple[BundleRegistry, DiagnosticLog]:
    """Load every declaration file, in order, into a fresh registry.

    Args:
        files: Paths of TOML declaration files.

    Returns:
        The populated registry and the diagnostics collected while loading.

    Raises:
        TexbundleConfigError: If a file cannot be read or is not valid TOML.
    """
    registry = BundleRegistry()
    diagnostics = DiagnosticLog()
    for file in files:
        logger.debug("Loading bundle declarations from %s", file)
        try:
            load_bundles_file(Path(file), registry, diagnostics=diagnostics)
        except BundleConfigError as exc:
            raise TexbundleConfigError(str(exc)) from exc
    return registry, diagnostics


def echo_diagnostics(diagnostics: DiagnosticLog) -> None:
    """Print load diagnostics to stderr, one per line."""
    for diag in diagnostics:
        click.echo(diag.level.color(f"[{diag.level.value}] {diag.message}"), err=True)


def _render_map(title: str, entries: Mapping[str, object]) -> list[str]:
    lines: list[str] = [f"  {title}:"]
    if not entries:
        lines.append(f"    {VALUE_NOT_SET}")
        return lines
    width: int = max(len(key) for key in entries)
    for key, ref in entries.items():
        lines.append(f"    {key:<{width}} : {describe_ref(ref)}")
    return lines


def render_bundle_text(bundle: Bundle) -> str:
    """Render all facets of a bundle as an indented text block."""
    lines: list[str] = [chalk.bold(f"Bundle: {bundle.name}")]
    chains: dict[str, str] = {
        category: ", ".join(chain) if chain else VALUE_NOT_SET
        for category, chain in bundle.handler.items()
    }
    lines.extend(_render_map("handler", chains))
    lines.extend(_render_map("fallback", bundle.fallback))
    lines.extend(_render_map("items", bundle.items))
    lines.extend(_render_map("tags", bundle.tags))
    lines.extend(_render_map("options", bundle.options))
    return "\n".join(lines)


def render_bundle_summary(name: str, bundle: Bundle) -> str:
    """Render one line summarizing a bundle's facet sizes."""
    chains: str = " ".join(
        f"{category}={len(chain)}" for category, chain in bundle.handler.items()
    )
    return (
        f"{name}  [{chains}] fallback={len(bundle.fallback)} items={len(bundle.items)} "
        f"tags={len(bundle.tags)} options={len(bundle.options)}"
    )


def echo_lines(lines: str | Iterable[str]) -> None:
    """Echo a string, or each string of an iterable on its own line."""
    if isinstance(lines, str):
        click.echo(lines)
        return
    for line in lines:
        click.echo(line)
