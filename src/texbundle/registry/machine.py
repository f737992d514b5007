# topmark:header:start
#
#   project      : TexBundle
#   file         : machine.py
#   file_relpath : src/texbundle/registry/machine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Machine output (JSON / NDJSON) for registered bundles.

Layers, from data to wire:
    - *payloads*: plain JSON-serializable lists/dicts built from a registry.
    - *shapes*: payloads wrapped into envelopes (JSON) or records (NDJSON).
    - *serializers*: shapes converted to strings.

Conventions:
    - JSON: one envelope object ``{"meta": ..., "bundles": [...]}``, plus a
      ``"diagnostics"`` list when diagnostics are supplied.
    - NDJSON: one record per entity
      ``{"kind": "bundle", "meta": ..., "bundle": {...}}``; diagnostics become
      ``"diagnostic"`` records after the bundles.
    - Serialized strings carry no trailing newline.

This module is Click-free and console-free.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Final, TypedDict

from texbundle.constants import TEXBUNDLE_TOOL_NAME, TEXBUNDLE_VERSION
from texbundle.core.formats import OutputFormat

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from texbundle.core.diagnostics import Diagnostic
    from texbundle.registry.registry import BundleRegistry


class MachineKey:
    """Canonical keys used in machine-readable envelopes and records."""

    KIND: Final[str] = "kind"
    META: Final[str] = "meta"

    BUNDLE: Final[str] = "bundle"
    BUNDLES: Final[str] = "bundles"
    DIAGNOSTIC: Final[str] = "diagnostic"
    DIAGNOSTICS: Final[str] = "diagnostics"


class MetaPayload(TypedDict):
    """Tool identification attached to every envelope and record."""

    tool: str
    version: str


def build_meta_payload() -> MetaPayload:
    """Return the metadata payload for the running TexBundle version."""
    return MetaPayload(tool=TEXBUNDLE_TOOL_NAME, version=TEXBUNDLE_VERSION)


# --- Payloads ---


def build_bundles_payload(
    registry: BundleRegistry,
    *,
    show_details: bool,
) -> list[dict[str, Any]]:
    """Build the list payload describing every registered bundle.

    Args:
        registry: The registry to describe.
        show_details: If True, include the full facets of each bundle
            (see `Bundle.to_dict`); otherwise only per-facet entry counts.

    Returns:
        One dict per bundle, in registry order. ``name`` is the registry name.
    """
    payload: list[dict[str, Any]] = []
    for name, bundle in registry.as_mapping().items():
        if show_details:
            entry: dict[str, Any] = bundle.to_dict()
            entry["name"] = name
        else:
            entry = {
                "name": name,
                "handler": {category: len(chain) for category, chain in bundle.handler.items()},
                "fallback": len(bundle.fallback),
                "items": len(bundle.items),
                "tags": len(bundle.tags),
                "options": len(bundle.options),
            }
        payload.append(entry)
    return payload


def build_diagnostics_payload(diagnostics: Iterable[Diagnostic]) -> list[dict[str, str]]:
    """Build the list payload for load diagnostics."""
    return [d.to_dict() for d in diagnostics]


# --- Shapes ---


def build_json_envelope(*, meta: MetaPayload, **payloads: object) -> dict[str, object]:
    """Build a JSON envelope with `meta` plus one or more named payloads."""
    out: dict[str, object] = {MachineKey.META: dict(meta)}
    out.update(payloads)
    return out


def build_ndjson_record(*, kind: str, meta: MetaPayload, payload: object) -> dict[str, object]:
    """Build a single NDJSON record ``{"kind": kind, "meta": meta, kind: payload}``."""
    return {
        MachineKey.KIND: kind,
        MachineKey.META: dict(meta),
        kind: payload,
    }


# --- Serializers ---


def serialize_bundles(
    registry: BundleRegistry,
    *,
    fmt: OutputFormat,
    show_details: bool = False,
    diagnostics: Iterable[Diagnostic] | None = None,
) -> str | Iterator[str]:
    """Serialize the registry contents as machine output.

    Args:
        registry: The registry to describe.
        fmt: Target output format (JSON or NDJSON).
        show_details: If True, include the full facets of each bundle.
        diagnostics: Optional load diagnostics to include.

    Returns:
        - JSON: pretty-printed JSON string (no trailing newline)
        - NDJSON: iterator of JSON strings (one per record)

    Raises:
        ValueError: If `fmt` is not JSON or NDJSON.
    """
    meta: MetaPayload = build_meta_payload()
    bundles: list[dict[str, Any]] = build_bundles_payload(registry, show_details=show_details)
    diags: list[dict[str, str]] = build_diagnostics_payload(diagnostics or ())

    if fmt == OutputFormat.JSON:
        payloads: dict[str, object] = {MachineKey.BUNDLES: bundles}
        if diagnostics is not None:
            payloads[MachineKey.DIAGNOSTICS] = diags
        return json.dumps(build_json_envelope(meta=meta, **payloads), indent=2)
    if fmt == OutputFormat.NDJSON:
        return _iter_ndjson(meta, bundles, diags)
    raise ValueError(f"Unsupported machine output format: {fmt!r}")


def _iter_ndjson(
    meta: MetaPayload,
    bundles: list[dict[str, Any]],
    diags: list[dict[str, str]],
) -> Iterator[str]:
    for entry in bundles:
        yield json.dumps(build_ndjson_record(kind=MachineKey.BUNDLE, meta=meta, payload=entry))
    for diag in diags:
        yield json.dumps(build_ndjson_record(kind=MachineKey.DIAGNOSTIC, meta=meta, payload=diag))
