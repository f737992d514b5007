# topmark:header:start
#
#   project      : TexBundle
#   file         : test_registry_machine.py
#   file_relpath : tests/registry/test_registry_machine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for JSON and NDJSON serialization of registered bundles."""

from __future__ import annotations

import json
from typing import Any

import pytest

from texbundle.constants import TEXBUNDLE_TOOL_NAME
from texbundle.core.diagnostics import DiagnosticLog
from texbundle.core.formats import OutputFormat, is_machine_format
from texbundle.registry.machine import MachineKey, serialize_bundles
from texbundle.registry.registry import BundleRegistry


@pytest.fixture
def populated() -> BundleRegistry:
    """A registry holding two bundles."""
    registry = BundleRegistry()
    registry.create("base", handler={"macro": ["m1", "m2"]}, options={"strict": True})
    registry.create("ams", handler={"environment": ["ams-env"]}, tags={"ams": "AmsTags"})
    return registry


def test_json_brief_envelope(populated: BundleRegistry) -> None:
    """Brief JSON output carries per-facet counts and tool metadata."""
    out = serialize_bundles(populated, fmt=OutputFormat.JSON)
    assert isinstance(out, str)
    assert not out.endswith("\n")

    data: dict[str, Any] = json.loads(out)
    assert data[MachineKey.META]["tool"] == TEXBUNDLE_TOOL_NAME
    assert MachineKey.DIAGNOSTICS not in data

    names = [entry["name"] for entry in data[MachineKey.BUNDLES]]
    assert names == ["base", "ams"]

    base = data[MachineKey.BUNDLES][0]
    assert base["handler"]["macro"] == 2
    assert base["handler"]["character"] == 0
    assert base["options"] == 1
    assert base["tags"] == 0


def test_json_details(populated: BundleRegistry) -> None:
    """Detailed JSON output includes the facets themselves."""
    out = serialize_bundles(populated, fmt=OutputFormat.JSON, show_details=True)
    assert isinstance(out, str)

    bundles: list[dict[str, Any]] = json.loads(out)[MachineKey.BUNDLES]
    assert bundles[0]["handler"]["macro"] == ["m1", "m2"]
    assert bundles[0]["options"] == {"strict": True}
    assert bundles[1]["tags"] == {"ams": "AmsTags"}


def test_json_uses_registry_name() -> None:
    """A bundle registered under an alias is reported under the alias."""
    registry = BundleRegistry()
    registry.create("orig")
    registry.register(registry.get("orig"), name="alias")

    out = serialize_bundles(registry, fmt=OutputFormat.JSON, show_details=True)
    assert isinstance(out, str)
    names = [entry["name"] for entry in json.loads(out)[MachineKey.BUNDLES]]
    assert names == ["orig", "alias"]


def test_json_includes_diagnostics_when_given(populated: BundleRegistry) -> None:
    """Diagnostics appear in the envelope only when supplied, even if empty."""
    diagnostics = DiagnosticLog()
    diagnostics.add_warning("something odd")

    out = serialize_bundles(populated, fmt=OutputFormat.JSON, diagnostics=diagnostics)
    assert isinstance(out, str)
    assert json.loads(out)[MachineKey.DIAGNOSTICS] == [
        {"level": "warning", "message": "something odd"}
    ]

    empty = serialize_bundles(populated, fmt=OutputFormat.JSON, diagnostics=DiagnosticLog())
    assert isinstance(empty, str)
    assert json.loads(empty)[MachineKey.DIAGNOSTICS] == []


def test_ndjson_records(populated: BundleRegistry) -> None:
    """NDJSON yields one bundle record per bundle, then diagnostic records."""
    diagnostics = DiagnosticLog()
    diagnostics.add_info("loaded")

    out = serialize_bundles(populated, fmt=OutputFormat.NDJSON, diagnostics=diagnostics)
    assert not isinstance(out, str)

    records: list[dict[str, Any]] = [json.loads(line) for line in out]
    kinds = [record[MachineKey.KIND] for record in records]
    assert kinds == ["bundle", "bundle", "diagnostic"]
    assert records[0][MachineKey.BUNDLE]["name"] == "base"
    assert records[2][MachineKey.DIAGNOSTIC] == {"level": "info", "message": "loaded"}
    assert all(record[MachineKey.META]["tool"] == TEXBUNDLE_TOOL_NAME for record in records)


def test_text_format_is_rejected(populated: BundleRegistry) -> None:
    """Human formats are not handled by the machine serializer."""
    assert not is_machine_format(OutputFormat.TEXT)
    with pytest.raises(ValueError, match="Unsupported"):
        serialize_bundles(populated, fmt=OutputFormat.TEXT)
