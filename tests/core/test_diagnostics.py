# topmark:header:start
#
#   project      : TexBundle
#   file         : test_diagnostics.py
#   file_relpath : tests/core/test_diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the load diagnostics log."""

from __future__ import annotations

from texbundle.core.diagnostics import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    compute_diagnostic_stats,
)


def test_levels_are_info_and_warning() -> None:
    """Loads are permissive, so diagnostics are either info or warnings."""
    assert [level.value for level in DiagnosticLevel] == ["info", "warning"]
    for level in DiagnosticLevel:
        assert callable(level.color)


def test_log_collects_in_order() -> None:
    """Diagnostics keep insertion order and serialize to plain dicts."""
    log = DiagnosticLog()
    log.add_info("coerced")
    log.add_warning("dropped")

    assert len(log) == 2
    assert [d.to_dict() for d in log] == [
        {"level": "info", "message": "coerced"},
        {"level": "warning", "message": "dropped"},
    ]
    assert log.has_warning()


def test_stats() -> None:
    """Stats count each level and their total."""
    log = DiagnosticLog()
    log.add_info("a")
    log.add_warning("b")
    log.add_warning("c")

    stats = log.stats()
    assert (stats.n_info, stats.n_warning, stats.total) == (1, 2, 3)
    assert compute_diagnostic_stats([Diagnostic(DiagnosticLevel.INFO, "x")]).total == 1


def test_empty_log_has_no_warning() -> None:
    """A fresh log is empty."""
    log = DiagnosticLog()

    assert len(log) == 0
    assert not log.has_warning()
    assert log.stats().total == 0
