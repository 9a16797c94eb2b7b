# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : test_model.py
#   file_relpath : tests/diagnostic/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the diagnostic log."""

from __future__ import annotations

from linesorpixels.diagnostic import DiagnosticLevel, DiagnosticLog


def test_log_collects_and_counts_diagnostics() -> None:
    """Diagnostics are kept in insertion order and counted per level."""
    log = DiagnosticLog()
    log.add_info("[scrolling].distance", "scrolling.distance is not set")
    log.add_warning("[scrolling].other", "Expected integer or string")
    log.add_error("[].lines", "Invalid value")
    log.add_error("[].gap", "Invalid value again")

    assert [d.level for d in log] == [
        DiagnosticLevel.INFO,
        DiagnosticLevel.WARNING,
        DiagnosticLevel.ERROR,
        DiagnosticLevel.ERROR,
    ]
    assert log.count(DiagnosticLevel.ERROR) == 2
    assert log.count(DiagnosticLevel.WARNING) == 1
    assert [d.location for d in log.rejected()] == ["[scrolling].other", "[].lines", "[].gap"]


def test_summary_is_json_friendly() -> None:
    """The summary carries per-level counts and every diagnostic."""
    log = DiagnosticLog()
    log.add_error("[scrolling].distance", "Invalid value")

    assert log.summary() == {
        "counts": {"info": 0, "warning": 0, "error": 1},
        "diagnostics": [
            {"level": "error", "location": "[scrolling].distance", "message": "Invalid value"},
        ],
    }


def test_empty_log() -> None:
    """An empty log reports nothing."""
    log = DiagnosticLog()
    assert log.count(DiagnosticLevel.ERROR) == 0
    assert log.count(DiagnosticLevel.WARNING) == 0
    assert log.rejected() == []
    assert log.summary()["counts"] == {"info": 0, "warning": 0, "error": 0}


def test_only_info_does_not_reject() -> None:
    """Info diagnostics never count as rejected values."""
    assert not DiagnosticLevel.INFO.rejects_value
    assert DiagnosticLevel.WARNING.rejects_value
    assert DiagnosticLevel.ERROR.rejects_value


def test_render_wraps_level_and_message() -> None:
    """Rendered lines keep the level tag and message text."""
    log = DiagnosticLog()
    log.add_warning("[].x", "msg")
    (diag,) = list(log)
    assert "[warning] msg" in diag.render()
