# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : __init__.py
#   file_relpath : src/linesorpixels/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives used to report malformed configuration values."""

from __future__ import annotations

from linesorpixels.diagnostic.model import Diagnostic, DiagnosticLevel, DiagnosticLog

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
]
