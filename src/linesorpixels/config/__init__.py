# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : __init__.py
#   file_relpath : src/linesorpixels/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration support: logging setup and TOML access for lines-or-pixels values."""

from __future__ import annotations
