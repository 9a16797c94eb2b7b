# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : constants.py
#   file_relpath : src/linesorpixels/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LinesOrPixels Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

LOPX_VERSION: str = get_version("linesorpixels")

# Key checked by `lopx check` when no --key is given.
DEFAULT_CHECK_KEY: str = "scrolling.distance"
