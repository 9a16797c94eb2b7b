# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : __init__.py
#   file_relpath : src/linesorpixels/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for LinesOrPixels (``lopx``)."""
