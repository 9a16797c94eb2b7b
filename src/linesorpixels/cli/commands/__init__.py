# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : __init__.py
#   file_relpath : src/linesorpixels/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``lopx`` CLI."""
