# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : __main__.py
#   file_relpath : src/linesorpixels/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point: ``python -m linesorpixels parse 12px``."""

from __future__ import annotations

from linesorpixels.cli.main import cli

if __name__ == "__main__":
    cli()
