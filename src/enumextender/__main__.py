# topmark:header:start
#
#   project      : EnumExtender
#   file         : __main__.py
#   file_relpath : src/enumextender/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running EnumExtender via ``python -m enumextender``.

Delegates to [`enumextender.cli.main.cli`][enumextender.cli.main.cli], the same
entry point as the ``enumextender`` console script.
"""

from __future__ import annotations

from enumextender.cli.main import cli

if __name__ == "__main__":
    cli()
