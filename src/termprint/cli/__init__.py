# topmark:header:start
#
#   project      : Termprint
#   file         : __init__.py
#   file_relpath : src/termprint/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Termprint CLI package.

Click command definitions and supporting utilities for the ``termprint``
command-line interface. The console script entry point is declared in
``pyproject.toml``::

    [project.scripts]
    termprint = "termprint.cli.main:cli"

All subcommands live in [`termprint.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
