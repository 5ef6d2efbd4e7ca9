# topmark:header:start
#
#   project      : Termprint
#   file         : __init__.py
#   file_relpath : src/termprint/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``termprint`` CLI.

- ``render``: render a JSON term document for a backend.
- ``version``: print the installed version.
"""

from __future__ import annotations
