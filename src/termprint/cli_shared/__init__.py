# topmark:header:start
#
#   project      : Termprint
#   file         : __init__.py
#   file_relpath : src/termprint/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Frontend helpers shared by the CLI that do not depend on Click."""

from __future__ import annotations
