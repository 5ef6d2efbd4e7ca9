# topmark:header:start
#
#   project      : Termprint
#   file         : __init__.py
#   file_relpath : src/termprint/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across Termprint.

Included modules:

- ``diagnostics``
  Diagnostic messages collected while loading configuration.

- ``enum_mixins``
  Enum utilities (stable keys, aliases, parsing) used for backend names.

This package has no rendering or CLI dependencies and is safe to import
from anywhere.
"""

from __future__ import annotations
