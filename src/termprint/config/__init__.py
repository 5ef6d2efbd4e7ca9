# topmark:header:start
#
#   project      : Termprint
#   file         : __init__.py
#   file_relpath : src/termprint/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for Termprint.

Printer settings are read from ``termprint.toml`` or the ``[tool.termprint]``
table of ``pyproject.toml`` (see `termprint.config.io`) into a
`MutablePrinterConfig`, then frozen into a `PrinterConfig`
(see `termprint.config.model`).
"""

from __future__ import annotations
