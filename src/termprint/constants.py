# topmark:header:start
#
#   project      : Termprint
#   file         : constants.py
#   file_relpath : src/termprint/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Termprint Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    TERMPRINT_VERSION: str = get_version("termprint")
except PackageNotFoundError:
    TERMPRINT_VERSION = "0.0.0"

# One indentation level, shared by every backend.
INDENT_UNIT: Final[str] = "  "

# ISO-8601, UTC, second precision.
TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%SZ"

# Markdown supports ATX headings from `#` to `######`.
MAX_HEADING_LEVEL: Final[int] = 6

CODE_FENCE: Final[str] = "```"

# Configuration discovery
CONFIG_FILE_NAME: Final[str] = "termprint.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_TABLE: Final[str] = "termprint"

LOG_LEVEL_ENV_VAR: Final[str] = "TERMPRINT_LOG_LEVEL"
