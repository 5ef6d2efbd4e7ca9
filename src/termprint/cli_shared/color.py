# topmark:header:start
#
#   project      : Termprint
#   file         : color.py
#   file_relpath : src/termprint/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent color helpers for Termprint.

Rendering never detects terminals on its own: it is told whether color is
allowed through [`Capabilities`][termprint.rendering.backends.Capabilities].
This module is the collaborator that makes that decision for the CLI and
for configuration-driven callers:

- `ColorMode` enum (``auto``, ``always``, ``never``).
- `resolve_color_mode()` combining the backend, CLI flags, environment and
  TTY detection.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

from termprint.config.logging import get_logger
from termprint.rendering.backends import Backend

if TYPE_CHECKING:
    from termprint.config.logging import TermprintLogger


logger: TermprintLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    backend: Backend | None = None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Backend**: Markdown and File output never carry ANSI codes.
        2. **CLI override**: `ALWAYS` → True; `NEVER` → False.
        3. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        4. **Auto**: If none of the above decide, return `stdout.isatty()`.

    Args:
        color_mode_override: Parsed `ColorMode` from `--color`; `None` means
            "not provided" and behaves like `AUTO`.
        backend: Target backend; `None` is treated like the terminal.
        stdout_isatty: Optional override for TTY detection. When `None`, the
            function calls `sys.stdout.isatty()` and falls back to `False` on error.

    Returns:
        True if ANSI color should be enabled; False otherwise.

    Examples:
        >>> resolve_color_mode(color_mode_override=ColorMode.NEVER)
        False
        >>> resolve_color_mode(color_mode_override=None, backend=Backend.MARKDOWN)
        False
    """
    # 1) Only the terminal backend can show color
    if backend is not None and backend is not Backend.TERMINAL:
        return False

    # 2) CLI overrides
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    # 3) Env overrides
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    # 4) Auto: TTY?
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    logger.trace("Color auto-detection: isatty=%s", stdout_isatty)
    return bool(stdout_isatty)
