# topmark:header:start
#
#   project      : Termprint
#   file         : __init__.py
#   file_relpath : src/termprint/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering of finished terms for the terminal, Markdown and plain files.

Public modules:
    - termprint.rendering.api
    - termprint.rendering.backends
    - termprint.rendering.engine
    - termprint.rendering.formatting
    - termprint.rendering.sinks
    - termprint.rendering.styles
"""

from __future__ import annotations

from termprint.rendering.api import Renderer, render_term
from termprint.rendering.backends import Backend, Capabilities

__all__ = [
    "Backend",
    "Capabilities",
    "Renderer",
    "render_term",
]
