# topmark:header:start
#
#   project      : Termprint
#   file         : errors.py
#   file_relpath : src/termprint/term/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised when the term builder or a renderer is misused.

All of these are programming-contract violations reported to the immediate
caller. None of them is retried or swallowed inside Termprint.
"""

from __future__ import annotations


class TermError(Exception):
    """Base class for all term model errors."""


class NoCurrentNodeError(TermError):
    """Raised by `attach_tag()` when no node has been appended yet."""

    def __init__(self, operation: str = "attach_tag") -> None:
        super().__init__(f"{operation}() called before any node was appended")
        self.operation = operation


class UnbalancedSectionError(TermError):
    """Raised when `begin_section()` / `end_section()` calls do not pair up.

    Attributes:
        open_sections (int): Number of sections still open when the error was raised.
    """

    def __init__(self, message: str, *, open_sections: int = 0) -> None:
        super().__init__(message)
        self.open_sections = open_sections


class EmptyTermError(TermError):
    """Raised when rendering an empty term with ``allow_empty=False``."""

    def __init__(self) -> None:
        super().__init__("cannot render an empty term (no nodes)")
