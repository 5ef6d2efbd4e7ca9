# topmark:header:start
#
#   project      : Termprint
#   file         : errors.py
#   file_relpath : src/termprint/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Termprint CLI.

Raise these from commands to signal errors with standardized messages and
exit codes. Errors are shown through the project console when one is
present on the Click context, and through Click's default display otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from termprint.cli_shared.exit_codes import ExitCode


class TermprintError(click.ClickException):
    """Base class for all Termprint CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized only in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        obj: Any = getattr(ctx, "obj", None) if ctx is not None else None
        console: Any = obj.get("console") if isinstance(obj, dict) else None
        if console is not None:
            console.error(f"Error: {self.format_message()}")
            return
        super().show(file)


class TermprintUsageError(TermprintError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class TermprintDataError(TermprintError):
    """Error for term documents that cannot be parsed or rendered."""

    exit_code = ExitCode.DATA_ERROR


class TermprintFileNotFoundError(TermprintError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class TermprintPermissionDeniedError(TermprintError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class TermprintIOError(TermprintError):
    """Error for I/O errors reading or writing files."""

    exit_code = ExitCode.IO_ERROR


def error_for_os_error(exc: OSError, path: object) -> TermprintError:
    """Map an `OSError` on ``path`` to the matching CLI error."""
    if isinstance(exc, FileNotFoundError):
        return TermprintFileNotFoundError(f"No such file: {path}")
    if isinstance(exc, PermissionError):
        return TermprintPermissionDeniedError(f"Permission denied: {path}")
    return TermprintIOError(f"I/O error on {path}: {exc}")
