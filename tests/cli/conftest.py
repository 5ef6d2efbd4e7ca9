# topmark:header:start
#
#   project      : Termprint
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running Termprint through Click's test runner.

Rendered output is asserted on `Result.stdout`; diagnostics and errors go to
stderr and are checked on `Result.output`, which includes both streams.
"""

from __future__ import annotations

import json
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from termprint.cli.main import cli
from termprint.cli_shared.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path

RESULT_DOC: dict[str, Any] = {
    "children": [
        {
            "kind": "section",
            "title": "Result",
            "children": [
                {"kind": "text", "text": "ok"},
                {"kind": "code_block", "language": "json", "content": "{}"},
            ],
        }
    ]
}


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI in the current working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["render", "doc.json"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input, used
            with the ``-`` document argument.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def write_doc(directory: Path, data: Any, name: str = "doc.json") -> Path:
    """Write ``data`` as JSON into ``directory`` and return the file path."""
    path: Path = directory / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_DATA_ERROR(result: Result) -> None:
    """Assert that the command exited with DATA_ERROR (code 65)."""
    assert result.exit_code == ExitCode.DATA_ERROR, result.output
