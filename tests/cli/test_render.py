# topmark:header:start
#
#   project      : Termprint
#   file         : test_render.py
#   file_relpath : tests/cli/test_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `termprint render`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from termprint.cli_shared.exit_codes import ExitCode
from tests.cli.conftest import (
    RESULT_DOC,
    assert_DATA_ERROR,
    assert_SUCCESS,
    run_cli,
    write_doc,
)
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

MARKDOWN_OUT = "# Result\n\nok\n\n```json\n{}\n```\n"
FILE_OUT = "Result:\n  ok\n  ```json\n  {}\n  ```\n"

pytestmark = pytest.mark.usefixtures("isolation")


@mark_cli
@parametrize("backend", ["markdown", "md", "MD"])
def test_render_markdown(isolation: Path, backend: str) -> None:
    doc: Path = write_doc(isolation, RESULT_DOC)
    result: Result = run_cli(["render", str(doc), "--backend", backend])
    assert_SUCCESS(result)
    assert result.stdout == MARKDOWN_OUT


@mark_cli
def test_default_terminal_backend_without_tty_is_plain(isolation: Path) -> None:
    doc: Path = write_doc(isolation, RESULT_DOC)
    result: Result = run_cli(["render", str(doc)])
    assert_SUCCESS(result)
    assert result.stdout == FILE_OUT


@mark_cli
def test_color_always_emits_ansi(isolation: Path) -> None:
    doc: Path = write_doc(isolation, RESULT_DOC)
    result: Result = run_cli(["--color", "always", "render", str(doc), "-b", "terminal"])
    assert_SUCCESS(result)
    assert "\x1b[1mResult\x1b[0m:" in result.stdout


@mark_cli
def test_render_from_stdin() -> None:
    result: Result = run_cli(
        ["render", "-", "--backend", "file"], input_text=json.dumps(RESULT_DOC)
    )
    assert_SUCCESS(result)
    assert result.stdout == FILE_OUT


@mark_cli
def test_render_to_output_file(isolation: Path) -> None:
    doc: Path = write_doc(isolation, RESULT_DOC)
    out: Path = isolation / "out.md"
    result: Result = run_cli(["-v", "render", str(doc), "-b", "md", "-o", str(out)])
    assert_SUCCESS(result)
    assert out.read_text(encoding="utf-8") == MARKDOWN_OUT
    assert f"Wrote {len(MARKDOWN_OUT)} character(s)" in result.stdout


@mark_cli
def test_max_heading_level(isolation: Path) -> None:
    doc: Path = write_doc(
        isolation,
        [{"kind": "section", "title": "A", "children": [{"kind": "section", "title": "B"}]}],
    )
    result: Result = run_cli(["render", str(doc), "-b", "md", "--max-heading-level", "1"])
    assert_SUCCESS(result)
    assert result.stdout == "# A\n\n# B\n"


@mark_cli
def test_invalid_json_is_a_data_error(isolation: Path) -> None:
    doc: Path = isolation / "bad.json"
    doc.write_text("{not json", encoding="utf-8")
    result: Result = run_cli(["render", str(doc)])
    assert_DATA_ERROR(result)
    assert "Invalid JSON" in result.output


@mark_cli
def test_invalid_document_is_a_data_error(isolation: Path) -> None:
    doc: Path = write_doc(isolation, {"children": [{"kind": "bogus"}]})
    result: Result = run_cli(["render", str(doc)])
    assert_DATA_ERROR(result)
    assert "unknown node kind 'bogus'" in result.output


@mark_cli
def test_missing_document() -> None:
    result: Result = run_cli(["render", "does-not-exist.json"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


@mark_cli
def test_empty_document(isolation: Path) -> None:
    doc: Path = write_doc(isolation, {"children": []})

    lenient: Result = run_cli(["render", str(doc)])
    assert_SUCCESS(lenient)
    assert lenient.stdout == ""

    out: Path = isolation / "out.txt"
    strict: Result = run_cli(["render", str(doc), "--strict", "-o", str(out)])
    assert_DATA_ERROR(strict)
    assert "empty term" in strict.output
    assert not out.exists()


@mark_cli
def test_unknown_backend_is_a_usage_error(isolation: Path) -> None:
    doc: Path = write_doc(isolation, RESULT_DOC)
    result: Result = run_cli(["render", str(doc), "--backend", "html"])
    assert result.exit_code == 2, result.output
    assert "Invalid value 'html'" in result.output


@mark_cli
def test_discovered_config_sets_backend(isolation: Path) -> None:
    (isolation / "termprint.toml").write_text('backend = "markdown"\n', encoding="utf-8")
    doc: Path = write_doc(isolation, RESULT_DOC)

    result: Result = run_cli(["render", str(doc)])
    assert_SUCCESS(result)
    assert result.stdout == MARKDOWN_OUT

    ignored: Result = run_cli(["render", str(doc), "--no-config"])
    assert_SUCCESS(ignored)
    assert ignored.stdout == FILE_OUT


@mark_cli
def test_explicit_config_file(isolation: Path) -> None:
    cfg: Path = isolation / "custom.toml"
    cfg.write_text('backend = "file"\nmax_heading_level = 2\n', encoding="utf-8")
    doc: Path = write_doc(isolation, RESULT_DOC)
    result: Result = run_cli(["render", str(doc), "--config", str(cfg)])
    assert_SUCCESS(result)
    assert result.stdout == FILE_OUT


@mark_cli
def test_config_warnings_respect_quiet(isolation: Path) -> None:
    (isolation / "termprint.toml").write_text('backend = "html"\n', encoding="utf-8")
    doc: Path = write_doc(isolation, RESULT_DOC)

    noisy: Result = run_cli(["render", str(doc)])
    assert_SUCCESS(noisy)
    assert "[warning] Invalid value for" in noisy.output

    quiet: Result = run_cli(["-q", "render", str(doc)])
    assert_SUCCESS(quiet)
    assert "[warning]" not in quiet.output
    assert quiet.stdout == FILE_OUT
