# topmark:header:start
#
#   project      : Termprint
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Termprint test suite.

Sets up TRACE logging for the run, keeps the developer's environment from
leaking into tests (log level, color forcing), and provides small helpers
shared by the test modules.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from termprint.config import logging
from termprint.rendering.api import Renderer
from termprint.rendering.backends import Backend, Capabilities
from termprint.term.builder import TermBuilder

if TYPE_CHECKING:
    from pathlib import Path

    from termprint.term.nodes import Node, Term

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's shell settings out of the tests.

    ``TERMPRINT_LOG_LEVEL`` would change CLI logging, and ``FORCE_COLOR`` /
    ``NO_COLOR`` would change color auto-detection.
    """
    monkeypatch.delenv("TERMPRINT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for the whole run."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty temporary project directory.

    Returns:
        Path: The new working directory (no configuration files in it).
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_term(*nodes: Node) -> Term:
    """Return a finished term holding ``nodes`` at top level."""
    builder = TermBuilder()
    for node in nodes:
        builder.append_node(node)
    return builder.finish()


def render(
    term: Term,
    backend: Backend,
    *,
    color: bool = False,
    max_heading_level: int = 6,
) -> str:
    """Render ``term`` with an explicit capability descriptor."""
    caps = Capabilities(color=color, max_heading_level=max_heading_level)
    return Renderer(backend, caps).render(term)
