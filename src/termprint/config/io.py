# topmark:header:start
#
#   project      : Termprint
#   file         : io.py
#   file_relpath : src/termprint/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load Termprint configuration sources.

Configuration lives either in ``termprint.toml`` (top-level keys) or in the
``[tool.termprint]`` table of ``pyproject.toml``. Parsing is done with
`tomlkit` and returned as plain `dict` structures.

The ``*_checked`` getters validate one value each; a value of the wrong
type is reported as a warning diagnostic and ignored.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, TypeVar, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from termprint.config.logging import get_logger
from termprint.constants import (
    CONFIG_FILE_NAME,
    PYPROJECT_FILE_NAME,
    PYPROJECT_TOOL_TABLE,
)

if TYPE_CHECKING:
    from termprint.config.logging import TermprintLogger
    from termprint.core.diagnostics import DiagnosticLog

TomlTable = dict[str, Any]

logger: TermprintLogger = get_logger(__name__)

E = TypeVar("E", bound=Enum)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (``termprint.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_tool_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the Termprint table of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.termprint]`` (``None`` when absent);
    any other file is a dedicated config file and is returned whole.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get("tool", {})
    table: Any = tool.get(PYPROJECT_TOOL_TABLE) if isinstance(tool, dict) else None
    return cast("TomlTable", table) if isinstance(table, dict) else None


def discover_config(start: Path) -> tuple[Path, TomlTable] | None:
    """Find the nearest configuration, walking upward from ``start``.

    In each directory ``termprint.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` without ``[tool.termprint]`` is skipped.

    Args:
        start: Directory (or file) to start from.

    Returns:
        ``(path, table)`` for the first configuration found, or ``None``.
    """
    anchor: Path = start.resolve()
    if anchor.is_file():
        anchor = anchor.parent
    for directory in (anchor, *anchor.parents):
        for name in (CONFIG_FILE_NAME, PYPROJECT_FILE_NAME):
            candidate: Path = directory / name
            if not candidate.is_file():
                continue
            table: TomlTable | None = extract_tool_table(candidate, load_toml_dict(candidate))
            if table is None:
                logger.debug("No [tool.%s] table in %s", PYPROJECT_TOOL_TABLE, candidate)
                continue
            logger.debug("Discovered config file: %s", candidate)
            return candidate, table
    logger.debug("No config file found above %s", anchor)
    return None


# --- Checked getters ---


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> bool | None:
    """Return an optional boolean value, warning when present but not `bool`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected bool in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected bool in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_int_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> int | None:
    """Return an optional int value, warning when present but not `int`.

    `bool` is rejected even though it subclasses `int`.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    logger.warning("Expected int in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected int in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_enum_value_checked(
    table: TomlTable,
    key: str,
    enum_cls: type[E],
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> E | None:
    """Parse an enum value from TOML.

    - Missing key -> None
    - Wrong type -> warning + None
    - Unknown value -> warning + None

    Enums providing a ``parse()`` classmethod (keys and aliases) are parsed
    with it; others are looked up by value.
    """
    raw: Any | None = table.get(key)
    if raw is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if not isinstance(raw, str):
        logger.warning("Expected string in %s, got %s: %r", loc, type(raw).__name__, raw)
        diagnostics.add_warning(f"Expected string in {loc}, got {type(raw).__name__}: {raw!r}")
        return None

    parse: Any = getattr(enum_cls, "parse", None)
    result: E | None
    if callable(parse):
        result = cast("E | None", parse(raw))
    else:
        try:
            result = enum_cls(raw)
        except ValueError:
            result = None
    if result is None:
        allowed: str = ", ".join(str(e.value) for e in enum_cls)
        logger.warning("Invalid value for %s: %r (allowed: %s)", loc, raw, allowed)
        diagnostics.add_warning(f"Invalid value for {loc}: {raw!r} (allowed: {allowed})")
    return result
