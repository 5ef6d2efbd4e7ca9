# topmark:header:start
#
#   project      : Termprint
#   file         : model.py
#   file_relpath : src/termprint/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Printer configuration: immutable snapshot and mutable builder.

`MutablePrinterConfig` collects settings from defaults, a discovered TOML
file and CLI overrides (later layers win), then produces an immutable
`PrinterConfig` via `freeze()`. TOML I/O is delegated to
`termprint.config.io`.

Recognized TOML keys (``termprint.toml`` top level or ``[tool.termprint]``):

```toml
backend = "terminal"       # terminal | markdown | file (or an alias)
color = "auto"             # auto | always | never
max_heading_level = 6      # 1..6
allow_empty = true
```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from termprint.cli_shared.color import ColorMode, resolve_color_mode
from termprint.config.io import (
    discover_config,
    get_bool_value_or_none_checked,
    get_enum_value_checked,
    get_int_value_or_none_checked,
)
from termprint.config.logging import get_logger
from termprint.constants import MAX_HEADING_LEVEL
from termprint.core.diagnostics import Diagnostic, DiagnosticLog
from termprint.rendering.api import Renderer
from termprint.rendering.backends import Backend, Capabilities

if TYPE_CHECKING:
    from termprint.config.io import TomlTable
    from termprint.config.logging import TermprintLogger

logger: TermprintLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class PrinterConfig:
    """Immutable printer settings.

    Attributes:
        backend (Backend): Default output backend.
        color (ColorMode): Color intent for the terminal backend.
        max_heading_level (int): Deepest Markdown heading level (1..6).
        allow_empty (bool): Whether empty terms render as ``""``.
        config_files (tuple[Path, ...]): Files the settings were read from.
        diagnostics (tuple[Diagnostic, ...]): Problems found while loading.
    """

    backend: Backend = Backend.TERMINAL
    color: ColorMode = ColorMode.AUTO
    max_heading_level: int = MAX_HEADING_LEVEL
    allow_empty: bool = True
    config_files: tuple[Path, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def capabilities(self, *, stdout_isatty: bool | None = None) -> Capabilities:
        """Resolve these settings into a capability descriptor.

        Args:
            stdout_isatty (bool | None): TTY override for color auto-detection.

        Returns:
            Capabilities: Descriptor for `backend`.
        """
        color: bool = resolve_color_mode(
            color_mode_override=self.color,
            backend=self.backend,
            stdout_isatty=stdout_isatty,
        )
        return Capabilities(
            color=color,
            max_heading_level=self.max_heading_level,
            allow_empty=self.allow_empty,
        )

    def renderer(self, *, stdout_isatty: bool | None = None) -> Renderer:
        """Return a `Renderer` for `backend` with resolved capabilities."""
        return Renderer(self.backend, self.capabilities(stdout_isatty=stdout_isatty))

    def thaw(self) -> MutablePrinterConfig:
        """Return a mutable copy of this snapshot."""
        return MutablePrinterConfig(
            backend=self.backend,
            color=self.color,
            max_heading_level=self.max_heading_level,
            allow_empty=self.allow_empty,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog(list(self.diagnostics)),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutablePrinterConfig:
    """Mutable printer settings used while layering sources.

    Attributes mirror `PrinterConfig`; ``diagnostics`` collects warnings
    about ignored values.
    """

    backend: Backend = Backend.TERMINAL
    color: ColorMode = ColorMode.AUTO
    max_heading_level: int = MAX_HEADING_LEVEL
    allow_empty: bool = True
    config_files: list[Path] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    @classmethod
    def from_defaults(cls) -> MutablePrinterConfig:
        """Return a builder holding the built-in defaults."""
        return cls()

    @classmethod
    def load(cls, start: Path | None = None) -> MutablePrinterConfig:
        """Return defaults overlaid with the nearest discovered config file.

        Args:
            start (Path | None): Directory to search from; defaults to the CWD.
        """
        draft: MutablePrinterConfig = cls.from_defaults()
        found: tuple[Path, TomlTable] | None = discover_config(start or Path.cwd())
        if found is not None:
            path, table = found
            draft.apply_toml(table, config_file=path)
        return draft

    def apply_toml(
        self, table: TomlTable, *, config_file: Path | None = None
    ) -> MutablePrinterConfig:
        """Overlay the values of a Termprint TOML table.

        Values of the wrong type or out of range are reported in
        ``diagnostics`` and leave the current value untouched.

        Args:
            table (TomlTable): ``termprint.toml`` content or ``[tool.termprint]``.
            config_file (Path | None): Source file, recorded in ``config_files``.

        Returns:
            MutablePrinterConfig: This builder, for chaining.
        """
        where: str = str(config_file) if config_file else "[termprint]"
        logger.trace("Applying TOML table from %s: %s", where, table)

        backend: Backend | None = get_enum_value_checked(
            table, "backend", Backend, where=where, diagnostics=self.diagnostics
        )
        if backend is not None:
            self.backend = backend

        color: ColorMode | None = get_enum_value_checked(
            table, "color", ColorMode, where=where, diagnostics=self.diagnostics
        )
        if color is not None:
            self.color = color

        level: int | None = get_int_value_or_none_checked(
            table, "max_heading_level", where=where, diagnostics=self.diagnostics
        )
        if level is not None:
            if 1 <= level <= MAX_HEADING_LEVEL:
                self.max_heading_level = level
            else:
                msg: str = (
                    f"Value out of range for {where}.max_heading_level: {level} "
                    f"(expected 1..{MAX_HEADING_LEVEL})"
                )
                logger.warning(msg)
                self.diagnostics.add_warning(msg)

        allow_empty: bool | None = get_bool_value_or_none_checked(
            table, "allow_empty", where=where, diagnostics=self.diagnostics
        )
        if allow_empty is not None:
            self.allow_empty = allow_empty

        known: set[str] = {"backend", "color", "max_heading_level", "allow_empty"}
        for key in table:
            if key not in known:
                self.diagnostics.add_info(f"Ignoring unknown key {where}.{key}")

        if config_file is not None:
            self.config_files.append(config_file)
        return self

    def apply_overrides(
        self,
        *,
        backend: Backend | None = None,
        color: ColorMode | None = None,
        max_heading_level: int | None = None,
    ) -> MutablePrinterConfig:
        """Overlay explicit (e.g. CLI) settings; ``None`` keeps the current value."""
        if backend is not None:
            self.backend = backend
        if color is not None:
            self.color = color
        if max_heading_level is not None:
            self.max_heading_level = max_heading_level
        return self

    def freeze(self) -> PrinterConfig:
        """Return the immutable snapshot of the current settings."""
        return PrinterConfig(
            backend=self.backend,
            color=self.color,
            max_heading_level=min(max(self.max_heading_level, 1), MAX_HEADING_LEVEL),
            allow_empty=self.allow_empty,
            config_files=tuple(self.config_files),
            diagnostics=self.diagnostics.freeze(),
        )
