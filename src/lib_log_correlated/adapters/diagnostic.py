"""Rich-powered diagnostic sink implementing :class:`DiagnosticSinkPort`.

Purpose
-------
Write trace lines (and mirrored lines) to a process-level stream that needs
no configuration, independent of the backend.

Contents
--------
* :data:`_STYLE_MAP` - default severity-to-style mapping; ``styles`` overrides entries.
* :class:`RichDiagnosticSink` - sink constructed by :func:`lib_log_correlated.init`.

System Role
-----------
Human-facing secondary channel; honours ``force_color``/``no_color`` like the
console adapters of the logging runtime.
"""

from __future__ import annotations

from typing import Mapping, TextIO

from rich.console import Console

from lib_log_correlated.application.ports.diagnostic import DiagnosticSinkPort
from lib_log_correlated.domain.levels import Severity

_STYLE_MAP: Mapping[Severity, str] = {
    Severity.TRACE: "dim",
    Severity.DEBUG: "dim",
    Severity.INFO: "cyan",
    Severity.WARN: "yellow",
    Severity.ERROR: "red",
    Severity.FATAL: "bold red",
}


class RichDiagnosticSink(DiagnosticSinkPort):
    """Print diagnostic lines through a Rich :class:`Console`.

    Examples
    --------
    >>> from io import StringIO
    >>> console = Console(file=StringIO(), record=True, width=200)
    >>> sink = RichDiagnosticSink(console=console)
    >>> sink.write(Severity.TRACE, "CorrelatedLog: (TRACE) [brackets] stay literal")
    >>> "[brackets] stay literal" in console.export_text()
    True
    """

    def __init__(
        self,
        *,
        console: Console | None = None,
        stream: TextIO | None = None,
        stderr: bool = True,
        force_color: bool = False,
        no_color: bool = False,
        styles: Mapping[Severity, str] | None = None,
    ) -> None:
        if console is not None:
            self._console = console
        else:
            self._console = Console(
                file=stream,
                stderr=stderr,
                force_terminal=True if force_color else None,
                no_color=no_color,
                soft_wrap=True,
            )
        self._no_color = no_color
        self._styles = dict(_STYLE_MAP)
        if styles:
            self._styles.update(styles)

    @property
    def console(self) -> Console:
        return self._console

    def write(self, severity: Severity, line: str) -> None:
        """Print ``line`` verbatim (no markup, no highlighting) in the style of ``severity``."""
        style = "" if self._no_color else self._styles.get(severity, "")
        self._console.print(line, style=style, markup=False, highlight=False, soft_wrap=True)


__all__ = ["RichDiagnosticSink"]
