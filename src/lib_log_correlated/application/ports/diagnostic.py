"""Port for the secondary, human-facing diagnostic channel."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_correlated.domain.levels import Severity


@runtime_checkable
class DiagnosticSinkPort(Protocol):
    """Always-available sink accepting preformatted lines."""

    def write(self, severity: Severity, line: str) -> None:
        """Write ``line`` (logged at ``severity``) to the diagnostic stream."""


__all__ = ["DiagnosticSinkPort"]
