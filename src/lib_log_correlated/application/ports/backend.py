"""Backend port describing the external logging engine.

Purpose
-------
Define the narrow contract the facade needs from a logging backend: resolve a
named channel, ask whether a severity is enabled there, and write one line.

Contents
--------
* :class:`BackendChannel` – per-channel enabled-check and write operation.
* :class:`BackendProvider` – resolves channels by name; ``None`` means the
  backend is unavailable.

System Role
-----------
Replaces process-wide backend lookups with an injected capability so tests
and hosts can swap engines without touching call sites.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_correlated.domain.levels import Severity


@runtime_checkable
class BackendChannel(Protocol):
    """Named destination inside the backend."""

    def is_enabled(self, severity: Severity) -> bool:
        """Return ``True`` when ``severity`` passes the backend's configuration."""

    def write(self, severity: Severity, text: str, error: BaseException | None = None) -> None:
        """Persist ``text`` at ``severity``, attaching the raw ``error`` if given."""


@runtime_checkable
class BackendProvider(Protocol):
    """Resolve channel names to :class:`BackendChannel` instances."""

    def resolve(self, channel: str) -> BackendChannel | None:
        """Return the channel named ``channel`` or ``None`` when unavailable."""


__all__ = ["BackendChannel", "BackendProvider"]
