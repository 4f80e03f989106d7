"""Severity abstraction for the correlated logging facade.

Purpose
-------
Offer a domain-specific representation of log severities covering the six
facade entry points (``trace`` through ``fatal``) and their translation into
stdlib :mod:`logging` levels.

Contents
--------
* :class:`Severity` enum with conversion helpers and presentation metadata.

System Role
-----------
Used by the use case to pick the gate/write path and by the adapters to map
severities onto the backend's own level numbers.
"""

from __future__ import annotations

import logging
from enum import Enum

TRACE_LEVEL_NUM = 5
"""Numeric stdlib level registered for ``TRACE`` (below ``DEBUG``)."""


class Severity(Enum):
    """Enumerated severities, ascending in significance."""

    TRACE = TRACE_LEVEL_NUM
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    FATAL = 50

    @property
    def severity(self) -> str:
        """Return the lowercase severity name (also the facade method name)."""

        return self.name.lower()

    @property
    def code(self) -> str:
        """Return the upper-case label used in diagnostic lines."""

        return self.name

    def to_python_level(self) -> int:
        """Return the :mod:`logging` level number matching this severity."""

        return _PYTHON_LEVELS[self]

    @classmethod
    def from_name(cls, name: str) -> "Severity":
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown severity: {name!r}") from exc

    @classmethod
    def from_numeric(cls, level: int) -> "Severity":
        """Return the :class:`Severity` whose numeric value equals ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported severity numeric: {level}") from exc


_ALIASES = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}

_PYTHON_LEVELS = {
    Severity.TRACE: TRACE_LEVEL_NUM,
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.FATAL: logging.CRITICAL,
}


__all__ = ["Severity", "TRACE_LEVEL_NUM"]
