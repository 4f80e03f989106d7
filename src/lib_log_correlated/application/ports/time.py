"""Ports for time and correlation identifiers."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable
from uuid import UUID


@runtime_checkable
class ClockPort(Protocol):
    """Provide the current timestamp."""

    def now(self) -> datetime: ...


@runtime_checkable
class CorrelationIdProvider(Protocol):
    """Generate fresh correlation identifiers."""

    def __call__(self) -> UUID: ...


__all__ = ["ClockPort", "CorrelationIdProvider"]
