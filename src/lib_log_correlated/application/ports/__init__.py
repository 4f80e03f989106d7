"""Protocols the application layer depends on."""

from __future__ import annotations

from .backend import BackendChannel, BackendProvider
from .caller import CallerResolverPort
from .diagnostic import DiagnosticSinkPort
from .time import ClockPort, CorrelationIdProvider

__all__ = [
    "BackendChannel",
    "BackendProvider",
    "CallerResolverPort",
    "ClockPort",
    "CorrelationIdProvider",
    "DiagnosticSinkPort",
]
