"""Default collaborators assembled by the composition root."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID, uuid4

from lib_log_correlated.adapters import FrameCallerResolver, RichDiagnosticSink, StdlibBackendProvider
from lib_log_correlated.application.ports import (
    BackendProvider,
    CallerResolverPort,
    ClockPort,
    CorrelationIdProvider,
    DiagnosticSinkPort,
)

from ._settings import RuntimeSettings


class SystemClock(ClockPort):
    """Concrete clock port returning timezone-aware UTC timestamps."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class UuidProvider(CorrelationIdProvider):
    """Generate random (version 4) correlation identifiers."""

    def __call__(self) -> UUID:
        return uuid4()


def create_backend(settings: RuntimeSettings) -> BackendProvider:
    if settings.backend_provider is not None:
        return settings.backend_provider
    return StdlibBackendProvider()


def create_caller_resolver(settings: RuntimeSettings) -> CallerResolverPort:
    if settings.caller_resolver is not None:
        return settings.caller_resolver
    return FrameCallerResolver()


def create_diagnostic_sink(settings: RuntimeSettings) -> DiagnosticSinkPort:
    if settings.diagnostic_sink is not None:
        return settings.diagnostic_sink
    return RichDiagnosticSink(
        stderr=settings.diagnostic_stream == "stderr",
        force_color=settings.force_color,
        no_color=settings.no_color,
    )


__all__ = [
    "SystemClock",
    "UuidProvider",
    "create_backend",
    "create_caller_resolver",
    "create_diagnostic_sink",
]
