"""Use case orchestrating a single correlated log entry.

Purpose
-------
Run the per-call state machine: normalise the request, consult the severity
gate, compose the line, write it, and report a :class:`LogOutcome`.

Contents
--------
* :func:`create_log_entry` factory returning the runtime callable.
* Small helpers, one per pipeline step.

System Role
-----------
Application-layer orchestrator used by :class:`lib_log_correlated.facade.
CorrelatedLogger`. Gate checks run before exception normalisation and message
composition so disabled levels cost one backend lookup and nothing more.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol
from uuid import UUID

from lib_log_correlated.application.ports import (
    BackendChannel,
    BackendProvider,
    ClockPort,
    CorrelationIdProvider,
    DiagnosticSinkPort,
)
from lib_log_correlated.domain import (
    LogOutcome,
    LogRequest,
    OutcomeKind,
    Severity,
    compose_text,
    format_diagnostic_line,
    format_log_line,
    summarize_exception,
)

logger = logging.getLogger(__name__)

DiagnosticHook = Callable[[str, dict[str, Any]], None] | None


class LogEntryCallable(Protocol):
    """Callable signature produced by :func:`create_log_entry`."""

    def __call__(
        self,
        *,
        severity: Severity,
        message: str | None,
        error: BaseException | None,
        channel: str | None,
        correlation_id: UUID | None,
    ) -> LogOutcome: ...


def create_log_entry(
    *,
    backend: BackendProvider,
    diagnostic_sink: DiagnosticSinkPort,
    clock: ClockPort,
    id_provider: CorrelationIdProvider,
    fallback_channel: str,
    mirror_diagnostics: bool = False,
    diagnostic_hook: DiagnosticHook = None,
) -> LogEntryCallable:
    """Build the log-entry orchestrator bound to its collaborators.

    Parameters
    ----------
    backend:
        :class:`BackendProvider` resolving channel names.
    diagnostic_sink:
        Secondary channel receiving trace lines (and mirrored lines).
    clock:
        Source of timestamps for diagnostic lines.
    id_provider:
        Generates a correlation id when the caller supplies none.
    fallback_channel:
        Sentinel channel used when no caller identity is known.
    mirror_diagnostics:
        When ``True`` emitted non-trace entries are also written to the
        diagnostic sink.
    diagnostic_hook:
        Optional callback invoked with ``"emitted"`` / ``"skipped"`` milestones.

    Returns
    -------
    LogEntryCallable
        Function accepting the raw call arguments and returning a
        :class:`LogOutcome`.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from uuid import UUID
    >>> class Channel:
    ...     def __init__(self):
    ...         self.lines = []
    ...     def is_enabled(self, severity):
    ...         return severity is not Severity.DEBUG
    ...     def write(self, severity, text, error=None):
    ...         self.lines.append(text)
    >>> channel = Channel()
    >>> class Provider:
    ...     def resolve(self, name):
    ...         return channel
    >>> class Sink:
    ...     def write(self, severity, line):
    ...         pass
    >>> class Clock:
    ...     def now(self):
    ...         return datetime(2025, 1, 1, tzinfo=timezone.utc)
    >>> entry = create_log_entry(
    ...     backend=Provider(),
    ...     diagnostic_sink=Sink(),
    ...     clock=Clock(),
    ...     id_provider=lambda: UUID(int=7),
    ...     fallback_channel="unknown_caller",
    ... )
    >>> entry(severity=Severity.INFO, message="hello", error=None, channel="svc", correlation_id=None).emitted
    True
    >>> channel.lines
    ['[00000000-0000-0000-0000-000000000007] [svc] [hello]']
    >>> entry(severity=Severity.DEBUG, message="quiet", error=None, channel="svc", correlation_id=None).reason
    'skipped_below_threshold'
    """

    toolkit = _EntryToolkit(
        backend=backend,
        diagnostic_sink=diagnostic_sink,
        clock=clock,
        id_provider=id_provider,
        fallback_channel=fallback_channel,
        mirror_diagnostics=mirror_diagnostics,
        emit=_build_diagnostic_emitter(diagnostic_hook),
    )
    return _LogEntryPipeline(toolkit)


@dataclass(frozen=True)
class _EntryToolkit:
    backend: BackendProvider
    diagnostic_sink: DiagnosticSinkPort
    clock: ClockPort
    id_provider: CorrelationIdProvider
    fallback_channel: str
    mirror_diagnostics: bool
    emit: Callable[[str, dict[str, Any]], None]


class _LogEntryPipeline:
    def __init__(self, toolkit: _EntryToolkit) -> None:
        self._toolkit = toolkit

    def __call__(
        self,
        *,
        severity: Severity,
        message: str | None,
        error: BaseException | None,
        channel: str | None,
        correlation_id: UUID | None,
    ) -> LogOutcome:
        request = _normalise_request(self._toolkit, severity, message, error, channel, correlation_id)
        if request.severity is Severity.TRACE:
            return _write_trace(self._toolkit, request)
        target = _resolve_channel(self._toolkit, request)
        if target is None:
            return _skip(self._toolkit, request, OutcomeKind.SKIPPED_BACKEND_UNAVAILABLE)
        skipped = _gate(request, target)
        if skipped is not None:
            return _skip(self._toolkit, request, skipped)
        return _write_backend(self._toolkit, request, target)


def _build_diagnostic_emitter(
    diagnostic_hook: DiagnosticHook,
) -> Callable[[str, dict[str, Any]], None]:
    if diagnostic_hook is None:

        def _noop(event_name: str, payload: dict[str, Any]) -> None:
            return None

        return _noop

    def _emit(event_name: str, payload: dict[str, Any]) -> None:
        try:
            diagnostic_hook(event_name, payload)
        except Exception:
            logger.warning("diagnostic hook failed for %s", event_name, exc_info=True)

    return _emit


def _normalise_request(
    toolkit: _EntryToolkit,
    severity: Severity,
    message: str | None,
    error: BaseException | None,
    channel: str | None,
    correlation_id: UUID | None,
) -> LogRequest:
    return LogRequest.normalise(
        severity=severity,
        message=message,
        error=error,
        channel=channel,
        correlation_id=correlation_id,
        fallback_channel=toolkit.fallback_channel,
        new_correlation_id=toolkit.id_provider,
    )


def _resolve_channel(toolkit: _EntryToolkit, request: LogRequest) -> BackendChannel | None:
    try:
        return toolkit.backend.resolve(request.channel)
    except Exception:
        logger.debug("backend could not resolve channel %r", request.channel, exc_info=True)
        return None


def _gate(request: LogRequest, target: BackendChannel) -> OutcomeKind | None:
    try:
        enabled = target.is_enabled(request.severity)
    except Exception:
        logger.debug("backend channel %r failed its level check", request.channel, exc_info=True)
        return OutcomeKind.SKIPPED_BACKEND_UNAVAILABLE
    return None if enabled else OutcomeKind.SKIPPED_BELOW_THRESHOLD


def _compose(request: LogRequest) -> str:
    summary = summarize_exception(request.error) if request.error is not None else None
    return compose_text(request.message, summary)


def _diagnostic_line(toolkit: _EntryToolkit, request: LogRequest, text: str) -> str:
    return format_diagnostic_line(
        request.severity,
        text,
        request.correlation_id,
        request.channel,
        toolkit.clock.now(),
    )


def _write_trace(toolkit: _EntryToolkit, request: LogRequest) -> LogOutcome:
    text = _compose(request)
    toolkit.diagnostic_sink.write(request.severity, _diagnostic_line(toolkit, request, text))
    return _report(toolkit, request)


def _write_backend(toolkit: _EntryToolkit, request: LogRequest, target: BackendChannel) -> LogOutcome:
    text = _compose(request)
    target.write(request.severity, format_log_line(text, request.correlation_id, request.channel), request.error)
    if toolkit.mirror_diagnostics:
        toolkit.diagnostic_sink.write(request.severity, _diagnostic_line(toolkit, request, text))
    return _report(toolkit, request)


def _report(toolkit: _EntryToolkit, request: LogRequest) -> LogOutcome:
    outcome = LogOutcome.emitted_with(request.correlation_id)
    toolkit.emit(
        "emitted",
        {"channel": request.channel, "severity": request.severity.severity, "correlation_id": str(request.correlation_id)},
    )
    return outcome


def _skip(toolkit: _EntryToolkit, request: LogRequest, kind: OutcomeKind) -> LogOutcome:
    outcome = LogOutcome.skipped(kind)
    toolkit.emit(
        "skipped",
        {"channel": request.channel, "severity": request.severity.severity, "reason": outcome.reason},
    )
    return outcome


__all__ = ["DiagnosticHook", "LogEntryCallable", "create_log_entry"]
