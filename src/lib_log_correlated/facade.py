"""Correlated logger facade exposing one method per severity.

Purpose
-------
Give calling code a stable logging surface: an optional message, an optional
exception, an optional explicit caller, and an optional correlation id, with
every call answered by a :class:`LogOutcome`.

Contents
--------
* :class:`CorrelatedLogger` – ``trace``/``debug``/``info``/``warn``/
  ``error``/``fatal`` plus the generic :meth:`CorrelatedLogger.log`.

System Role
-----------
Outer edge of the facade. Caller inference happens here because it depends on
the call stack shape; everything else is delegated to the log-entry use case.
"""

from __future__ import annotations

from uuid import UUID

from .application.ports.caller import CallerResolverPort
from .application.use_cases.log_entry import LogEntryCallable
from .domain.levels import Severity
from .domain.outcome import LogOutcome


class CorrelatedLogger:
    """Lightweight facade for correlated logging calls.

    The positional ``message`` may also be an exception, in which case it is
    treated as ``error``::

        log.error(exc)
        log.error("payment failed", exc, correlation_id=order_cid)
    """

    def __init__(self, entry: LogEntryCallable, caller_resolver: CallerResolverPort) -> None:
        """Bind the facade to a log-entry use case and a caller resolver.

        Parameters
        ----------
        entry:
            Callable produced by :func:`create_log_entry`.
        caller_resolver:
            Strategy inferring the caller when ``caller`` is omitted.
        """
        self._entry = entry
        self._caller_resolver = caller_resolver

    def log(
        self,
        severity: Severity,
        message: str | BaseException | None = None,
        error: BaseException | None = None,
        *,
        caller: str | None = None,
        correlation_id: UUID | None = None,
        stacklevel: int = 1,
    ) -> LogOutcome:
        """Log at ``severity`` and return the outcome.

        Parameters
        ----------
        severity:
            Target :class:`Severity`.
        message:
            Free text, or an exception when ``error`` is omitted.
        error:
            Exception whose summary is appended and which is forwarded raw to
            the backend.
        caller:
            Explicit channel identity; overrides inference.
        correlation_id:
            Identifier to echo; a fresh one is generated when ``None``.
        stacklevel:
            Which frame to inspect for caller inference; ``1`` is the code
            calling this method, wrappers add one per level, as with
            :mod:`logging`.
        """
        if isinstance(message, BaseException) and error is None:
            message, error = None, message
        if caller is None or not caller.strip():
            caller = self._caller_resolver.resolve(stacklevel)
        return self._entry(
            severity=severity,
            message=message,
            error=error,
            channel=caller,
            correlation_id=correlation_id,
        )

    def trace(
        self,
        message: str | BaseException | None = None,
        error: BaseException | None = None,
        *,
        caller: str | None = None,
        correlation_id: UUID | None = None,
    ) -> LogOutcome:
        """Write to the diagnostic channel only; never consults the backend."""
        return self.log(Severity.TRACE, message, error, caller=caller, correlation_id=correlation_id, stacklevel=2)

    def debug(
        self,
        message: str | BaseException | None = None,
        error: BaseException | None = None,
        *,
        caller: str | None = None,
        correlation_id: UUID | None = None,
    ) -> LogOutcome:
        return self.log(Severity.DEBUG, message, error, caller=caller, correlation_id=correlation_id, stacklevel=2)

    def info(
        self,
        message: str | BaseException | None = None,
        error: BaseException | None = None,
        *,
        caller: str | None = None,
        correlation_id: UUID | None = None,
    ) -> LogOutcome:
        return self.log(Severity.INFO, message, error, caller=caller, correlation_id=correlation_id, stacklevel=2)

    def warn(
        self,
        message: str | BaseException | None = None,
        error: BaseException | None = None,
        *,
        caller: str | None = None,
        correlation_id: UUID | None = None,
    ) -> LogOutcome:
        return self.log(Severity.WARN, message, error, caller=caller, correlation_id=correlation_id, stacklevel=2)

    def error(
        self,
        message: str | BaseException | None = None,
        error: BaseException | None = None,
        *,
        caller: str | None = None,
        correlation_id: UUID | None = None,
    ) -> LogOutcome:
        return self.log(Severity.ERROR, message, error, caller=caller, correlation_id=correlation_id, stacklevel=2)

    def fatal(
        self,
        message: str | BaseException | None = None,
        error: BaseException | None = None,
        *,
        caller: str | None = None,
        correlation_id: UUID | None = None,
    ) -> LogOutcome:
        return self.log(Severity.FATAL, message, error, caller=caller, correlation_id=correlation_id, stacklevel=2)


__all__ = ["CorrelatedLogger"]
