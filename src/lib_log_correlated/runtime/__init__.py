"""Runtime façade that wires the correlated logging facade.

Purpose
-------
Expose a stable entry point (``init``, ``get``, ``shutdown`` and the
severity shortcuts) that host applications use instead of assembling the
inner layers themselves.

Contents
--------
* ``init`` – composition root for the facade.
* ``get`` – accessor for the active :class:`CorrelatedLogger`.
* ``trace`` … ``fatal`` – module-level shortcuts delegating to ``get()``;
  before ``init`` trace still reaches a default stderr diagnostic sink.
* ``shutdown`` – closes the backend provider and clears the runtime.
* ``inspect_runtime`` – read-only snapshot of the active configuration.

System Role
-----------
Outer shell of the package: adapters and use cases stay hidden behind this
interface so host code depends on a handful of functions.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from lib_log_correlated.domain import LogOutcome, OutcomeKind, Severity
from lib_log_correlated.facade import CorrelatedLogger

from ._composition import build_runtime, build_standalone_logger
from ._settings import DEFAULT_FALLBACK_CHANNEL, RuntimeConfig, build_runtime_settings
from ._state import clear_runtime, current_runtime, is_initialised, peek_runtime, set_runtime, standalone_logger


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Immutable view over the active logging runtime."""

    fallback_channel: str
    mirror_diagnostics: bool
    diagnostic_stream: str
    backend: str
    diagnostic_sink: str


__all__ = [
    "DEFAULT_FALLBACK_CHANNEL",
    "RuntimeConfig",
    "RuntimeSnapshot",
    "debug",
    "error",
    "fatal",
    "get",
    "info",
    "init",
    "inspect_runtime",
    "is_initialised",
    "shutdown",
    "trace",
    "warn",
]


def init(config: RuntimeConfig | None = None) -> CorrelatedLogger:
    """Compose the facade according to ``config`` and install it.

    Why
    ---
    Hosts call ``init`` once during startup. Centralising the composition
    keeps call sites free of backend wiring.

    Inputs
    ------
    config:
        :class:`RuntimeConfig`; ``None`` uses the defaults (stdlib backend,
        frame-based caller inference, Rich diagnostic sink on stderr).
        ``LOG_CORRELATED_*`` environment variables override its fields.

    Outputs
    -------
    The composed :class:`CorrelatedLogger` (also available via :func:`get`).

    Side Effects
    ------------
    Raises :class:`RuntimeError` if called while a runtime is already active.
    Raises :class:`ValueError` for invalid settings.
    """

    if is_initialised():
        raise RuntimeError(
            "lib_log_correlated.init() cannot be called twice without shutdown(); call lib_log_correlated.shutdown() first",
        )
    settings = build_runtime_settings(config or RuntimeConfig())
    runtime = build_runtime(settings)
    set_runtime(runtime)
    return runtime.logger


def get() -> CorrelatedLogger:
    """Return the active :class:`CorrelatedLogger`.

    Raises :class:`RuntimeError` when ``init`` has not been called.
    """

    return current_runtime().logger


def inspect_runtime() -> RuntimeSnapshot:
    """Return a read-only snapshot of the current runtime state."""

    runtime = current_runtime()
    return RuntimeSnapshot(
        fallback_channel=runtime.fallback_channel,
        mirror_diagnostics=runtime.mirror_diagnostics,
        diagnostic_stream=runtime.diagnostic_stream,
        backend=type(runtime.backend).__name__,
        diagnostic_sink=type(runtime.diagnostic_sink).__name__,
    )


def shutdown() -> None:
    """Close the backend provider (when it supports it) and clear runtime state.

    Loggers obtained before shutdown keep working but report
    ``skipped_backend_unavailable`` once a closable provider is closed.
    """

    runtime = current_runtime()
    close = getattr(runtime.backend, "close", None)
    if callable(close):
        close()
    clear_runtime()


def _dispatch(
    severity: Severity,
    message: str | BaseException | None,
    error: BaseException | None,
    caller: str | None,
    correlation_id: UUID | None,
) -> LogOutcome:
    runtime = peek_runtime()
    if runtime is not None:
        logger = runtime.logger
    elif severity is Severity.TRACE:
        logger = standalone_logger(build_standalone_logger)
    else:
        return LogOutcome.skipped(OutcomeKind.SKIPPED_BACKEND_UNAVAILABLE)
    # frames: resolver <- log <- _dispatch <- shortcut <- host code
    return logger.log(severity, message, error, caller=caller, correlation_id=correlation_id, stacklevel=3)


def trace(
    message: str | BaseException | None = None,
    error: BaseException | None = None,
    *,
    caller: str | None = None,
    correlation_id: UUID | None = None,
) -> LogOutcome:
    """Module-level :meth:`CorrelatedLogger.trace`."""
    return _dispatch(Severity.TRACE, message, error, caller, correlation_id)


def debug(
    message: str | BaseException | None = None,
    error: BaseException | None = None,
    *,
    caller: str | None = None,
    correlation_id: UUID | None = None,
) -> LogOutcome:
    """Module-level :meth:`CorrelatedLogger.debug`."""
    return _dispatch(Severity.DEBUG, message, error, caller, correlation_id)


def info(
    message: str | BaseException | None = None,
    error: BaseException | None = None,
    *,
    caller: str | None = None,
    correlation_id: UUID | None = None,
) -> LogOutcome:
    """Module-level :meth:`CorrelatedLogger.info`."""
    return _dispatch(Severity.INFO, message, error, caller, correlation_id)


def warn(
    message: str | BaseException | None = None,
    error: BaseException | None = None,
    *,
    caller: str | None = None,
    correlation_id: UUID | None = None,
) -> LogOutcome:
    """Module-level :meth:`CorrelatedLogger.warn`."""
    return _dispatch(Severity.WARN, message, error, caller, correlation_id)


def error(
    message: str | BaseException | None = None,
    error: BaseException | None = None,
    *,
    caller: str | None = None,
    correlation_id: UUID | None = None,
) -> LogOutcome:
    """Module-level :meth:`CorrelatedLogger.error`."""
    return _dispatch(Severity.ERROR, message, error, caller, correlation_id)


def fatal(
    message: str | BaseException | None = None,
    error: BaseException | None = None,
    *,
    caller: str | None = None,
    correlation_id: UUID | None = None,
) -> LogOutcome:
    """Module-level :meth:`CorrelatedLogger.fatal`."""
    return _dispatch(Severity.FATAL, message, error, caller, correlation_id)

