"""Runtime state container and access helpers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from threading import RLock

from lib_log_correlated.application.ports import BackendProvider, DiagnosticSinkPort
from lib_log_correlated.facade import CorrelatedLogger


@dataclass(slots=True)
class LoggingRuntime:
    """Aggregate of live collaborators assembled by the composition root."""

    logger: CorrelatedLogger
    backend: BackendProvider
    diagnostic_sink: DiagnosticSinkPort
    fallback_channel: str
    mirror_diagnostics: bool
    diagnostic_stream: str


_STATE: LoggingRuntime | None = None
_STANDALONE: CorrelatedLogger | None = None
_STATE_LOCK = RLock()


def set_runtime(runtime: LoggingRuntime) -> None:
    """Install ``runtime`` as the active singleton."""

    with _STATE_LOCK:
        global _STATE
        _STATE = runtime


def clear_runtime() -> None:
    """Remove the active runtime if present."""

    with _STATE_LOCK:
        global _STATE
        _STATE = None


def current_runtime() -> LoggingRuntime:
    """Return the active runtime or raise when uninitialised."""

    with _STATE_LOCK:
        if _STATE is None:
            raise RuntimeError("lib_log_correlated.init() must be called before using the logging API")
        return _STATE


def peek_runtime() -> LoggingRuntime | None:
    """Return the active runtime, or ``None`` without raising."""

    with _STATE_LOCK:
        return _STATE


def is_initialised() -> bool:
    """Return ``True`` when :func:`lib_log_correlated.init` has been called."""

    with _STATE_LOCK:
        return _STATE is not None


def standalone_logger(factory: Callable[[], CorrelatedLogger]) -> CorrelatedLogger:
    """Return the logger serving calls made while no runtime is installed.

    Built by ``factory`` on first use and kept for the life of the process.
    """

    with _STATE_LOCK:
        global _STANDALONE
        if _STANDALONE is None:
            _STANDALONE = factory()
        return _STANDALONE


__all__ = [
    "LoggingRuntime",
    "clear_runtime",
    "current_runtime",
    "is_initialised",
    "peek_runtime",
    "set_runtime",
    "standalone_logger",
]
