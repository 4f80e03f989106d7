"""Public package surface of the correlated logging facade.

Typical use::

    import lib_log_correlated as log

    log.init()
    outcome = log.info("order accepted")
    log.error("payment failed", exc, correlation_id=outcome.correlation_id)
"""

from __future__ import annotations

from .domain import LogOutcome, OutcomeKind, Severity
from .facade import CorrelatedLogger
from .runtime import (
    RuntimeConfig,
    RuntimeSnapshot,
    debug,
    error,
    fatal,
    get,
    info,
    init,
    inspect_runtime,
    is_initialised,
    shutdown,
    trace,
    warn,
)

__all__ = [
    "CorrelatedLogger",
    "LogOutcome",
    "OutcomeKind",
    "RuntimeConfig",
    "RuntimeSnapshot",
    "Severity",
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
