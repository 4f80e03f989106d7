"""Runtime composition helpers wiring domain, application, and adapters.

Purpose
-------
Translate :class:`RuntimeSettings` into the live :class:`LoggingRuntime`
singleton. The helpers keep wiring small, declarative, and testable.
"""

from __future__ import annotations

from lib_log_correlated.application.use_cases.log_entry import create_log_entry
from lib_log_correlated.facade import CorrelatedLogger

from ._factories import (
    SystemClock,
    UuidProvider,
    create_backend,
    create_caller_resolver,
    create_diagnostic_sink,
)
from ._settings import RuntimeConfig, RuntimeSettings, build_runtime_settings
from ._state import LoggingRuntime


def build_runtime(settings: RuntimeSettings) -> LoggingRuntime:
    """Assemble the logging runtime from resolved settings."""

    backend = create_backend(settings)
    diagnostic_sink = create_diagnostic_sink(settings)
    entry = create_log_entry(
        backend=backend,
        diagnostic_sink=diagnostic_sink,
        clock=SystemClock(),
        id_provider=UuidProvider(),
        fallback_channel=settings.fallback_channel,
        mirror_diagnostics=settings.mirror_diagnostics,
        diagnostic_hook=settings.diagnostic_hook,
    )
    logger = CorrelatedLogger(entry, create_caller_resolver(settings))
    return LoggingRuntime(
        logger=logger,
        backend=backend,
        diagnostic_sink=diagnostic_sink,
        fallback_channel=settings.fallback_channel,
        mirror_diagnostics=settings.mirror_diagnostics,
        diagnostic_stream=settings.diagnostic_stream,
    )


def build_standalone_logger() -> CorrelatedLogger:
    """Return a default-configured logger for trace calls made before ``init``.

    Only its diagnostic sink (stderr unless overridden by the environment) is
    ever used; non-trace calls without a runtime never reach it.
    """

    return build_runtime(build_runtime_settings(RuntimeConfig())).logger


__all__ = ["build_runtime", "build_standalone_logger"]
