"""Runtime configuration and environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass

from lib_log_correlated.application.ports import (
    BackendProvider,
    CallerResolverPort,
    DiagnosticSinkPort,
)
from lib_log_correlated.application.use_cases.log_entry import DiagnosticHook

DEFAULT_FALLBACK_CHANNEL = "unknown_caller"
DIAGNOSTIC_STREAMS = ("stderr", "stdout")

ENV_FALLBACK_CHANNEL = "LOG_CORRELATED_FALLBACK_CHANNEL"
ENV_MIRROR_DIAGNOSTICS = "LOG_CORRELATED_MIRROR_DIAGNOSTICS"
ENV_DIAGNOSTIC_STREAM = "LOG_CORRELATED_DIAGNOSTIC_STREAM"
ENV_FORCE_COLOR = "LOG_CORRELATED_FORCE_COLOR"
ENV_NO_COLOR = "LOG_CORRELATED_NO_COLOR"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class RuntimeConfig:
    """Inputs accepted by :func:`lib_log_correlated.init`.

    Attributes
    ----------
    fallback_channel:
        Channel used when the caller cannot be inferred.
    mirror_diagnostics:
        Copy emitted non-trace entries to the diagnostic channel.
    diagnostic_stream:
        ``"stderr"`` or ``"stdout"`` for the default Rich sink.
    force_color, no_color:
        Colour control for the default Rich sink.
    backend_provider, caller_resolver, diagnostic_sink:
        Injected collaborators; ``None`` selects the stdlib backend, the
        frame resolver, and the Rich sink.
    diagnostic_hook:
        Optional callback receiving ``"emitted"``/``"skipped"`` milestones.
    """

    fallback_channel: str = DEFAULT_FALLBACK_CHANNEL
    mirror_diagnostics: bool = False
    diagnostic_stream: str = "stderr"
    force_color: bool = False
    no_color: bool = False
    backend_provider: BackendProvider | None = None
    caller_resolver: CallerResolverPort | None = None
    diagnostic_sink: DiagnosticSinkPort | None = None
    diagnostic_hook: DiagnosticHook = None


@dataclass(frozen=True)
class RuntimeSettings:
    """Validated configuration after environment overrides."""

    fallback_channel: str
    mirror_diagnostics: bool
    diagnostic_stream: str
    force_color: bool
    no_color: bool
    backend_provider: BackendProvider | None
    caller_resolver: CallerResolverPort | None
    diagnostic_sink: DiagnosticSinkPort | None
    diagnostic_hook: DiagnosticHook


def _env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> import os
    >>> _ = os.environ.pop('LOG_CORRELATED_EXAMPLE_BOOL', None)
    >>> _env_bool('LOG_CORRELATED_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LOG_CORRELATED_EXAMPLE_BOOL'] = '0'
    >>> _env_bool('LOG_CORRELATED_EXAMPLE_BOOL', default=True)
    False
    >>> del os.environ['LOG_CORRELATED_EXAMPLE_BOOL']
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _validate_stream(value: str) -> str:
    normalized = value.strip().lower()
    if normalized not in DIAGNOSTIC_STREAMS:
        raise ValueError(f"diagnostic_stream must be one of {', '.join(DIAGNOSTIC_STREAMS)}; got {value!r}")
    return normalized


def build_runtime_settings(config: RuntimeConfig) -> RuntimeSettings:
    """Merge ``config`` with ``LOG_CORRELATED_*`` environment overrides.

    Environment values win over arguments so operators can reconfigure a
    deployed service without code changes.
    """

    fallback = _env_str(ENV_FALLBACK_CHANNEL, config.fallback_channel)
    if not fallback.strip():
        raise ValueError("fallback_channel must not be empty")
    return RuntimeSettings(
        fallback_channel=fallback,
        mirror_diagnostics=_env_bool(ENV_MIRROR_DIAGNOSTICS, config.mirror_diagnostics),
        diagnostic_stream=_validate_stream(_env_str(ENV_DIAGNOSTIC_STREAM, config.diagnostic_stream)),
        force_color=_env_bool(ENV_FORCE_COLOR, config.force_color),
        no_color=_env_bool(ENV_NO_COLOR, config.no_color),
        backend_provider=config.backend_provider,
        caller_resolver=config.caller_resolver,
        diagnostic_sink=config.diagnostic_sink,
        diagnostic_hook=config.diagnostic_hook,
    )


__all__ = ["DEFAULT_FALLBACK_CHANNEL", "RuntimeConfig", "RuntimeSettings", "build_runtime_settings"]
