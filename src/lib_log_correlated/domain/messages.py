"""Message composition for backend and diagnostic lines.

Purpose
-------
Merge the caller's free text, the normalised exception summary, the
correlation identifier, and the channel identity into the strings written by
the facade.

Contents
--------
* :func:`compose_text` – message/exception precedence rules.
* :func:`format_log_line` – line handed to the backend.
* :func:`format_diagnostic_line` – timestamped line for the diagnostic channel.

System Role
-----------
Pure domain helpers called by the log-entry use case only after the severity
gate has passed.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from .levels import Severity

NO_MESSAGE_PLACEHOLDER = "No message or exception was supplied to the logger"
MESSAGE_EXCEPTION_SEPARATOR = " | "
DIAGNOSTIC_TAG = "CorrelatedLog:"


def _present(value: str | None) -> bool:
    return value is not None and bool(value.strip())


def compose_text(message: str | None, exception_summary: str | None) -> str:
    """Return the body text according to the message/exception precedence.

    Examples
    --------
    >>> compose_text("hello", None)
    'hello'
    >>> compose_text(None, "boom")
    'boom'
    >>> compose_text("hello", "boom")
    'hello | boom'
    >>> compose_text("  ", None) == NO_MESSAGE_PLACEHOLDER
    True
    """

    has_message = _present(message)
    has_exception = _present(exception_summary)
    if has_message and has_exception:
        return f"{message}{MESSAGE_EXCEPTION_SEPARATOR}{exception_summary}"
    if has_message:
        return message  # type: ignore[return-value]
    if has_exception:
        return exception_summary  # type: ignore[return-value]
    return NO_MESSAGE_PLACEHOLDER


def format_log_line(text: str, correlation_id: UUID, channel: str) -> str:
    """Wrap ``text`` with correlation id and channel for backend consumption.

    >>> format_log_line("hello", UUID(int=0), "app.Worker.run")
    '[00000000-0000-0000-0000-000000000000] [app.Worker.run] [hello]'
    """

    return f"[{correlation_id}] [{channel}] [{text}]"


def format_diagnostic_line(
    severity: Severity,
    text: str,
    correlation_id: UUID,
    channel: str,
    timestamp: datetime,
) -> str:
    """Return the human-facing line written to the diagnostic channel."""

    return f"{DIAGNOSTIC_TAG} ({severity.code}) {timestamp.isoformat()} --- {correlation_id} --- {channel} -- {text}"


__all__ = [
    "DIAGNOSTIC_TAG",
    "MESSAGE_EXCEPTION_SEPARATOR",
    "NO_MESSAGE_PLACEHOLDER",
    "compose_text",
    "format_diagnostic_line",
    "format_log_line",
]
