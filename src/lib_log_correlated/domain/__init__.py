"""Domain value objects and pure helpers used by the correlated facade."""

from __future__ import annotations

from .exceptions import CAUSE_SEPARATOR, EXCEPTION_SUMMARY_MAX_CHARS, summarize_exception
from .levels import Severity
from .messages import NO_MESSAGE_PLACEHOLDER, compose_text, format_diagnostic_line, format_log_line
from .outcome import LogOutcome, OutcomeKind
from .request import LogRequest

__all__ = [
    "CAUSE_SEPARATOR",
    "EXCEPTION_SUMMARY_MAX_CHARS",
    "LogOutcome",
    "LogRequest",
    "NO_MESSAGE_PLACEHOLDER",
    "OutcomeKind",
    "Severity",
    "compose_text",
    "format_diagnostic_line",
    "format_log_line",
    "summarize_exception",
]
