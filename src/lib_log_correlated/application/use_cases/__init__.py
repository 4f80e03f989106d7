"""Application use cases."""

from __future__ import annotations

from .log_entry import DiagnosticHook, LogEntryCallable, create_log_entry

__all__ = ["DiagnosticHook", "LogEntryCallable", "create_log_entry"]
