from __future__ import annotations

from datetime import datetime, timezone
from io import StringIO
from uuid import UUID

import pytest
from rich.console import Console

from lib_log_correlated.application.use_cases.log_entry import LogEntryCallable, create_log_entry
from lib_log_correlated.domain.levels import Severity


class RecordingChannel:
    def __init__(self, name: str, *, enabled: set[Severity] | None = None) -> None:
        self.name = name
        self.enabled = set(Severity) if enabled is None else set(enabled)
        self.gate_queries: list[Severity] = []
        self.writes: list[tuple[Severity, str, BaseException | None]] = []

    def is_enabled(self, severity: Severity) -> bool:
        self.gate_queries.append(severity)
        return severity in self.enabled

    def write(self, severity: Severity, text: str, error: BaseException | None = None) -> None:
        self.writes.append((severity, text, error))


class RecordingBackend:
    def __init__(self, *, enabled: set[Severity] | None = None, available: bool = True) -> None:
        self.enabled = enabled
        self.available = available
        self.channels: dict[str, RecordingChannel] = {}
        self.resolved: list[str] = []

    def resolve(self, channel: str) -> RecordingChannel | None:
        self.resolved.append(channel)
        if not self.available:
            return None
        if channel not in self.channels:
            self.channels[channel] = RecordingChannel(channel, enabled=self.enabled)
        return self.channels[channel]

    @property
    def writes(self) -> list[tuple[Severity, str, BaseException | None]]:
        return [write for channel in self.channels.values() for write in channel.writes]

    @property
    def gate_queries(self) -> list[Severity]:
        return [query for channel in self.channels.values() for query in channel.gate_queries]


class RecordingSink:
    def __init__(self) -> None:
        self.lines: list[str] = []
        self.severities: list[Severity] = []

    def write(self, severity: Severity, line: str) -> None:
        self.severities.append(severity)
        self.lines.append(line)


class FixedClock:
    def now(self) -> datetime:
        return datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc)


class SequentialIds:
    def __init__(self) -> None:
        self.counter = 0

    def __call__(self) -> UUID:
        self.counter += 1
        return UUID(int=self.counter)


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture
def make_entry(sink: RecordingSink, ids: SequentialIds):
    def _make(backend_provider, **overrides) -> LogEntryCallable:
        options = {
            "backend": backend_provider,
            "diagnostic_sink": sink,
            "clock": FixedClock(),
            "id_provider": ids,
            "fallback_channel": "unknown_caller",
        }
        options.update(overrides)
        return create_log_entry(**options)

    return _make


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=240, color_system=None)


@pytest.fixture
def make_backend():
    return RecordingBackend
