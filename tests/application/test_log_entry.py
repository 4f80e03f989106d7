from __future__ import annotations

from uuid import UUID

import pytest

from lib_log_correlated.domain.levels import Severity
from lib_log_correlated.domain.messages import NO_MESSAGE_PLACEHOLDER
from lib_log_correlated.domain.outcome import OutcomeKind

GATED = [severity for severity in Severity if severity is not Severity.TRACE]


def _call(entry, severity=Severity.INFO, message="hello", error=None, channel="app.job", correlation_id=None):
    return entry(severity=severity, message=message, error=error, channel=channel, correlation_id=correlation_id)


@pytest.mark.parametrize("severity", GATED)
def test_disabled_level_skips_without_writing(make_entry, make_backend, sink, severity: Severity) -> None:
    backend = make_backend(enabled=set())
    entry = make_entry(backend, mirror_diagnostics=True)

    outcome = _call(entry, severity=severity, error=RuntimeError("boom"))

    assert outcome.kind is OutcomeKind.SKIPPED_BELOW_THRESHOLD
    assert outcome.correlation_id is None
    assert backend.gate_queries == [severity]
    assert backend.writes == []
    assert sink.lines == []


def test_disabled_level_never_normalises_the_exception(make_entry, make_backend, monkeypatch: pytest.MonkeyPatch) -> None:
    from lib_log_correlated.application.use_cases import log_entry

    def _fail(_error):
        raise AssertionError("summary must not be built for disabled levels")

    monkeypatch.setattr(log_entry, "summarize_exception", _fail)
    entry = make_entry(make_backend(enabled=set()))

    outcome = _call(entry, severity=Severity.ERROR, error=RuntimeError("boom"))

    assert outcome.reason == "skipped_below_threshold"


@pytest.mark.parametrize("severity", GATED)
def test_unavailable_backend_is_reported_not_raised(make_entry, make_backend, severity: Severity) -> None:
    backend = make_backend(available=False)
    entry = make_entry(backend)

    outcome = _call(entry, severity=severity)

    assert outcome.kind is OutcomeKind.SKIPPED_BACKEND_UNAVAILABLE
    assert backend.resolved == ["app.job"]


def test_backend_resolution_errors_count_as_unavailable(make_entry) -> None:
    class Exploding:
        def resolve(self, channel: str):
            raise RuntimeError("logging torn down")

    outcome = _call(make_entry(Exploding()))

    assert outcome.kind is OutcomeKind.SKIPPED_BACKEND_UNAVAILABLE


def test_level_check_errors_count_as_unavailable(make_entry, sink, caplog: pytest.LogCaptureFixture) -> None:
    class TornDownChannel:
        def is_enabled(self, severity: Severity) -> bool:
            raise RuntimeError("gate broke")

        def write(self, severity: Severity, text: str, error: BaseException | None = None) -> None:
            raise AssertionError("write must not be reached")

    class Provider:
        def resolve(self, channel: str):
            return TornDownChannel()

    with caplog.at_level("DEBUG", logger="lib_log_correlated.application.use_cases.log_entry"):
        outcome = _call(make_entry(Provider(), mirror_diagnostics=True))

    assert outcome.kind is OutcomeKind.SKIPPED_BACKEND_UNAVAILABLE
    assert outcome.correlation_id is None
    assert sink.lines == []
    assert "failed its level check" in caplog.text


def test_enabled_level_writes_composed_line_and_raw_error(make_entry, backend, ids) -> None:
    entry = make_entry(backend)
    error = RuntimeError("boom")

    outcome = _call(entry, severity=Severity.ERROR, message="payment failed", error=error)

    assert outcome.kind is OutcomeKind.EMITTED
    assert outcome.correlation_id == UUID(int=1)
    assert backend.writes == [
        (Severity.ERROR, f"[{UUID(int=1)}] [app.job] [payment failed | boom]", error),
    ]


def test_generated_correlation_ids_differ_between_calls(make_entry, backend) -> None:
    entry = make_entry(backend)

    first = _call(entry)
    second = _call(entry)

    assert first.kind is second.kind is OutcomeKind.EMITTED
    assert first.correlation_id != second.correlation_id
    assert len(backend.writes) == 2


def test_supplied_correlation_id_is_echoed(make_entry, backend) -> None:
    cid = UUID("0f8fad5b-d9cb-469f-a165-70867728950e")
    entry = make_entry(backend)

    first = _call(entry, correlation_id=cid)
    second = _call(entry, correlation_id=cid)

    assert first.correlation_id == second.correlation_id == cid
    assert all(text.startswith(f"[{cid}]") for _, text, _ in backend.writes)


def test_missing_channel_uses_fallback(make_entry, backend) -> None:
    _call(make_entry(backend), channel=None)

    assert backend.resolved == ["unknown_caller"]


def test_placeholder_when_nothing_supplied(make_entry, backend) -> None:
    _call(make_entry(backend), message=None)

    assert backend.writes[0][1].endswith(f"[{NO_MESSAGE_PLACEHOLDER}]")


def test_trace_bypasses_gate_and_writes_diagnostic_only(make_entry, make_backend, sink) -> None:
    backend = make_backend(enabled=set(), available=False)
    entry = make_entry(backend)

    outcome = _call(entry, severity=Severity.TRACE, message="tick")

    assert outcome.kind is OutcomeKind.EMITTED
    assert backend.resolved == []
    assert backend.writes == []
    assert len(sink.lines) == 1
    assert sink.lines[0].startswith("CorrelatedLog: (TRACE) 2025-09-23T12:00:00+00:00")
    assert sink.lines[0].endswith("app.job -- tick")
    assert sink.severities == [Severity.TRACE]


def test_mirroring_is_off_by_default(make_entry, backend, sink) -> None:
    _call(make_entry(backend))

    assert sink.lines == []


def test_mirroring_copies_emitted_entries(make_entry, backend, sink) -> None:
    _call(make_entry(backend, mirror_diagnostics=True), severity=Severity.WARN, message="disk low")

    assert len(sink.lines) == 1
    assert "(WARN)" in sink.lines[0]
    assert sink.severities == [Severity.WARN]
    assert sink.lines[0].endswith("-- disk low")


def test_diagnostic_hook_receives_milestones(make_entry, make_backend) -> None:
    events: list[tuple[str, dict]] = []
    backend = make_backend(enabled={Severity.ERROR})
    entry = make_entry(backend, diagnostic_hook=lambda name, payload: events.append((name, payload)))

    _call(entry, severity=Severity.DEBUG)
    _call(entry, severity=Severity.ERROR)

    assert [name for name, _ in events] == ["skipped", "emitted"]
    assert events[0][1]["reason"] == "skipped_below_threshold"
    assert events[1][1]["severity"] == "error"


def test_failing_diagnostic_hook_does_not_change_outcome(make_entry, backend, caplog: pytest.LogCaptureFixture) -> None:
    def _hook(name: str, payload: dict) -> None:
        raise RuntimeError("hook broke")

    outcome = _call(make_entry(backend, diagnostic_hook=_hook))

    assert outcome.emitted
    assert "diagnostic hook failed" in caplog.text
