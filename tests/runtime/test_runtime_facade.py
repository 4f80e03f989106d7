from __future__ import annotations

import logging
from uuid import UUID

import pytest

import lib_log_correlated as log
from lib_log_correlated import RuntimeConfig
from lib_log_correlated.adapters.caller import NullCallerResolver
from lib_log_correlated.domain.outcome import OutcomeKind


@pytest.fixture(autouse=True)
def reset_runtime(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "LOG_CORRELATED_FALLBACK_CHANNEL",
        "LOG_CORRELATED_MIRROR_DIAGNOSTICS",
        "LOG_CORRELATED_DIAGNOSTIC_STREAM",
        "LOG_CORRELATED_FORCE_COLOR",
        "LOG_CORRELATED_NO_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)
    try:
        yield
    finally:
        if log.is_initialised():
            log.shutdown()


def _shortcut_caller():
    return log.warn("from shortcut")


def test_init_returns_logger_also_available_via_get(backend, sink) -> None:
    logger = log.init(RuntimeConfig(backend_provider=backend, diagnostic_sink=sink))

    assert log.get() is logger
    assert log.is_initialised()


def test_init_twice_raises() -> None:
    log.init()
    with pytest.raises(RuntimeError, match="cannot be called twice"):
        log.init()


def test_get_before_init_raises() -> None:
    with pytest.raises(RuntimeError, match="must be called before"):
        log.get()


def test_gated_shortcuts_without_runtime_report_unavailable() -> None:
    assert not log.is_initialised()
    for shortcut in (log.debug, log.info, log.warn, log.error, log.fatal):
        assert shortcut("hello").kind is OutcomeKind.SKIPPED_BACKEND_UNAVAILABLE


def test_trace_without_runtime_writes_default_stderr_sink(capsys: pytest.CaptureFixture[str]) -> None:
    assert not log.is_initialised()
    cid = UUID(int=9)

    pinned = log.trace("tick", caller="svc", correlation_id=cid)
    generated = log.trace("tock", caller="svc")

    assert pinned.emitted and pinned.correlation_id == cid
    assert generated.emitted and generated.correlation_id is not None
    assert not log.is_initialised()
    err = capsys.readouterr().err
    assert "(TRACE)" in err
    assert f"--- {cid} --- svc -- tick" in err
    assert "svc -- tock" in err


def test_shortcuts_infer_the_host_caller(backend, sink) -> None:
    log.init(RuntimeConfig(backend_provider=backend, diagnostic_sink=sink))

    outcome = _shortcut_caller()

    assert outcome.emitted
    assert list(backend.channels) == [f"{__name__}._shortcut_caller"]


def test_shortcuts_echo_correlation_ids(backend, sink) -> None:
    log.init(RuntimeConfig(backend_provider=backend, diagnostic_sink=sink))
    cid = UUID(int=5)

    assert log.error("boom", correlation_id=cid, caller="svc").correlation_id == cid


def test_trace_shortcut_writes_diagnostic_sink(backend, sink) -> None:
    log.init(RuntimeConfig(backend_provider=backend, diagnostic_sink=sink))

    assert log.trace("tick", caller="svc").emitted
    assert backend.resolved == []
    assert sink.lines[0].endswith("svc -- tick")


def test_custom_fallback_and_resolver(backend, sink) -> None:
    log.init(
        RuntimeConfig(
            backend_provider=backend,
            diagnostic_sink=sink,
            caller_resolver=NullCallerResolver(),
            fallback_channel="orphans",
        )
    )

    log.info("hello")

    assert list(backend.channels) == ["orphans"]


def test_environment_overrides_config(monkeypatch: pytest.MonkeyPatch, backend, sink) -> None:
    monkeypatch.setenv("LOG_CORRELATED_FALLBACK_CHANNEL", "env-channel")
    monkeypatch.setenv("LOG_CORRELATED_MIRROR_DIAGNOSTICS", "yes")
    log.init(RuntimeConfig(backend_provider=backend, diagnostic_sink=sink, fallback_channel="ignored"))

    snapshot = log.inspect_runtime()

    assert snapshot.fallback_channel == "env-channel"
    assert snapshot.mirror_diagnostics is True
    log.info("mirrored", caller="svc")
    assert len(sink.lines) == 1


def test_invalid_diagnostic_stream_is_rejected() -> None:
    with pytest.raises(ValueError, match="diagnostic_stream"):
        log.init(RuntimeConfig(diagnostic_stream="printer"))
    assert not log.is_initialised()


def test_default_runtime_uses_stdlib_backend(caplog: pytest.LogCaptureFixture) -> None:
    log.init()

    snapshot = log.inspect_runtime()
    with caplog.at_level(logging.INFO, logger="tests.runtime.default"):
        outcome = log.info("through stdlib", caller="tests.runtime.default")

    assert snapshot.backend == "StdlibBackendProvider"
    assert snapshot.diagnostic_sink == "RichDiagnosticSink"
    assert outcome.emitted
    assert caplog.records[-1].getMessage() == f"[{outcome.correlation_id}] [tests.runtime.default] [through stdlib]"


def test_shutdown_closes_stdlib_backend() -> None:
    logger = log.init()

    log.shutdown()

    assert not log.is_initialised()
    assert logger.info("late", caller="svc").kind is OutcomeKind.SKIPPED_BACKEND_UNAVAILABLE
