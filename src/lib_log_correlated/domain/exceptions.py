"""Exception normalisation for single-line log entries.

Purpose
-------
Reduce an exception (plus at most one wrapped cause) to a bounded summary
that is safe to embed in one log line.

Contents
--------
* :func:`summarize_exception` – pure summary builder.
* :data:`EXCEPTION_SUMMARY_MAX_CHARS` / :data:`CAUSE_SEPARATOR` constants.
"""

from __future__ import annotations

EXCEPTION_SUMMARY_MAX_CHARS = 500
CAUSE_SEPARATOR = " --- "

_CONTROL_CHARS = str.maketrans("", "", "\r\n\t")


def _exception_text(error: BaseException) -> str:
    try:
        text = str(error)
    except Exception:
        return type(error).__name__
    return text if text.strip() else type(error).__name__


def _inner_cause(error: BaseException) -> BaseException | None:
    """Return the single wrapped exception, preferring an explicit ``raise ... from``."""
    if error.__cause__ is not None:
        return error.__cause__
    if error.__suppress_context__:
        return None
    return error.__context__


def summarize_exception(error: BaseException) -> str:
    """Return a control-character-free summary of ``error`` capped in length.

    Only one level of chaining is followed; the inner cause's own causes are
    ignored.

    Examples
    --------
    >>> try:
    ...     try:
    ...         raise KeyError("root cause")
    ...     except KeyError as inner:
    ...         raise RuntimeError("boom") from inner
    ... except RuntimeError as exc:
    ...     summarize_exception(exc)
    "boom --- 'root cause'"
    >>> summarize_exception(ValueError("line\\none\\ttab"))
    'lineonetab'
    """

    summary = _exception_text(error)
    cause = _inner_cause(error)
    if cause is not None:
        summary = summary + CAUSE_SEPARATOR + _exception_text(cause)
    summary = summary.translate(_CONTROL_CHARS)
    return summary[:EXCEPTION_SUMMARY_MAX_CHARS]


__all__ = ["CAUSE_SEPARATOR", "EXCEPTION_SUMMARY_MAX_CHARS", "summarize_exception"]
