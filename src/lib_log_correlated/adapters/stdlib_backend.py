"""Stdlib :mod:`logging` adapter implementing :class:`BackendProvider`.

Purpose
-------
Route facade entries to ``logging.getLogger(channel)`` so host applications
keep configuring handlers, levels and formatters the usual way.

Contents
--------
* :class:`StdlibBackendChannel` – wraps one :class:`logging.Logger`.
* :class:`StdlibBackendProvider` – resolves channels; resolves nothing once
  closed.

System Role
-----------
Default backend wired by :func:`lib_log_correlated.init`. Filtering and
output stay with the stdlib configuration; the adapter only translates
severities and forwards the raw exception as ``exc_info``.
"""

from __future__ import annotations

import logging

from lib_log_correlated.application.ports.backend import BackendChannel, BackendProvider
from lib_log_correlated.domain.levels import TRACE_LEVEL_NUM, Severity


def register_trace_level() -> None:
    """Give the numeric ``TRACE`` level a readable name in stdlib records."""

    if logging.getLevelName(TRACE_LEVEL_NUM) != "TRACE":
        logging.addLevelName(TRACE_LEVEL_NUM, "TRACE")


class StdlibBackendChannel(BackendChannel):
    """Expose a :class:`logging.Logger` through the channel contract.

    Examples
    --------
    >>> channel = StdlibBackendChannel(logging.getLogger("doctest.channel"))
    >>> channel.logger.name
    'doctest.channel'
    """

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def is_enabled(self, severity: Severity) -> bool:
        """Delegate to :meth:`logging.Logger.isEnabledFor`."""
        return self._logger.isEnabledFor(severity.to_python_level())

    def write(self, severity: Severity, text: str, error: BaseException | None = None) -> None:
        """Log ``text``; ``error`` becomes ``exc_info`` so handlers render the traceback."""
        self._logger.log(severity.to_python_level(), text, exc_info=error)


class StdlibBackendProvider(BackendProvider):
    """Resolve channel names through :func:`logging.getLogger`."""

    def __init__(self) -> None:
        register_trace_level()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def resolve(self, channel: str) -> BackendChannel | None:
        """Return the channel, or ``None`` after :meth:`close`."""
        if self._closed:
            return None
        return StdlibBackendChannel(logging.getLogger(channel))

    def close(self) -> None:
        """Stop resolving channels; later calls report the backend as unavailable."""
        self._closed = True


__all__ = ["StdlibBackendChannel", "StdlibBackendProvider", "register_trace_level"]
