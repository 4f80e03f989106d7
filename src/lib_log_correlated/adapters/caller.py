"""Caller resolvers implementing :class:`CallerResolverPort`.

Purpose
-------
Infer ``<module>.<qualified scope>.<member>`` for the code that invoked a
facade entry point, using a single :func:`sys._getframe` lookup.

Contents
--------
* :class:`FrameCallerResolver` – frame-based resolver (default).
* :class:`NullCallerResolver` – never infers; for hosts passing ``caller``
  explicitly at every call site.
"""

from __future__ import annotations

import sys
from types import FrameType

from lib_log_correlated.application.ports.caller import CallerResolverPort


def _identity_for(frame: FrameType) -> str | None:
    code = frame.f_code
    if code.co_name.startswith("<"):
        # module body, lambda, comprehension
        return None
    module = frame.f_globals.get("__name__")
    if not isinstance(module, str) or not module:
        return None
    return f"{module}.{code.co_qualname}"


class FrameCallerResolver(CallerResolverPort):
    """Resolve the caller identity from one stack frame.

    Examples
    --------
    >>> def outer():
    ...     return FrameCallerResolver().resolve(stacklevel=0)
    >>> outer().endswith("outer")
    True
    """

    def resolve(self, stacklevel: int) -> str | None:
        """Return the identity of the frame ``stacklevel`` levels above our caller.

        Frame lookup failures degrade to ``None``.
        """
        try:
            # +1 skips this method's own frame
            frame = sys._getframe(stacklevel + 1)
            return _identity_for(frame)
        except Exception:
            return None


class NullCallerResolver(CallerResolverPort):
    """Resolver that never infers an identity."""

    def resolve(self, stacklevel: int) -> str | None:
        return None


__all__ = ["FrameCallerResolver", "NullCallerResolver"]
