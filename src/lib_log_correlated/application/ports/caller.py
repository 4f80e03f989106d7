"""Port for inferring the identity of the code that called the facade."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CallerResolverPort(Protocol):
    """Produce ``<scope>.<member>`` for a frame ``stacklevel`` levels up."""

    def resolve(self, stacklevel: int) -> str | None:
        """Return the caller identity, or ``None`` when it cannot be determined.

        ``stacklevel=1`` designates the immediate caller of the function that
        invoked :meth:`resolve`.
        """


__all__ = ["CallerResolverPort"]
