"""Structured result returned by every facade call.

Purpose
-------
Replace the bare "was it logged" flag with a tagged, immutable outcome that
names the reason when nothing was written.

Contents
--------
* :class:`OutcomeKind` – the three possible tags.
* :class:`LogOutcome` – frozen dataclass holding the tag and, for emitted
  entries, the correlation identifier.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any
from uuid import UUID


class OutcomeKind(Enum):
    """Tag describing what happened to one log attempt."""

    EMITTED = "emitted"
    SKIPPED_BACKEND_UNAVAILABLE = "skipped_backend_unavailable"
    SKIPPED_BELOW_THRESHOLD = "skipped_below_threshold"


@dataclass(slots=True, frozen=True)
class LogOutcome:
    """Result of one facade invocation.

    Attributes
    ----------
    kind:
        :class:`OutcomeKind` tag.
    correlation_id:
        Identifier written with the entry; present only when ``kind`` is
        :attr:`OutcomeKind.EMITTED`.

    Examples
    --------
    >>> from uuid import UUID
    >>> cid = UUID(int=1)
    >>> LogOutcome.emitted_with(cid).to_dict()["ok"]
    True
    >>> LogOutcome.skipped(OutcomeKind.SKIPPED_BELOW_THRESHOLD).reason
    'skipped_below_threshold'
    """

    kind: OutcomeKind
    correlation_id: UUID | None = None

    def __post_init__(self) -> None:
        if self.kind is OutcomeKind.EMITTED and self.correlation_id is None:
            raise ValueError("emitted outcomes require a correlation_id")
        if self.kind is not OutcomeKind.EMITTED and self.correlation_id is not None:
            raise ValueError("skipped outcomes must not carry a correlation_id")

    @classmethod
    def emitted_with(cls, correlation_id: UUID) -> "LogOutcome":
        return cls(OutcomeKind.EMITTED, correlation_id)

    @classmethod
    def skipped(cls, kind: OutcomeKind) -> "LogOutcome":
        return cls(kind)

    @property
    def emitted(self) -> bool:
        """Return ``True`` when the entry reached its destination."""

        return self.kind is OutcomeKind.EMITTED

    @property
    def reason(self) -> str | None:
        """Return the skip reason, or ``None`` for emitted entries."""

        return None if self.emitted else self.kind.value

    def to_dict(self) -> dict[str, Any]:
        """Serialise into the ``ok``/``reason`` payload shape used by diagnostics."""

        return {
            "ok": self.emitted,
            "correlation_id": str(self.correlation_id) if self.correlation_id is not None else None,
            "reason": self.reason,
        }

    def __bool__(self) -> bool:
        return self.emitted


__all__ = ["LogOutcome", "OutcomeKind"]
