"""Per-call request value object."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from uuid import UUID

from .levels import Severity


@dataclass(slots=True, frozen=True)
class LogRequest:
    """Normalised arguments of one facade call.

    Attributes
    ----------
    severity:
        Requested :class:`Severity`.
    message:
        Caller text, ``None`` when absent or blank.
    error:
        Raw exception object, forwarded untouched to the backend.
    channel:
        Channel identity; never empty.
    correlation_id:
        Identifier grouping entries of one logical operation.
    """

    severity: Severity
    message: str | None
    error: BaseException | None
    channel: str
    correlation_id: UUID

    def __post_init__(self) -> None:
        if not self.channel.strip():
            raise ValueError("channel must not be empty")

    @classmethod
    def normalise(
        cls,
        *,
        severity: Severity,
        message: str | None,
        error: BaseException | None,
        channel: str | None,
        correlation_id: UUID | None,
        fallback_channel: str,
        new_correlation_id: Callable[[], UUID],
    ) -> "LogRequest":
        """Apply the channel fallback and generate a correlation id when missing."""

        text = message if message is not None and message.strip() else None
        resolved_channel = channel if channel is not None and channel.strip() else fallback_channel
        cid = correlation_id if correlation_id is not None else new_correlation_id()
        return cls(
            severity=severity,
            message=text,
            error=error,
            channel=resolved_channel,
            correlation_id=cid,
        )


__all__ = ["LogRequest"]
