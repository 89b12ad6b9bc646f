"""Call status timeline."""
from datetime import datetime, timezone
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

# Once one of these is observed the call is over.
TERMINAL_STATUSES = frozenset(
    {
        "completed",
        "canceled",
        "busy",
        "failed",
        "no-answer",
    }
)


class StatusEntry(BaseModel):
    """A status change observed for a call."""

    model_config = ConfigDict(frozen=True)

    status: str
    timestamp: datetime


Timeline = Tuple[StatusEntry, ...]


def normalize_status(status: Optional[str]) -> str:
    """Lowercase and strip a provider status value."""
    return (status or "").strip().lower()


def is_terminal(status: Optional[str]) -> bool:
    """Check if a status ends the call lifecycle."""
    return normalize_status(status) in TERMINAL_STATUSES


def fold_status(
    timeline: Timeline, incoming: Optional[str], now: Optional[datetime] = None
) -> Timeline:
    """
    Fold an observed status into a timeline.

    Returns the timeline unchanged when the status repeats the last entry,
    is empty, or arrives after a terminal entry. Otherwise returns a new
    timeline with one entry appended.
    """
    status = normalize_status(incoming)
    if not status:
        return timeline
    if timeline:
        last = timeline[-1]
        if last.status == status or last.status in TERMINAL_STATUSES:
            return timeline

    timestamp = now or datetime.now(timezone.utc)
    if timeline and timestamp < timeline[-1].timestamp:
        timestamp = timeline[-1].timestamp
    return timeline + (StatusEntry(status=status, timestamp=timestamp),)
