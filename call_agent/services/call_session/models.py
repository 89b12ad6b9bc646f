"""Call session models."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from call_agent.services.call_session.timeline import (
    Timeline,
    fold_status,
    is_terminal,
    normalize_status,
)
from call_agent.services.telephony.models import CallHandle


class PollingState(str, Enum):
    """Lifecycle of status polling for the active call."""

    IDLE = "idle"  # No active call
    POLLING = "polling"  # Call active, status not terminal
    SETTLED = "settled"  # Terminal status observed

    def __str__(self) -> str:
        return self.value


class CallSessionState(BaseModel):
    """Client-visible state of the outbound call workflow."""

    script: str = ""
    handle: Optional[CallHandle] = None
    latest_status: Optional[str] = None
    timeline: Timeline = ()
    polling_state: PollingState = PollingState.IDLE
    script_error: Optional[str] = None
    call_error: Optional[str] = None
    status_error: Optional[str] = None  # Non-fatal, polling keeps going

    def begin_call(self, handle: CallHandle) -> None:
        """Replace the active call, dropping the previous call's timeline."""
        self.handle = handle
        self.timeline = ()
        self.latest_status = None
        self.status_error = None
        self.polling_state = PollingState.POLLING
        self.record_status(handle.status)

    def record_status(self, status: Optional[str]) -> None:
        """Fold an observed status into the timeline."""
        if self.polling_state == PollingState.SETTLED:
            return
        self.timeline = fold_status(self.timeline, status)
        if normalize_status(status):
            self.latest_status = normalize_status(status)
        if is_terminal(status):
            self.polling_state = PollingState.SETTLED
