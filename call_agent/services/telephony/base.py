"""Telephony provider interface."""
from abc import ABC, abstractmethod

from call_agent.services.telephony.models import CallHandle, CallStatusDetails


class TelephonyProvider(ABC):
    """Abstract base class for telephony providers."""

    @abstractmethod
    async def create_call(
        self, to: str, from_number: str, voice_document: str, record: bool = False
    ) -> CallHandle:
        """Place an outbound call that plays the given voice document."""
        pass

    @abstractmethod
    async def fetch_call_status(self, call_sid: str) -> CallStatusDetails:
        """Get the current status of a call."""
        pass
