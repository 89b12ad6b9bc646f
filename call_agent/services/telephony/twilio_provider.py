"""Twilio telephony provider."""
import asyncio
import logging
from typing import Optional

from twilio.rest import Client

from call_agent.core.config import settings
from call_agent.services.telephony.base import TelephonyProvider
from call_agent.services.telephony.models import CallHandle, CallStatusDetails

logger = logging.getLogger(__name__)


class TwilioTelephonyProvider(TelephonyProvider):
    """Places and inspects calls through the Twilio REST API.

    The Twilio client is synchronous, so every request runs in a worker
    thread to keep the event loop free.
    """

    def __init__(self, client: Optional[Client] = None):
        self.client = client or Client(
            settings.twilio_account_sid, settings.twilio_auth_token
        )

    async def create_call(
        self, to: str, from_number: str, voice_document: str, record: bool = False
    ) -> CallHandle:
        logger.debug(f"[TWILIO] Creating call - To: {to}, From: {from_number}")
        call = await asyncio.to_thread(
            self.client.calls.create,
            to=to,
            from_=from_number,
            twiml=voice_document,
            record=record,
        )
        return CallHandle(
            call_sid=call.sid,
            status=call.status,
            to=call.to,
            from_number=call.from_,
        )

    async def fetch_call_status(self, call_sid: str) -> CallStatusDetails:
        logger.debug(f"[TWILIO] Fetching call - CallSid: {call_sid}")
        call = await asyncio.to_thread(self.client.calls(call_sid).fetch)
        return CallStatusDetails(
            status=call.status,
            direction=call.direction,
            duration=call.duration,
            start_time=call.start_time,
            end_time=call.end_time,
        )
