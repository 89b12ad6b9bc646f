"""Call initiation service."""
import logging
from typing import Optional

from call_agent.core.config import settings
from call_agent.core.errors import ProviderError, ValidationError
from call_agent.services.speech.twiml import build_voice_document
from call_agent.services.telephony.base import TelephonyProvider
from call_agent.services.telephony.models import CallHandle, CallRequest

logger = logging.getLogger(__name__)


class CallInitiationService:
    """Places outbound calls that speak a script.

    Placing a call is not idempotent: failures are raised to the caller and
    never retried.
    """

    def __init__(
        self, provider: TelephonyProvider, from_number: Optional[str] = None
    ):
        self.provider = provider
        self.from_number = from_number or settings.twilio_caller_id

    async def start_call(self, request: CallRequest) -> CallHandle:
        """
        Validate the request, render its voice document and place the call.

        Raises:
            ValidationError: destination or script is empty
            ProviderError: the telephony provider rejected or failed the call
        """
        if not request.to_number.strip():
            raise ValidationError("Destination number is required.")
        if not request.script.strip():
            raise ValidationError("Script is required.")

        voice_document = build_voice_document(request)
        logger.info(
            f"[CALL] Placing call - To: {request.to_number}, "
            f"Voice: {request.voice or 'default'}, Record: {request.record}, "
            f"TwiML length: {len(voice_document)} bytes"
        )

        try:
            handle = await self.provider.create_call(
                to=request.to_number,
                from_number=self.from_number,
                voice_document=voice_document,
                record=request.record,
            )
        except Exception as e:
            logger.error(
                f"[CALL] Call creation failed - To: {request.to_number}, "
                f"Error: {type(e).__name__}: {str(e)}",
                exc_info=True,
            )
            raise ProviderError(f"Call creation failed: {str(e)}") from e

        logger.info(
            f"[CALL] Call created - CallSid: {handle.call_sid}, Status: {handle.status}"
        )
        return handle
