"""FastAPI dependencies."""
from typing import Optional

from fastapi import Depends

from call_agent.core.config import settings
from call_agent.services.call_session.manager import CallSessionManager
from call_agent.services.script.generator import (
    OpenAIScriptGenerator,
    ScriptGenerationService,
    ScriptGenerator,
)
from call_agent.services.telephony.base import TelephonyProvider
from call_agent.services.telephony.initiator import CallInitiationService
from call_agent.services.telephony.twilio_provider import TwilioTelephonyProvider

# Module-level session (persists across requests)
_session_manager: Optional[CallSessionManager] = None


def get_script_generator() -> ScriptGenerator:
    """Get language model script generator."""
    return OpenAIScriptGenerator()


def get_telephony_provider() -> TelephonyProvider:
    """Get telephony provider."""
    return TwilioTelephonyProvider()


def get_script_service(
    generator: ScriptGenerator = Depends(get_script_generator),
) -> ScriptGenerationService:
    """Get script generation service."""
    return ScriptGenerationService(generator)


def get_call_service(
    provider: TelephonyProvider = Depends(get_telephony_provider),
) -> CallInitiationService:
    """Get call initiation service."""
    return CallInitiationService(provider)


def get_session_manager() -> CallSessionManager:
    """Get the call session manager, creating it and its services on first use."""
    global _session_manager
    if _session_manager is None:
        provider = get_telephony_provider()
        _session_manager = CallSessionManager(
            script_service=get_script_service(get_script_generator()),
            call_service=get_call_service(provider),
            provider=provider,
            poll_interval=settings.status_poll_interval_seconds,
        )
    return _session_manager


async def close_session_manager() -> None:
    """Stop polling and drop the session."""
    global _session_manager
    if _session_manager is not None:
        await _session_manager.close()
        _session_manager = None
