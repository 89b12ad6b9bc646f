"""Voice catalog endpoint."""
from fastapi import APIRouter

from call_agent.api.schemas import VoicesResponse
from call_agent.services.speech.voices import LANGUAGE_OPTIONS, VOICE_OPTIONS

router = APIRouter()


@router.get("/voices", response_model=VoicesResponse)
async def list_voices():
    """List the voices and languages a call can use."""
    return VoicesResponse(voices=VOICE_OPTIONS, languages=LANGUAGE_OPTIONS)
