"""Call session endpoints.

These drive the server-side session: generate a script, override it, place
a call, and read back the live status timeline. Action failures are stored in
the session's error slots, so a failed action still returns the snapshot.
"""
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PayloadValidationError

from call_agent.api.schemas import (
    CallStartRequest,
    ErrorResponse,
    ScriptOverrideRequest,
    ScriptRequest,
    SessionResponse,
)
from call_agent.core.dependencies import get_session_manager
from call_agent.core.errors import CALL_INVALID_MESSAGE, SCRIPT_INVALID_MESSAGE
from call_agent.services.call_session.manager import CallSessionManager

router = APIRouter(prefix="/session")
logger = logging.getLogger(__name__)


@router.get("", response_model=SessionResponse)
async def get_session(
    session_manager: CallSessionManager = Depends(get_session_manager),
):
    """Get the current session snapshot."""
    return SessionResponse.from_state(session_manager.snapshot())


@router.put(
    "/script",
    response_model=SessionResponse,
    responses={400: {"model": ErrorResponse}},
)
async def override_script(
    request: Request,
    session_manager: CallSessionManager = Depends(get_session_manager),
):
    """Replace the session script with user-edited text."""
    try:
        payload = ScriptOverrideRequest.model_validate(await request.json())
    except (PayloadValidationError, ValueError) as e:
        logger.warning(f"[SESSION] Invalid script override - Error: {type(e).__name__}")
        return JSONResponse({"error": SCRIPT_INVALID_MESSAGE}, status_code=400)

    session_manager.set_script(payload.script)
    return SessionResponse.from_state(session_manager.snapshot())


@router.post(
    "/script",
    response_model=SessionResponse,
    responses={400: {"model": ErrorResponse}},
)
async def generate_session_script(
    request: Request,
    session_manager: CallSessionManager = Depends(get_session_manager),
):
    """Generate a script for the session from a brief."""
    try:
        payload = ScriptRequest.model_validate(await request.json())
    except (PayloadValidationError, ValueError) as e:
        logger.warning(f"[SESSION] Invalid script payload - Error: {type(e).__name__}")
        return JSONResponse({"error": SCRIPT_INVALID_MESSAGE}, status_code=400)

    await session_manager.generate_script(payload.to_brief())
    return SessionResponse.from_state(session_manager.snapshot())


@router.post(
    "/call",
    response_model=SessionResponse,
    responses={400: {"model": ErrorResponse}},
)
async def start_session_call(
    request: Request,
    session_manager: CallSessionManager = Depends(get_session_manager),
):
    """Place a call and start tracking its status in the session."""
    try:
        payload = CallStartRequest.model_validate(await request.json())
    except (PayloadValidationError, ValueError) as e:
        logger.warning(f"[SESSION] Invalid call payload - Error: {type(e).__name__}")
        return JSONResponse({"error": CALL_INVALID_MESSAGE}, status_code=400)

    await session_manager.start_call(payload.to_call_request())
    return SessionResponse.from_state(session_manager.snapshot())
