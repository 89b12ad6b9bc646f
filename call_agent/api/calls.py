"""Outbound call endpoints."""
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PayloadValidationError

from call_agent.api.schemas import (
    CallResponse,
    CallStartRequest,
    CallStatusResponse,
    ErrorResponse,
)
from call_agent.core.dependencies import get_call_service, get_telephony_provider
from call_agent.core.errors import (
    CALL_INVALID_MESSAGE,
    STATUS_FETCH_MESSAGE,
    CallAgentError,
    describe_call_error,
)
from call_agent.services.telephony.base import TelephonyProvider
from call_agent.services.telephony.initiator import CallInitiationService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/call",
    response_model=CallResponse,
    responses={400: {"model": ErrorResponse}},
)
async def start_call(
    request: Request,
    call_service: CallInitiationService = Depends(get_call_service),
):
    """
    Place an outbound call that speaks the script.

    Not idempotent: a failure is reported and never retried.
    """
    logger.info(
        f"[CALL] Request received - Client: {request.client.host if request.client else 'unknown'}"
    )

    try:
        payload = CallStartRequest.model_validate(await request.json())
    except (PayloadValidationError, ValueError) as e:
        logger.warning(f"[CALL] Invalid payload - Error: {type(e).__name__}: {str(e)}")
        return JSONResponse({"error": CALL_INVALID_MESSAGE}, status_code=400)

    try:
        handle = await call_service.start_call(payload.to_call_request())
    except CallAgentError as e:
        logger.error(f"[CALL] Call initiation error - Error: {type(e).__name__}: {str(e)}")
        return JSONResponse({"error": describe_call_error(e)}, status_code=400)

    return CallResponse.from_handle(handle)


@router.get(
    "/call/{sid}",
    response_model=CallStatusResponse,
    responses={400: {"model": ErrorResponse}},
)
async def get_call_status(
    sid: str,
    provider: TelephonyProvider = Depends(get_telephony_provider),
):
    """Get the current status of a call."""
    logger.debug(f"[CALL STATUS] Request received - CallSid: {sid}")

    if not sid.strip():
        return JSONResponse({"error": STATUS_FETCH_MESSAGE}, status_code=400)

    try:
        details = await provider.fetch_call_status(sid)
    except Exception as e:
        logger.error(
            f"[CALL STATUS] Error fetching call status - CallSid: {sid}, "
            f"Error: {type(e).__name__}: {str(e)}",
            exc_info=True,
        )
        return JSONResponse({"error": STATUS_FETCH_MESSAGE}, status_code=400)

    return CallStatusResponse.from_details(details)
