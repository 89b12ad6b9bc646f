"""Call script generation endpoint."""
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PayloadValidationError

from call_agent.api.schemas import ErrorResponse, ScriptRequest, ScriptResponse
from call_agent.core.dependencies import get_script_service
from call_agent.core.errors import (
    CallAgentError,
    SCRIPT_INVALID_MESSAGE,
    describe_script_error,
)
from call_agent.services.script.generator import ScriptGenerationService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/script",
    response_model=ScriptResponse,
    responses={400: {"model": ErrorResponse}},
)
async def generate_script(
    request: Request,
    script_service: ScriptGenerationService = Depends(get_script_service),
):
    """Generate a call script from a brief."""
    logger.info(
        f"[SCRIPT] Request received - Client: {request.client.host if request.client else 'unknown'}"
    )

    try:
        payload = ScriptRequest.model_validate(await request.json())
    except (PayloadValidationError, ValueError) as e:
        logger.warning(f"[SCRIPT] Invalid payload - Error: {type(e).__name__}: {str(e)}")
        return JSONResponse({"error": SCRIPT_INVALID_MESSAGE}, status_code=400)

    try:
        script = await script_service.generate_script(payload.to_brief())
    except CallAgentError as e:
        logger.error(
            f"[SCRIPT] Script generation error - Error: {type(e).__name__}: {str(e)}"
        )
        return JSONResponse({"error": describe_script_error(e)}, status_code=400)

    return ScriptResponse(script=script)
