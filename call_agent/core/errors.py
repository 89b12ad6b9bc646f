"""Error taxonomy for the call workflow.

Services raise these; the session manager and the API routers catch them at
the action boundary and turn them into user-facing messages.
"""


class CallAgentError(Exception):
    """Base class for call workflow errors."""


class ValidationError(CallAgentError):
    """A required field is missing or empty. Never retried."""


class EmptyGenerationError(CallAgentError):
    """The language model returned no usable script text."""


class ProviderError(CallAgentError):
    """A collaborator (language model or telephony provider) call failed."""


class StatusRefreshError(CallAgentError):
    """A status fetch failed while polling. Non-fatal, polling continues."""

    def __init__(self, call_sid: str, cause: Exception):
        super().__init__(f"Status refresh failed for {call_sid}: {cause}")
        self.call_sid = call_sid
        self.cause = cause


SCRIPT_INVALID_MESSAGE = "Invalid script configuration."
SCRIPT_FAILED_MESSAGE = "Unable to generate script. Check API key and try again."
CALL_INVALID_MESSAGE = "Invalid call request."
CALL_FAILED_MESSAGE = (
    "Unable to start call. Verify Twilio credentials and destination number."
)
STATUS_FETCH_MESSAGE = "Unable to retrieve call status."
STATUS_REFRESH_MESSAGE = "Unable to refresh call status."


def describe_script_error(error: Exception) -> str:
    """User-facing message for a failed script generation."""
    if isinstance(error, ValidationError):
        return SCRIPT_INVALID_MESSAGE
    return SCRIPT_FAILED_MESSAGE


def describe_call_error(error: Exception) -> str:
    """User-facing message for a failed call initiation."""
    if isinstance(error, ValidationError):
        return CALL_INVALID_MESSAGE
    return CALL_FAILED_MESSAGE
