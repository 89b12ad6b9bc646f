"""Voice document (TwiML) generation."""
from call_agent.services.speech.markup import escape_markup
from call_agent.services.speech.voices import DEFAULT_LANGUAGE, DEFAULT_VOICE
from call_agent.services.telephony.models import CallRequest

PAUSE_AFTER_SCRIPT_SECONDS = 2


def build_voice_document(request: CallRequest) -> str:
    """
    Generate TwiML that speaks the call script and then pauses.

    The request is trusted to carry a non-empty script and destination;
    validation happens in the call initiation service.

    Args:
        request: Call request with script, voice and language

    Returns:
        TwiML XML string
    """
    voice = escape_markup(request.voice or DEFAULT_VOICE)
    language = escape_markup(request.language or DEFAULT_LANGUAGE)
    escaped_script = escape_markup(request.script)

    return f"""<Response>
  <Say language="{language}" voice="{voice}">
    {escaped_script}
  </Say>
  <Pause length="{PAUSE_AFTER_SCRIPT_SECONDS}"/>
</Response>"""
