"""Call script generation service."""
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from openai import AsyncOpenAI

from call_agent.core.config import settings
from call_agent.core.errors import EmptyGenerationError, ProviderError, ValidationError
from call_agent.services.script.models import CallBrief
from call_agent.services.script.prompt import get_system_instruction, get_user_prompt

logger = logging.getLogger(__name__)


class ScriptGenerator(ABC):
    """Abstract base class for language model script writers."""

    @abstractmethod
    async def generate(self, system_instruction: str, user_prompt: str) -> Any:
        """
        Ask the language model for a script.

        Returns either plain text or the provider's raw response object;
        ScriptGenerationService extracts the text from either.
        """
        pass


class OpenAIScriptGenerator(ScriptGenerator):
    """Script writer backed by the OpenAI Responses API."""

    def __init__(self, client: Optional[AsyncOpenAI] = None, model: Optional[str] = None):
        self.client = client or AsyncOpenAI(api_key=settings.openai_api_key)
        self.model = model or settings.openai_model

    async def generate(self, system_instruction: str, user_prompt: str) -> Any:
        return await self.client.responses.create(
            model=self.model,
            input=[
                {"role": "system", "content": system_instruction},
                {"role": "user", "content": user_prompt},
            ],
        )


def _field(obj: Any, name: str) -> Any:
    """Read a field from an SDK object or a plain dict."""
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def extract_response_text(response: Any) -> str:
    """
    Extract plain text from a language model response.

    Prefers the flattened output_text field; otherwise concatenates the
    text of every content fragment of every output item. Only leading and
    trailing whitespace is removed.
    """
    if response is None:
        return ""
    if isinstance(response, str):
        return response.strip()

    output_text = _field(response, "output_text")
    if isinstance(output_text, str) and output_text.strip():
        return output_text.strip()

    fragments = []
    for item in _field(response, "output") or []:
        content = _field(item, "content")
        if not isinstance(content, list):
            continue
        for chunk in content:
            text = _field(chunk, "text")
            if isinstance(text, str):
                fragments.append(text)
    return "".join(fragments).strip()


class ScriptGenerationService:
    """Service for turning a call brief into a spoken call script."""

    def __init__(self, generator: ScriptGenerator):
        self.generator = generator

    async def generate_script(self, brief: CallBrief) -> str:
        """
        Generate a call script for a brief.

        Raises:
            ValidationError: customer name, goal or product is empty
            ProviderError: the language model call failed
            EmptyGenerationError: the language model returned no text
        """
        missing = [
            name
            for name in ("customer_name", "goal", "product")
            if not getattr(brief, name).strip()
        ]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        system_instruction = get_system_instruction()
        user_prompt = get_user_prompt(brief)
        logger.info(
            f"[SCRIPT] Generating script - Customer: {brief.customer_name}, "
            f"Product: {brief.product}"
        )
        logger.debug(f"[SCRIPT] User prompt:\n{user_prompt}")

        try:
            response = await self.generator.generate(system_instruction, user_prompt)
        except Exception as e:
            logger.error(
                f"[SCRIPT] Language model call failed - Error: {type(e).__name__}: {str(e)}",
                exc_info=True,
            )
            raise ProviderError(f"Script generation failed: {str(e)}") from e

        script = extract_response_text(response)
        if not script:
            raise EmptyGenerationError("Empty script returned from language model.")

        logger.info(f"[SCRIPT] Script generated (length: {len(script)})")
        return script
