"""Unit tests for call script generation."""
from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock

import pytest

from call_agent.core.errors import EmptyGenerationError, ProviderError, ValidationError
from call_agent.services.script.generator import (
    OpenAIScriptGenerator,
    ScriptGenerationService,
    extract_response_text,
)
from call_agent.services.script.models import CallBrief
from call_agent.services.script.prompt import get_system_instruction, get_user_prompt
from tests.fake_providers import SAMPLE_SCRIPT, FakeScriptGenerator


@pytest.fixture
def brief():
    return CallBrief(customer_name="Jordan", goal="Book a demo", product="Nimbus CRM")


class TestScriptGenerationService:
    """Test ScriptGenerationService."""

    @pytest.mark.asyncio
    async def test_returns_generated_script(self, brief):
        """Test generated text is returned unchanged apart from outer whitespace."""
        generator = FakeScriptGenerator(response=f"\n  {SAMPLE_SCRIPT}  \n")
        service = ScriptGenerationService(generator)

        script = await service.generate_script(brief)

        assert script == SAMPLE_SCRIPT
        assert "Agent:" in script
        assert len(generator.calls) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["customer_name", "goal", "product"])
    @pytest.mark.parametrize("value", ["", "   "])
    async def test_missing_required_field_skips_generator(self, brief, field, value):
        """Test an empty required field fails validation without calling the model."""
        generator = FakeScriptGenerator()
        service = ScriptGenerationService(generator)

        with pytest.raises(ValidationError):
            await service.generate_script(brief.model_copy(update={field: value}))

        assert generator.calls == []

    @pytest.mark.asyncio
    async def test_generator_failure_raises_provider_error(self, brief):
        """Test a failing model call is reported as a provider error."""
        generator = FakeScriptGenerator(error=RuntimeError("invalid api key"))
        service = ScriptGenerationService(generator)

        with pytest.raises(ProviderError):
            await service.generate_script(brief)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("response", [None, "", "   \n", SimpleNamespace(output_text="", output=[])])
    async def test_empty_response_raises_empty_generation(self, brief, response):
        """Test an empty model reply is rejected."""
        service = ScriptGenerationService(FakeScriptGenerator(response=response))

        with pytest.raises(EmptyGenerationError):
            await service.generate_script(brief)

    @pytest.mark.asyncio
    async def test_prompts_describe_the_brief(self, brief):
        """Test the brief and the script structure reach the model."""
        generator = FakeScriptGenerator()
        service = ScriptGenerationService(generator)

        await service.generate_script(brief)

        system_instruction, user_prompt = generator.calls[0]
        assert "200 words" in system_instruction
        assert "Jordan" in user_prompt
        assert "Book a demo" in user_prompt
        assert "Nimbus CRM" in user_prompt
        assert "Two personalized talking points" in user_prompt
        assert '"Agent:"' in user_prompt


class TestPrompts:
    """Test prompt templates."""

    def test_default_tone_and_notes(self, brief):
        """Test missing tone and notes get defaults."""
        prompt = get_user_prompt(brief)

        assert "Tone: Professional and upbeat." in prompt
        assert "Additional notes: None." in prompt

    def test_custom_tone_and_notes(self, brief):
        """Test tone and notes from the brief are used."""
        prompt = get_user_prompt(
            brief.model_copy(update={"tone": "Warm and confident", "notes": "Met at expo"})
        )

        assert "Tone: Warm and confident." in prompt
        assert "Additional notes: Met at expo." in prompt

    def test_empty_tone_and_notes_are_kept(self, brief):
        """Test only absent tone and notes fall back to defaults."""
        prompt = get_user_prompt(brief.model_copy(update={"tone": "", "notes": ""}))

        assert "Tone: ." in prompt
        assert "Additional notes: ." in prompt
        assert "Professional and upbeat" not in prompt

    def test_system_instruction(self):
        """Test the system instruction caps script length."""
        assert get_system_instruction().endswith("Keep responses under 200 words.")


class TestExtractResponseText:
    """Test extract_response_text()."""

    def test_flattened_output_text(self):
        """Test output_text is preferred when present."""
        response = SimpleNamespace(
            output_text="  Agent: Hello  ",
            output=[SimpleNamespace(content=[SimpleNamespace(text="ignored")])],
        )

        assert extract_response_text(response) == "Agent: Hello"

    def test_concatenates_content_fragments(self):
        """Test fragments are joined when there is no flattened text."""
        response = SimpleNamespace(
            output_text=None,
            output=[
                SimpleNamespace(type="reasoning", content=None),
                SimpleNamespace(
                    content=[
                        SimpleNamespace(text="Agent: Hi Jordan."),
                        SimpleNamespace(text="\nCustomer: Hello."),
                    ]
                ),
                SimpleNamespace(content=[SimpleNamespace(refusal="nope")]),
            ],
        )

        assert extract_response_text(response) == "Agent: Hi Jordan.\nCustomer: Hello."

    def test_plain_dict_response(self):
        """Test dict shaped responses are supported."""
        response = {
            "output": [
                {"content": [{"type": "output_text", "text": "Agent: "}]},
                {"content": [{"type": "output_text", "text": "Hi there"}]},
            ]
        }

        assert extract_response_text(response) == "Agent: Hi there"

    def test_missing_output(self):
        """Test a response without text extracts to an empty string."""
        assert extract_response_text(SimpleNamespace()) == ""


class TestOpenAIScriptGenerator:
    """Test the OpenAI backed generator."""

    @pytest.mark.asyncio
    async def test_calls_responses_api(self):
        """Test the Responses API receives system and user messages."""
        mock_client = Mock()
        mock_client.responses.create = AsyncMock(
            return_value=SimpleNamespace(output_text="Agent: Hi")
        )
        generator = OpenAIScriptGenerator(client=mock_client, model="gpt-4o-mini")

        response = await generator.generate("system text", "user text")

        assert extract_response_text(response) == "Agent: Hi"
        mock_client.responses.create.assert_awaited_once_with(
            model="gpt-4o-mini",
            input=[
                {"role": "system", "content": "system text"},
                {"role": "user", "content": "user text"},
            ],
        )
