"""Script generation prompt templates."""
from call_agent.services.script.models import CallBrief

DEFAULT_TONE = "Professional and upbeat"
MAX_SCRIPT_WORDS = 200


def get_system_instruction() -> str:
    """Generate the system instruction for the script writer."""
    return (
        "You craft succinct, natural sounding call scripts. "
        f"Keep responses under {MAX_SCRIPT_WORDS} words."
    )


def get_user_prompt(brief: CallBrief) -> str:
    """Generate the user prompt describing the call to script."""
    return f"""You are a professional outbound calling agent. Create a concise call script following this structure:
1. Friendly greeting by the agent mentioning the customer name ({brief.customer_name}).
2. One-sentence purpose statement describing the goal ({brief.goal}) and product ({brief.product}).
3. Two personalized talking points or benefits.
4. A closing call-to-action asking for the next step.

Tone: {DEFAULT_TONE if brief.tone is None else brief.tone}.
Additional notes: {"None" if brief.notes is None else brief.notes}.

Return the script as plain text with each agent line prefixed by "Agent:" and customer responses prefixed by "Customer:" where natural."""
