"""Voices and languages offered for outbound calls."""
from typing import List

from pydantic import BaseModel


class VoiceOption(BaseModel):
    """A selectable text-to-speech voice or language."""

    label: str
    value: str


DEFAULT_VOICE = "Polly.Joanna"
DEFAULT_LANGUAGE = "en-US"

VOICE_OPTIONS: List[VoiceOption] = [
    VoiceOption(label="Polly Joanna (US)", value="Polly.Joanna"),
    VoiceOption(label="Polly Matthew (US)", value="Polly.Matthew"),
    VoiceOption(label="Polly Amy (UK)", value="Polly.Amy"),
    VoiceOption(label="Polly Brian (UK)", value="Polly.Brian"),
    VoiceOption(label="Polly Lupe (ES)", value="Polly.Lupe"),
]

LANGUAGE_OPTIONS: List[VoiceOption] = [
    VoiceOption(label="English (US)", value="en-US"),
    VoiceOption(label="English (UK)", value="en-GB"),
    VoiceOption(label="Spanish (US)", value="es-US"),
    VoiceOption(label="French (Canada)", value="fr-CA"),
]
