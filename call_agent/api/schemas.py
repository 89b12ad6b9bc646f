"""Request and response models for the HTTP API."""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from call_agent.services.call_session.models import CallSessionState
from call_agent.services.script.models import CallBrief
from call_agent.services.speech.voices import VoiceOption
from call_agent.services.telephony.models import (
    CallHandle,
    CallRequest,
    CallStatusDetails,
)


class CamelModel(BaseModel):
    """Model exchanged with the browser using camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScriptRequest(CamelModel):
    """Script generation request."""

    customer_name: str = Field(min_length=1)
    goal: str = Field(min_length=1)
    product: str = Field(min_length=1)
    tone: Optional[str] = None
    notes: Optional[str] = None

    def to_brief(self) -> CallBrief:
        return CallBrief(**self.model_dump())


class ScriptResponse(BaseModel):
    """Script generation response."""

    script: str


class ScriptOverrideRequest(BaseModel):
    """User-edited script."""

    script: str


class CallStartRequest(CamelModel):
    """Call initiation request."""

    to_number: str = Field(min_length=1)
    script: str = Field(min_length=1)
    voice: Optional[str] = None
    language: Optional[str] = None
    record: bool = False

    def to_call_request(self) -> CallRequest:
        return CallRequest(**self.model_dump())


class CallResponse(BaseModel):
    """Created call response."""

    model_config = ConfigDict(populate_by_name=True)

    call_sid: str = Field(alias="callSid")
    status: str
    to: Optional[str] = None
    from_number: Optional[str] = Field(default=None, alias="from")

    @classmethod
    def from_handle(cls, handle: CallHandle) -> "CallResponse":
        return cls(
            call_sid=handle.call_sid,
            status=handle.status,
            to=handle.to,
            from_number=handle.from_number,
        )


class CallStatusResponse(CamelModel):
    """Call status response."""

    status: str
    direction: Optional[str] = None
    duration: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    @classmethod
    def from_details(cls, details: CallStatusDetails) -> "CallStatusResponse":
        return cls(**details.model_dump())


class ErrorResponse(BaseModel):
    """Error response."""

    error: str


class StatusEntryResponse(BaseModel):
    """Timeline entry response."""

    status: str
    timestamp: datetime


class SessionResponse(CamelModel):
    """Call session snapshot."""

    script: str
    call_sid: Optional[str] = None
    latest_status: Optional[str] = None
    polling_state: str
    timeline: List[StatusEntryResponse] = []
    script_error: Optional[str] = None
    call_error: Optional[str] = None
    status_error: Optional[str] = None

    @classmethod
    def from_state(cls, state: CallSessionState) -> "SessionResponse":
        return cls(
            script=state.script,
            call_sid=state.handle.call_sid if state.handle else None,
            latest_status=state.latest_status,
            polling_state=state.polling_state.value,
            timeline=[
                StatusEntryResponse(status=entry.status, timestamp=entry.timestamp)
                for entry in state.timeline
            ],
            script_error=state.script_error,
            call_error=state.call_error,
            status_error=state.status_error,
        )


class VoicesResponse(BaseModel):
    """Available voices and languages."""

    voices: List[VoiceOption]
    languages: List[VoiceOption]
