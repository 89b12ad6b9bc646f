"""Telephony models."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class CallRequest(BaseModel):
    """Request to place an outbound call that speaks a script."""

    to_number: str  # E.164-like destination, e.g. +14155550123
    script: str
    voice: Optional[str] = None
    language: Optional[str] = None
    record: bool = False


class CallHandle(BaseModel):
    """Identifier and metadata returned by the provider for a created call."""

    model_config = ConfigDict(frozen=True)

    call_sid: str
    status: str
    to: Optional[str] = None
    from_number: Optional[str] = None


class CallStatusDetails(BaseModel):
    """Status snapshot of a call as reported by the provider."""

    status: str
    direction: Optional[str] = None
    duration: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
