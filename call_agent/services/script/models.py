"""Script generation models."""
from typing import Optional

from pydantic import BaseModel, ConfigDict


class CallBrief(BaseModel):
    """Brief describing who to call and what the call should achieve."""

    model_config = ConfigDict(frozen=True)

    customer_name: str
    goal: str
    product: str
    tone: Optional[str] = None
    notes: Optional[str] = None
