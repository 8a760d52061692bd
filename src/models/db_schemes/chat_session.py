from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4
from stores.flows.scheme import AIResponse, RefinedAdvice, SpecialtySuggestion

def _new_id() -> str:
    return uuid4().hex

def _now() -> datetime:
    return datetime.now(timezone.utc)

class MessageRole(Enum):
    USER = "user"
    AI = "ai"

class ChatMessage(BaseModel):
    id: str = Field(default_factory=_new_id)
    role: MessageRole
    text: str
    timestamp: datetime = Field(default_factory=_now)

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

class ChatSession(BaseModel):
    """One conversation: the submitted symptoms, the AI results and the follow-up messages."""
    id: str = Field(default_factory=_new_id)
    timestamp: datetime = Field(default_factory=_now)
    current_symptoms: str = Field(default="", alias="currentSymptoms")
    title: Optional[str] = None
    image_data_uri: Optional[str] = Field(default=None, alias="imageDataUri")
    ai_response: Optional[AIResponse] = Field(default=None, alias="aiResponse")
    refined_advice: Optional[RefinedAdvice] = Field(default=None, alias="refinedAdvice")
    specialty: Optional[SpecialtySuggestion] = None
    messages: List[ChatMessage] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)
