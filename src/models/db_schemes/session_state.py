from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from .chat_session import ChatSession

class SessionState(BaseModel):
    """Chat history kept by the client between runs. Passed in and returned explicitly, never held globally."""
    sessions: List[ChatSession] = Field(default_factory=list)
    active_session_id: Optional[str] = Field(default=None, alias="activeSessionId")

    model_config = ConfigDict(populate_by_name=True)
