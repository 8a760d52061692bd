from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class MockUser(BaseModel):
    uid: str
    email: str
    display_name: Optional[str] = Field(default=None, alias="displayName")

    model_config = ConfigDict(populate_by_name=True)
