from pydantic import ConfigDict, Field, field_validator
from typing import Optional
from stores.llm.multimodal_utils import MultimodalUtils
from .base import FlowModel

class SymptomReport(FlowModel):
    """Input model shared by the severity and potential-conditions flows."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    symptoms: str = Field(description="The symptoms reported by the user, described in their own words.")
    image_data_uri: Optional[str] = Field(
        default=None,
        alias="imageDataUri",
        description="An optional image of the symptom or injury, as a data URI that must include a MIME type "
                    "and use Base64 encoding. Expected format: 'data:<mimetype>;base64,<encoded_data>'.",
    )

    @field_validator("symptoms")
    @classmethod
    def symptoms_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Symptoms cannot be empty.")
        return v

    @field_validator("image_data_uri", mode="before")
    @classmethod
    def image_must_be_data_uri(cls, v):
        if v is None or v == "":
            return None
        if not isinstance(v, str):
            raise ValueError("Image must be a data URI of the form 'data:<mimetype>;base64,<encoded_data>'.")
        # raises ValueError for a malformed URI or a payload that is not valid base64
        MultimodalUtils.parse_data_uri(v)
        return v
