from pydantic import Field, field_validator
from .base import FlowModel

class SpecialtyInput(FlowModel):
    symptoms: str = Field(description="The symptoms reported by the user.")

    @field_validator("symptoms")
    @classmethod
    def symptoms_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Symptoms cannot be empty.")
        return v

class SpecialtySuggestion(FlowModel):
    suggested_specialty: str = Field(
        alias="suggestedSpecialty",
        description="The suggested medical specialty (e.g., General Practitioner, Cardiologist).",
    )
    reasoning: str = Field(description="A brief explanation for why this specialty is suggested.")
