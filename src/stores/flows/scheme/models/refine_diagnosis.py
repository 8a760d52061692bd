from pydantic import Field, field_validator
from typing import Optional
from .base import FlowModel

class RefineDiagnosisInput(FlowModel):
    """Input model for refining advice around one user-selected condition."""
    original_symptoms: str = Field(alias="originalSymptoms", description="The initial symptoms reported by the user.")
    selected_condition: str = Field(
        alias="selectedCondition",
        description="The potential condition selected by the user from the list of suggestions.",
    )

    @field_validator("original_symptoms", "selected_condition")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Original symptoms and selected condition cannot be empty.")
        return v

class RefinedAdvice(FlowModel):
    """Output model for the refine diagnosis flow."""
    refined_advice: str = Field(
        alias="refinedAdvice",
        description="More specific advice, questions, or next steps based on the selected condition and original symptoms.",
    )
    confidence: Optional[str] = Field(
        default=None,
        description="An optional statement about the model's confidence or caveats for this refined advice.",
    )
