from pydantic import Field
from typing import List
from .base import FlowModel

# The prompt asks for the top N conditions; longer lists are cut to this size.
MAX_POTENTIAL_CONDITIONS = 3

class ConditionSuggestion(FlowModel):
    """One candidate condition returned by the potential conditions flow."""
    condition: str = Field(description="The name of the potential medical condition.")
    explanation: str = Field(
        description="A concise explanation of the condition and its relevance to the symptoms and image (if provided).",
    )
    distinguishing_symptoms: List[str] = Field(
        default_factory=list,
        alias="distinguishingSymptoms",
        description="Up to 3 key symptoms that help distinguish this condition from similar presentations.",
    )

PotentialConditions = List[ConditionSuggestion]
