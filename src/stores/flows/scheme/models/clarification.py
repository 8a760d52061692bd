from pydantic import Field, field_validator
from typing import List, Optional
from stores.flows.updates import Update, update_from_optional
from .base import FlowModel
from .severity_assessment import SeverityAssessment
from .potential_conditions import ConditionSuggestion
from .ai_response import AIResponse

class ClarificationInput(FlowModel):
    """Input model for a follow-up question on a previous assessment."""
    original_symptoms: str = Field(alias="originalSymptoms", description="The initial symptoms reported by the user.")
    image_data_uri: Optional[str] = Field(
        default=None,
        alias="imageDataUri",
        description="The optional image data URI initially provided by the user.",
    )
    current_severity_assessment: SeverityAssessment = Field(
        alias="currentSeverityAssessment",
        description="The most recent severity assessment prior to this follow-up question.",
    )
    current_potential_conditions: List[ConditionSuggestion] = Field(
        alias="currentPotentialConditions",
        description="The most recent list of potential conditions prior to this follow-up question.",
    )
    user_question: str = Field(
        alias="userQuestion",
        description="The user's follow-up question regarding their symptoms or the previous assessment.",
    )

    @field_validator("original_symptoms", "user_question")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Original symptoms and follow-up question cannot be empty.")
        return v

class ClarificationResult(FlowModel):
    """
    Output model for the clarification flow.

    The updated fields are present only when the model decided the follow-up
    changes its view. Callers should go through `severity_update` /
    `conditions_update` (or `apply_to`) rather than test the fields for None.
    """
    clarification_text: str = Field(
        alias="clarificationText",
        description="The textual answer to the user's follow-up question, taking into account all prior context.",
    )
    updated_severity_assessment: Optional[SeverityAssessment] = Field(
        default=None,
        alias="updatedSeverityAssessment",
        description="A complete updated severity assessment, omitted when there is no significant change.",
    )
    updated_potential_conditions: Optional[List[ConditionSuggestion]] = Field(
        default=None,
        alias="updatedPotentialConditions",
        description="A complete updated list of potential conditions, omitted when there is no significant change.",
    )

    @property
    def severity_update(self) -> Update[SeverityAssessment]:
        return update_from_optional(self.updated_severity_assessment)

    @property
    def conditions_update(self) -> Update[List[ConditionSuggestion]]:
        return update_from_optional(self.updated_potential_conditions)

    @property
    def has_updates(self) -> bool:
        return self.severity_update.is_replaced or self.conditions_update.is_replaced

    def apply_to(self, ai_response: AIResponse) -> AIResponse:
        """Held response with any replaced parts swapped in. The argument is never mutated."""
        if not self.has_updates:
            return ai_response
        return ai_response.model_copy(update={
            "severity_assessment": self.severity_update.apply(ai_response.severity_assessment),
            "potential_conditions": self.conditions_update.apply(ai_response.potential_conditions),
        })
