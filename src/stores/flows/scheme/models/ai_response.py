from pydantic import Field
from typing import List
from .base import FlowModel
from .severity_assessment import SeverityAssessment
from .potential_conditions import ConditionSuggestion

class AIResponse(FlowModel):
    """Joined result of the severity and potential conditions flows."""
    severity_assessment: SeverityAssessment = Field(alias="severityAssessment")
    potential_conditions: List[ConditionSuggestion] = Field(alias="potentialConditions")
