from pydantic import Field
from typing import List, Optional
from .base import FlowModel

class SeverityAssessment(FlowModel):
    """Output model for the severity assessment flow."""
    severity_assessment: str = Field(
        alias="severityAssessment",
        description="An AI-generated perspective on the potential seriousness of the condition based on the "
                    "symptoms and image (if provided). This is not a diagnosis.",
    )
    next_steps_recommendation: str = Field(
        alias="nextStepsRecommendation",
        description="Recommendations for the user on what to do next, based on the severity assessment. "
                    "Should emphasize consulting a healthcare professional.",
    )
    questions_to_consider: Optional[List[str]] = Field(
        default=None,
        alias="questionsToConsider",
        description="Questions a healthcare professional might ask, or points the user should observe further.",
    )
