from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from stores.flows.scheme import SeverityAssessment, ConditionSuggestion

# No emptiness checks here: the service layer rejects empty input (400 + signal).

class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    symptoms: str
    image_data_uri: Optional[str] = Field(default=None, alias="imageDataUri")

class RefineRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    original_symptoms: str = Field(alias="originalSymptoms")
    selected_condition: str = Field(alias="selectedCondition")

class ClarifyRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    original_symptoms: str = Field(alias="originalSymptoms")
    image_data_uri: Optional[str] = Field(default=None, alias="imageDataUri")
    current_severity_assessment: SeverityAssessment = Field(alias="currentSeverityAssessment")
    current_potential_conditions: List[ConditionSuggestion] = Field(alias="currentPotentialConditions")
    user_question: str = Field(alias="userQuestion")

class SpecialtyRequest(BaseModel):
    symptoms: str
