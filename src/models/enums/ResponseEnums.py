from enum import Enum

class ResponseSignal(Enum):

    SYMPTOMS_VALIDATION_ERROR = "symptoms_validation_error"
    REQUEST_VALIDATION_ERROR = "request_validation_error"

    AI_ANALYSIS_SUCCESS = "ai_analysis_success"
    AI_ANALYSIS_ERROR = "ai_analysis_error"

    REFINE_DIAGNOSIS_SUCCESS = "refine_diagnosis_success"
    REFINE_DIAGNOSIS_ERROR = "refine_diagnosis_error"

    CLARIFY_SYMPTOMS_SUCCESS = "clarify_symptoms_success"
    CLARIFY_SYMPTOMS_ERROR = "clarify_symptoms_error"

    SPECIALTY_SUGGESTION_SUCCESS = "specialty_suggestion_success"
    SPECIALTY_SUGGESTION_ERROR = "specialty_suggestion_error"

    FACILITIES_RETRIEVED = "facilities_retrieved"
