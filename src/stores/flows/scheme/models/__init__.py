from .base import FlowModel
from .symptom_report import SymptomReport
from .severity_assessment import SeverityAssessment
from .potential_conditions import ConditionSuggestion, PotentialConditions, MAX_POTENTIAL_CONDITIONS
from .refine_diagnosis import RefineDiagnosisInput, RefinedAdvice
from .doctor_specialty import SpecialtyInput, SpecialtySuggestion
from .ai_response import AIResponse
from .clarification import ClarificationInput, ClarificationResult

__all__ = [
    'FlowModel',

    # Shared input
    'SymptomReport',

    # Severity Assessment
    'SeverityAssessment',

    # Potential Conditions
    'ConditionSuggestion',
    'PotentialConditions',
    'MAX_POTENTIAL_CONDITIONS',

    # Refine Diagnosis
    'RefineDiagnosisInput',
    'RefinedAdvice',

    # Doctor Specialty
    'SpecialtyInput',
    'SpecialtySuggestion',

    # Aggregated response
    'AIResponse',

    # Clarification
    'ClarificationInput',
    'ClarificationResult',
]
