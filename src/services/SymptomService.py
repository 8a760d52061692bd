from .BaseService import BaseService
from stores.flows.symptomFlows import SymptomFlows
from stores.flows.scheme import (
    AIResponse, SeverityAssessment, ConditionSuggestion,
    RefinedAdvice, SpecialtySuggestion, ClarificationResult,
)
from typing import List, Optional
import asyncio
import logging

logger = logging.getLogger('uvicorn.error')

class SymptomService(BaseService):

    def __init__(self, generation_client, template_parser):
        super().__init__()

        self.generation_client = generation_client
        self.template_parser = template_parser
        self.flows = SymptomFlows(
            generation_client=generation_client,
            template_parser=template_parser,
        )

    async def get_ai_response(self, symptoms: str, image_data_uri: Optional[str] = None) -> AIResponse:
        """
        Severity assessment and potential conditions for one symptom report.

        Both flows run concurrently. The join is all-or-nothing: the first
        failure cancels the other call and is re-raised unchanged.
        """

        # step1: validate before anything reaches the provider
        report = self.flows.assess_symptom_severity.validate_input({
            "symptoms": symptoms,
            "image_data_uri": image_data_uri,
        })

        # step2: fan out
        severity_task = asyncio.create_task(self.flows.assess_symptom_severity(report))
        conditions_task = asyncio.create_task(self.flows.suggest_potential_conditions(report))
        tasks = [severity_task, conditions_task]

        # step3: join
        try:
            severity, conditions = await asyncio.gather(*tasks)
        except Exception as e:
            for task in tasks:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            logger.error(f"Failed to get AI insights: {e}")
            raise

        return AIResponse(
            severity_assessment=severity,
            potential_conditions=conditions,
        )

    async def refine_diagnosis(self, original_symptoms: str, selected_condition: str) -> RefinedAdvice:
        return await self.flows.refine_diagnosis({
            "original_symptoms": original_symptoms,
            "selected_condition": selected_condition,
        })

    async def clarify_symptoms(self, original_symptoms: str, user_question: str,
                               current_severity_assessment: SeverityAssessment,
                               current_potential_conditions: List[ConditionSuggestion],
                               image_data_uri: Optional[str] = None) -> ClarificationResult:
        return await self.flows.clarify_symptoms({
            "original_symptoms": original_symptoms,
            "image_data_uri": image_data_uri,
            "current_severity_assessment": current_severity_assessment,
            "current_potential_conditions": current_potential_conditions,
            "user_question": user_question,
        })

    async def ask_follow_up(self, original_symptoms: str, user_question: str,
                            ai_response: AIResponse,
                            image_data_uri: Optional[str] = None):
        """Clarification plus the held response with any revisions applied."""
        result = await self.clarify_symptoms(
            original_symptoms=original_symptoms,
            user_question=user_question,
            current_severity_assessment=ai_response.severity_assessment,
            current_potential_conditions=ai_response.potential_conditions,
            image_data_uri=image_data_uri,
        )
        return result, result.apply_to(ai_response)

    async def suggest_doctor_specialty(self, symptoms: str) -> SpecialtySuggestion:
        return await self.flows.suggest_doctor_specialty({"symptoms": symptoms})
