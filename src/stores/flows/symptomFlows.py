import logging
from typing import List
from stores.llm.LLMInterface import LLMInterface
from stores.llm.templates.template_parser import TemplateParser
from .promptFlow import PromptFlow
from .scheme import (
    SymptomReport, SeverityAssessment,
    ConditionSuggestion, PotentialConditions, MAX_POTENTIAL_CONDITIONS,
    RefineDiagnosisInput, RefinedAdvice,
    SpecialtyInput, SpecialtySuggestion,
    ClarificationInput, ClarificationResult,
)

logger = logging.getLogger("uvicorn")

class SymptomFlows:
    """
    The five prompt flows of the assistant, bound to one generation client
    and one template parser. Each attribute is an awaitable `PromptFlow`.
    """

    def __init__(self, generation_client: LLMInterface, template_parser: TemplateParser):
        self.generation_client = generation_client
        self.template_parser = template_parser

        self.assess_symptom_severity = PromptFlow(
            name="assessSymptomSeverityFlow",
            label="Error in assessing symptom severity",
            generation_client=generation_client,
            render_prompt=self.render_severity_prompt,
            input_model=SymptomReport,
            output_type=SeverityAssessment,
            accepts_image=True,
        )

        self.suggest_potential_conditions = PromptFlow(
            name="suggestPotentialConditionsFlow",
            label="Error in suggesting potential conditions",
            generation_client=generation_client,
            render_prompt=self.render_conditions_prompt,
            input_model=SymptomReport,
            output_type=PotentialConditions,
            accepts_image=True,
            postprocess=self.limit_conditions,
        )

        self.refine_diagnosis = PromptFlow(
            name="refineDiagnosisFlow",
            label="Error in refining diagnosis",
            generation_client=generation_client,
            render_prompt=self.render_refine_prompt,
            input_model=RefineDiagnosisInput,
            output_type=RefinedAdvice,
        )

        self.clarify_symptoms = PromptFlow(
            name="clarifySymptomsFlow",
            label="Error in clarifying symptoms",
            generation_client=generation_client,
            render_prompt=self.render_clarification_prompt,
            input_model=ClarificationInput,
            output_type=ClarificationResult,
        )

        self.suggest_doctor_specialty = PromptFlow(
            name="suggestDoctorSpecialtyFlow",
            label="Error in suggesting doctor specialty",
            generation_client=generation_client,
            render_prompt=self.render_specialty_prompt,
            input_model=SpecialtyInput,
            output_type=SpecialtySuggestion,
        )

    def _template(self, group: str, key: str, vars: dict = None) -> str:
        text = self.template_parser.get(group, key, vars)
        if text is None:
            raise ValueError(f"Missing prompt template '{group}.{key}' for language '{self.template_parser.language}'")
        return text

    def _user_text(self, text: str) -> str:
        return self.generation_client.process_text(text)

    # ---------------- prompt rendering ----------------

    def render_severity_prompt(self, report: SymptomReport) -> str:
        image_section = self._template("severity_assessment", "image_section") if report.image_data_uri else ""
        return self._template("severity_assessment", "severity_assessment_prompt", {
            "symptoms": self._user_text(report.symptoms),
            "image_section": image_section,
        })

    def render_conditions_prompt(self, report: SymptomReport) -> str:
        image_section = self._template("potential_conditions", "image_section") if report.image_data_uri else ""
        return self._template("potential_conditions", "potential_conditions_prompt", {
            "symptoms": self._user_text(report.symptoms),
            "image_section": image_section,
            "max_conditions": MAX_POTENTIAL_CONDITIONS,
        })

    def render_refine_prompt(self, refine_input: RefineDiagnosisInput) -> str:
        return self._template("refine_diagnosis", "refine_diagnosis_prompt", {
            "original_symptoms": self._user_text(refine_input.original_symptoms),
            "selected_condition": refine_input.selected_condition.strip(),
        })

    def render_specialty_prompt(self, specialty_input: SpecialtyInput) -> str:
        return self._template("doctor_specialty", "doctor_specialty_prompt", {
            "symptoms": self._user_text(specialty_input.symptoms),
        })

    def render_clarification_prompt(self, clarification_input: ClarificationInput) -> str:
        severity = clarification_input.current_severity_assessment

        image_note_key = "image_provided_note" if clarification_input.image_data_uri else "no_image_note"

        questions = ""
        if severity.questions_to_consider:
            questions = self._template("clarification", "questions_section", {
                "questions": "\n".join(f"- {q}" for q in severity.questions_to_consider),
            })

        return self._template("clarification", "clarification_prompt", {
            "original_symptoms": self._user_text(clarification_input.original_symptoms),
            "image_note": self._template("clarification", image_note_key),
            "severity_assessment": severity.severity_assessment,
            "next_steps_recommendation": severity.next_steps_recommendation,
            "questions_section": questions,
            "conditions_section": self._render_conditions_section(clarification_input.current_potential_conditions),
            "user_question": self._user_text(clarification_input.user_question),
        })

    def _render_conditions_section(self, conditions: List[ConditionSuggestion]) -> str:
        if not conditions:
            return self._template("clarification", "no_conditions_note")

        not_specified = self._template("clarification", "not_specified")
        return "\n".join(
            self._template("clarification", "condition_item", {
                "condition": c.condition,
                "explanation": c.explanation,
                "distinguishing_symptoms": "; ".join(c.distinguishing_symptoms) or not_specified,
            })
            for c in conditions
        )

    # ---------------- output shaping ----------------

    @staticmethod
    def limit_conditions(conditions: List[ConditionSuggestion]) -> List[ConditionSuggestion]:
        if len(conditions) > MAX_POTENTIAL_CONDITIONS:
            logger.warning(f"[suggestPotentialConditionsFlow] Model returned {len(conditions)} conditions, "
                           f"keeping the first {MAX_POTENTIAL_CONDITIONS}")
            return conditions[:MAX_POTENTIAL_CONDITIONS]
        return conditions
