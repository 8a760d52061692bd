import json
from typing import Optional
from stores.llm.LLMInterface import LLMInterface
from stores.llm.templates.template_parser import TemplateParser

# Phrases that only appear in one prompt template each.
SEVERITY_MARKER = "Your task is to analyze user-reported symptoms"
CONDITIONS_MARKER = "suggest a list of potential medical conditions"
REFINE_MARKER = "provide refined advice"
CLARIFY_MARKER = "engaging in a follow-up conversation"
SPECIALTY_MARKER = "suggest a single, most relevant type of medical specialist"

SEVERITY_PAYLOAD = {
    "severityAssessment": "The described symptoms might suggest a common viral infection.",
    "nextStepsRecommendation": "Rest, stay hydrated and consult a GP if symptoms persist beyond a few days.",
    "questionsToConsider": ["How high is your fever?", "Is swallowing painful?"],
}

CONDITIONS_PAYLOAD = [
    {
        "condition": "Common Cold",
        "explanation": "A viral infection of the upper respiratory tract.",
        "distinguishingSymptoms": ["Runny nose", "Sneezing"],
    },
    {
        "condition": "Influenza",
        "explanation": "A viral infection with sudden fever and aches.",
        "distinguishingSymptoms": ["High fever", "Body aches"],
    },
    {
        "condition": "Strep Throat",
        "explanation": "A bacterial throat infection.",
    },
]

REFINE_PAYLOAD = {
    "refinedAdvice": "Monitor your temperature and see a doctor if it rises above 39C.",
    "confidence": "Based on common patterns only.",
}

SPECIALTY_PAYLOAD = {
    "suggestedSpecialty": "General Practitioner",
    "reasoning": "A GP can assess common symptoms like fever and sore throat.",
}

CLARIFY_PAYLOAD = {
    "clarificationText": "A mild fever alongside a sore throat is common with viral infections.",
}


def default_responses() -> dict:
    return {
        SEVERITY_MARKER: json.dumps(SEVERITY_PAYLOAD),
        CONDITIONS_MARKER: json.dumps(CONDITIONS_PAYLOAD),
        REFINE_MARKER: json.dumps(REFINE_PAYLOAD),
        CLARIFY_MARKER: json.dumps(CLARIFY_PAYLOAD),
        SPECIALTY_MARKER: json.dumps(SPECIALTY_PAYLOAD),
    }


class FakeGenerationClient(LLMInterface):
    """
    Answers each prompt by the first marker it contains. A response can be a
    string, None, an exception instance (raised), or an async callable
    receiving the prompt.
    """

    def __init__(self, responses: Optional[dict] = None):
        self.responses = default_responses()
        self.responses.update(responses or {})
        self.calls = []
        self.generation_model_id = None

    def set_generation_model(self, model_id: str):
        self.generation_model_id = model_id

    def process_text(self, text: str):
        return text.strip()

    async def generate_text(self, prompt: str, image_data_uri: Optional[str] = None,
                            max_output_tokens: int = None, temperature: float = None) -> Optional[str]:
        self.calls.append({"prompt": prompt, "image_data_uri": image_data_uri})

        for marker, response in self.responses.items():
            if marker not in prompt:
                continue
            if isinstance(response, Exception):
                raise response
            if callable(response):
                return await response(prompt)
            return response

        raise AssertionError(f"Unexpected prompt: {prompt[:80]!r}")

    def construct_prompt(self, prompt, role: str):
        return {"role": role, "content": prompt}

    def calls_with(self, marker: str) -> list:
        return [call for call in self.calls if marker in call["prompt"]]


def make_template_parser() -> TemplateParser:
    return TemplateParser(language="en", default_language="en")
