from ..LLMInterface import LLMInterface
from ..LLMEnums import GoogleEnums, GOOGLE_SAFETY_SETTINGS
from ..multimodal_utils import MultimodalUtils
import google.generativeai as genai
import logging
from typing import Optional

class GoogleProvider(LLMInterface):
    def __init__(self, api_key: str,
                 default_input_max_characters: int=1000,
                 default_generation_max_output_tokens: int=1000,
                 default_generation_temperature: float=0.1):

        self.api_key = api_key
        self.default_input_max_characters = default_input_max_characters
        self.default_generation_max_output_tokens = default_generation_max_output_tokens
        self.default_generation_temperature = default_generation_temperature

        self.generation_model_id = None

        # Configure the Google API client
        genai.configure(api_key=self.api_key)
        self.client = genai

        self.enums = GoogleEnums
        self.safety_settings = GOOGLE_SAFETY_SETTINGS
        self.logger = logging.getLogger(__name__)

    def set_generation_model(self, model_id: str):
        self.generation_model_id = model_id

    def process_text(self, text: str):
        return text[:self.default_input_max_characters].strip()

    async def generate_text(self, prompt: str, image_data_uri: Optional[str] = None,
                            max_output_tokens: int = None, temperature: float = None) -> Optional[str]:

        if not self.generation_model_id:
            self.logger.error("Generation model for Google was not set")
            return None

        max_output_tokens = max_output_tokens if max_output_tokens is not None else self.default_generation_max_output_tokens
        temperature = temperature if temperature is not None else self.default_generation_temperature

        model = self.client.GenerativeModel(
            self.generation_model_id,
            safety_settings=self.safety_settings,
        )

        parts = [prompt]
        if image_data_uri:
            mime_type, image_bytes = MultimodalUtils.parse_data_uri(image_data_uri)
            parts.append({"mime_type": mime_type, "data": image_bytes})
        contents = [self.construct_prompt(prompt=parts, role=self.enums.USER.value)]

        response = await model.generate_content_async(
            contents,
            generation_config={
                'max_output_tokens': max_output_tokens,
                'temperature': temperature,
                'response_mime_type': self.enums.JSON_MIME_TYPE.value,
            }
        )

        if not response or not response.candidates:
            feedback = getattr(response, "prompt_feedback", None)
            self.logger.error(f"Google returned no candidates. Prompt feedback: {feedback}")
            return None

        candidate = response.candidates[0]
        self.logger.debug(f"Candidate finish reason: {candidate.finish_reason}, "
                          f"safety ratings: {candidate.safety_ratings}")

        # response.text raises when the candidate has no parts (e.g. blocked by safety filters)
        try:
            text = response.text
        except ValueError as e:
            self.logger.error(f"Google candidate carried no text: {e}")
            return None

        return text

    def construct_prompt(self, prompt, role: str):
        return {
            "role": role,
            "parts": prompt if isinstance(prompt, list) else [prompt],
        }
