from ..LLMInterface import LLMInterface
from ..LLMEnums import OpenAIEnums
from ..multimodal_utils import MultimodalUtils
from openai import AsyncOpenAI
import logging
from typing import Optional

class OpenAIProvider(LLMInterface):

    def __init__(self, api_key: str, api_url: str=None,
                       default_input_max_characters: int=1000,
                       default_generation_max_output_tokens: int=1000,
                       default_generation_temperature: float=0.1):

        self.api_key = api_key
        self.api_url = api_url

        self.default_input_max_characters = default_input_max_characters
        self.default_generation_max_output_tokens = default_generation_max_output_tokens
        self.default_generation_temperature = default_generation_temperature

        self.generation_model_id = None

        self.client = AsyncOpenAI(
            api_key = self.api_key,
            base_url = self.api_url if self.api_url and len(self.api_url) else None
        )

        self.enums = OpenAIEnums
        self.logger = logging.getLogger(__name__)

    def set_generation_model(self, model_id: str):
        self.generation_model_id = model_id

    def process_text(self, text: str):
        return text[:self.default_input_max_characters].strip()

    async def generate_text(self, prompt: str, image_data_uri: Optional[str] = None,
                            max_output_tokens: int = None, temperature: float = None) -> Optional[str]:

        if not self.client:
            self.logger.error("OpenAI client was not set")
            return None

        if not self.generation_model_id:
            self.logger.error("Generation model for OpenAI was not set")
            return None

        max_output_tokens = max_output_tokens if max_output_tokens is not None else self.default_generation_max_output_tokens
        temperature = temperature if temperature is not None else self.default_generation_temperature

        content = MultimodalUtils.prepare_llm_input(prompt, image_data_uri) if image_data_uri else prompt

        response = await self.client.chat.completions.create(
            model = self.generation_model_id,
            messages = [self.construct_prompt(prompt=content, role=OpenAIEnums.USER.value)],
            max_tokens = max_output_tokens,
            temperature = temperature
        )

        if not response or not response.choices or len(response.choices) == 0 or not response.choices[0].message:
            self.logger.error("Error while generating text with OpenAI")
            return None

        return response.choices[0].message.content

    def construct_prompt(self, prompt, role: str):
        return {
            "role": role,
            "content": prompt,
        }
