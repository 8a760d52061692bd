from abc import ABC, abstractmethod
from typing import Optional

class LLMInterface(ABC):

    @abstractmethod
    def set_generation_model(self, model_id: str):
        pass

    @abstractmethod
    def process_text(self, text: str):
        pass

    @abstractmethod
    async def generate_text(self, prompt: str, image_data_uri: Optional[str] = None,
                            max_output_tokens: int = None, temperature: float = None) -> Optional[str]:
        """
        Send one prompt (and optionally one image) to the model.
        Returns the raw response text, or None when the model produced nothing.
        Transport errors from the SDK propagate to the caller.
        """
        pass

    @abstractmethod
    def construct_prompt(self, prompt, role: str):
        pass
