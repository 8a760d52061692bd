import json
import logging
from typing import Any, Callable, Generic, Optional, Type, TypeVar
from pydantic import BaseModel, TypeAdapter, ValidationError
from langchain_core.utils.json import parse_json_markdown
from stores.llm.LLMInterface import LLMInterface
from .errors import InputValidationError, EmptyResponseError, MalformedResponseError, TransportError

logger = logging.getLogger("uvicorn")

InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT")

class PromptFlow(Generic[InputT, OutputT]):
    """
    One schema-validated call to the generation provider.

    The flow renders its prompt from a validated input, sends it (with the
    input's image when `accepts_image` is set) in a single call, and
    validates the JSON it gets back against `output_type`. There is no retry:
    every failure surfaces as a `FlowError` subclass labelled with `label`.
    """

    def __init__(self, name: str, label: str,
                 generation_client: LLMInterface,
                 render_prompt: Callable[[InputT], str],
                 input_model: Type[InputT],
                 output_type: Any,
                 accepts_image: bool = False,
                 postprocess: Optional[Callable[[OutputT], OutputT]] = None):
        self.name = name
        self.label = label
        self.generation_client = generation_client
        self.render_prompt = render_prompt
        self.input_model = input_model
        self.output_adapter = TypeAdapter(output_type)
        self.accepts_image = accepts_image
        self.postprocess = postprocess

    def validate_input(self, flow_input) -> InputT:
        if isinstance(flow_input, self.input_model):
            return flow_input
        try:
            return self.input_model.model_validate(flow_input)
        except ValidationError as e:
            raise InputValidationError(_first_error_message(e)) from e

    def parse_output(self, raw_text: str) -> OutputT:
        try:
            payload = parse_json_markdown(raw_text, parser=json.loads)
        except json.JSONDecodeError as e:
            logger.error(f"[{self.name}] Response is not valid JSON: {raw_text!r}")
            raise MalformedResponseError(
                self.name, self.label, f"The model response is not valid JSON ({e.msg})."
            ) from e

        try:
            return self.output_adapter.validate_python(payload)
        except ValidationError as e:
            logger.error(f"[{self.name}] AI output is missing required fields or has incorrect types. Output: {payload}")
            raise MalformedResponseError(
                self.name, self.label,
                f"The model response did not conform to the expected output structure ({_first_error_message(e)}).",
            ) from e

    async def __call__(self, flow_input) -> OutputT:
        flow_input = self.validate_input(flow_input)
        image_data_uri = getattr(flow_input, "image_data_uri", None) if self.accepts_image else None

        logger.info(f"[{self.name}] Starting with input: "
                    f"{flow_input.model_dump(exclude={'image_data_uri'})} (image: {bool(image_data_uri)})")

        prompt = self.render_prompt(flow_input)

        try:
            raw_text = await self.generation_client.generate_text(prompt=prompt, image_data_uri=image_data_uri)
        except Exception as e:
            logger.error(f"[{self.name}] Error during flow execution: {e}")
            raise TransportError(self.name, self.label, str(e) or e.__class__.__name__) from e

        logger.debug(f"[{self.name}] Raw response text: {raw_text!r}")

        if raw_text is None or not raw_text.strip():
            logger.error(f"[{self.name}] AI failed to generate output. Input was: {flow_input.model_dump(exclude={'image_data_uri'})}")
            raise EmptyResponseError(self.name, self.label, "The model response was empty.")

        output = self.parse_output(raw_text)
        if self.postprocess:
            output = self.postprocess(output)

        logger.info(f"[{self.name}] ✅ Successfully generated structured output")
        logger.debug(f"[{self.name}] Validated output: {output!r}")
        return output


def _first_error_message(error: ValidationError) -> str:
    first = error.errors()[0]
    message = first.get("msg", "invalid value")
    # messages raised by our own validators are already user-facing
    if first.get("type") == "value_error":
        return message.replace("Value error, ", "", 1)
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {message}" if location else message
