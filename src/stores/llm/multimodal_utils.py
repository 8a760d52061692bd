import base64
import binascii
import logging
import re
from typing import Optional, List, Dict, Any, Tuple

logger = logging.getLogger("uvicorn")

_DATA_URI_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<data>.+)$", re.DOTALL)

class MultimodalUtils:
    """Utility class for handling image data URIs and multimodal input preparation."""

    @staticmethod
    def is_data_uri(value: Optional[str]) -> bool:
        return bool(value) and _DATA_URI_RE.match(value) is not None

    @staticmethod
    def parse_data_uri(data_uri: str) -> Tuple[str, bytes]:
        """
        Split a 'data:<mimetype>;base64,<encoded_data>' URI.

        Returns:
            Tuple[str, bytes]: mime type and decoded image bytes

        Raises:
            ValueError: if the URI is not a base64 data URI
        """
        match = _DATA_URI_RE.match(data_uri or "")
        if not match:
            raise ValueError("Image must be a data URI of the form 'data:<mimetype>;base64,<encoded_data>'.")
        try:
            image_bytes = base64.b64decode(match.group("data"), validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError(f"Image data URI is not valid base64: {e}") from e
        return match.group("mime"), image_bytes

    @staticmethod
    def to_data_uri(image_bytes: bytes, mime_type: str = "image/jpeg") -> str:
        encoded_image = base64.b64encode(image_bytes).decode("utf-8")
        return f"data:{mime_type};base64,{encoded_image}"

    @staticmethod
    def prepare_llm_input(
        text_input: str,
        image_data_uri: Optional[str] = None,
    ) -> Optional[List[Dict[str, Any]]]:
        """
        Prepare OpenAI-style content parts (text first, then the image).

        Args:
            text_input (str): The text input to include
            image_data_uri (Optional[str]): Optional image as a data URI

        Returns:
            Optional[List[Dict[str, Any]]]: List of content parts for LLM input
        """
        content_list = []

        if text_input:
            content_list.append({"type": "text", "text": text_input})

        if image_data_uri:
            content_list.append({
                "type": "image_url",
                "image_url": {"url": image_data_uri},
            })
            logger.info("🖼️ Added image to input")

        if not content_list:
            logger.warning("⚠️ No content to send to LLM")
            return None

        return content_list
