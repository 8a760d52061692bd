from PIL import Image, UnidentifiedImageError
from stores.llm.multimodal_utils import MultimodalUtils
import io
import logging

logger = logging.getLogger(__name__)

MAX_IMAGE_SIDE = 1024
SUPPORTED_IMAGE_TYPES = ["png", "jpg", "jpeg", "webp"]

def uploaded_image_to_data_uri(image_bytes: bytes, max_side: int = MAX_IMAGE_SIDE) -> str:
    """
    Re-encode an uploaded image as a JPEG data URI, downscaled so its longest
    side is at most `max_side` pixels.

    Raises:
        ValueError: if the bytes are not a readable image
    """
    try:
        img = Image.open(io.BytesIO(image_bytes))
        img.load()
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Could not read the uploaded image: {e}") from e

    if img.mode != "RGB":
        img = img.convert("RGB")
    img.thumbnail((max_side, max_side))

    buffer = io.BytesIO()
    img.save(buffer, format="JPEG", quality=85)
    logger.info(f"Prepared uploaded image {img.size[0]}x{img.size[1]} ({buffer.tell()} bytes)")

    return MultimodalUtils.to_data_uri(buffer.getvalue(), mime_type="image/jpeg")
