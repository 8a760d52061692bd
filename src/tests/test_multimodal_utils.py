import io
import unittest

from PIL import Image

from stores.llm.multimodal_utils import MultimodalUtils
from views.image_upload import uploaded_image_to_data_uri


class TestMultimodalUtils(unittest.TestCase):

    def test_parse_data_uri(self):
        uri = MultimodalUtils.to_data_uri(b"\x89PNG", mime_type="image/png")

        mime, data = MultimodalUtils.parse_data_uri(uri)

        self.assertEqual(mime, "image/png")
        self.assertEqual(data, b"\x89PNG")

    def test_rejects_plain_urls(self):
        self.assertFalse(MultimodalUtils.is_data_uri("https://example.com/a.png"))
        self.assertFalse(MultimodalUtils.is_data_uri(None))
        with self.assertRaises(ValueError):
            MultimodalUtils.parse_data_uri("https://example.com/a.png")

    def test_rejects_bad_base64(self):
        with self.assertRaises(ValueError):
            MultimodalUtils.parse_data_uri("data:image/png;base64,@@@")

    def test_prepare_llm_input_orders_text_then_image(self):
        uri = "data:image/png;base64,iVBORw0KGgo="

        parts = MultimodalUtils.prepare_llm_input("describe this", uri)

        self.assertEqual(parts[0], {"type": "text", "text": "describe this"})
        self.assertEqual(parts[1]["image_url"]["url"], uri)
        self.assertIsNone(MultimodalUtils.prepare_llm_input("", None))


class TestUploadedImage(unittest.TestCase):

    def test_large_png_becomes_small_jpeg(self):
        buffer = io.BytesIO()
        Image.new("RGBA", (2000, 1000), (255, 0, 0, 128)).save(buffer, format="PNG")

        uri = uploaded_image_to_data_uri(buffer.getvalue(), max_side=500)

        mime, data = MultimodalUtils.parse_data_uri(uri)
        self.assertEqual(mime, "image/jpeg")
        self.assertEqual(Image.open(io.BytesIO(data)).size, (500, 250))

    def test_unreadable_bytes(self):
        with self.assertRaises(ValueError):
            uploaded_image_to_data_uri(b"not an image")


if __name__ == "__main__":
    unittest.main()
