import unittest

from stores.llm.templates.template_parser import TemplateParser


class TestTemplateParser(unittest.TestCase):

    def test_substitutes_variables(self):
        parser = TemplateParser(language="en")

        prompt = parser.get("doctor_specialty", "doctor_specialty_prompt", {"symptoms": "sharp chest pain"})

        self.assertIn('Based on the following symptoms: "sharp chest pain"', prompt)
        self.assertNotIn("$symptoms", prompt)

    def test_dollar_signs_in_user_text_are_kept(self):
        parser = TemplateParser(language="en")

        prompt = parser.get("doctor_specialty", "doctor_specialty_prompt", {"symptoms": "spent $200 on meds"})

        self.assertIn("spent $200 on meds", prompt)

    def test_unknown_language_falls_back_to_default(self):
        parser = TemplateParser(language="xx", default_language="en")

        self.assertEqual(parser.language, "en")
        self.assertIsNotNone(parser.get("clarification", "no_image_note"))

    def test_missing_group_or_key_returns_none(self):
        parser = TemplateParser()

        self.assertIsNone(parser.get("no_such_group", "prompt"))
        self.assertIsNone(parser.get("clarification", "no_such_key"))
        self.assertIsNone(parser.get("", "no_image_note"))


if __name__ == "__main__":
    unittest.main()
