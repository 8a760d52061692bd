import json
import unittest

from stores.flows.symptomFlows import SymptomFlows
from stores.flows.errors import (
    InputValidationError, FlowError, FlowErrorKind,
    EmptyResponseError, MalformedResponseError, TransportError,
)
from stores.flows.scheme import SeverityAssessment, SymptomReport, MAX_POTENTIAL_CONDITIONS
from tests.fakes import (
    FakeGenerationClient, make_template_parser,
    SEVERITY_MARKER, CONDITIONS_MARKER, SPECIALTY_MARKER, REFINE_MARKER,
    SEVERITY_PAYLOAD, CONDITIONS_PAYLOAD,
)

IMAGE_URI = "data:image/png;base64,iVBORw0KGgo="


def make_flows(responses=None):
    client = FakeGenerationClient(responses)
    return client, SymptomFlows(generation_client=client, template_parser=make_template_parser())


class TestSeverityFlow(unittest.IsolatedAsyncioTestCase):

    async def test_valid_json_is_returned_as_model(self):
        client, flows = make_flows()

        result = await flows.assess_symptom_severity({"symptoms": "headache and fever"})

        self.assertIsInstance(result, SeverityAssessment)
        self.assertEqual(result.severity_assessment, SEVERITY_PAYLOAD["severityAssessment"])
        self.assertEqual(result.questions_to_consider, SEVERITY_PAYLOAD["questionsToConsider"])
        self.assertEqual(len(client.calls), 1)
        self.assertIn("headache and fever", client.calls[0]["prompt"])

    async def test_fenced_json_block_is_accepted(self):
        fenced = "```json\n" + json.dumps(SEVERITY_PAYLOAD) + "\n```"
        _, flows = make_flows({SEVERITY_MARKER: fenced})

        result = await flows.assess_symptom_severity({"symptoms": "headache"})

        self.assertEqual(result.next_steps_recommendation, SEVERITY_PAYLOAD["nextStepsRecommendation"])

    async def test_image_reaches_provider_and_prompt_mentions_it(self):
        client, flows = make_flows()

        await flows.assess_symptom_severity(SymptomReport(symptoms="red rash", image_data_uri=IMAGE_URI))

        self.assertEqual(client.calls[0]["image_data_uri"], IMAGE_URI)
        self.assertIn("Visual Information Provided", client.calls[0]["prompt"])

    async def test_no_image_section_without_image(self):
        client, flows = make_flows()

        await flows.assess_symptom_severity({"symptoms": "red rash"})

        self.assertIsNone(client.calls[0]["image_data_uri"])
        self.assertNotIn("Visual Information Provided", client.calls[0]["prompt"])

    async def test_none_output_is_empty_response(self):
        _, flows = make_flows({SEVERITY_MARKER: None})

        with self.assertRaises(EmptyResponseError) as ctx:
            await flows.assess_symptom_severity({"symptoms": "headache"})

        self.assertEqual(ctx.exception.kind, FlowErrorKind.EMPTY_RESPONSE)
        self.assertEqual(ctx.exception.flow_name, "assessSymptomSeverityFlow")
        self.assertTrue(str(ctx.exception).startswith("Error in assessing symptom severity: "))

    async def test_blank_output_is_empty_response(self):
        _, flows = make_flows({SEVERITY_MARKER: "   \n"})

        with self.assertRaises(EmptyResponseError):
            await flows.assess_symptom_severity({"symptoms": "headache"})

    async def test_non_json_output_is_malformed(self):
        _, flows = make_flows({SEVERITY_MARKER: "I think you should rest."})

        with self.assertRaises(MalformedResponseError) as ctx:
            await flows.assess_symptom_severity({"symptoms": "headache"})

        self.assertEqual(ctx.exception.kind, FlowErrorKind.MALFORMED_RESPONSE)

    async def test_missing_required_field_is_malformed(self):
        partial = json.dumps({"severityAssessment": "Could be mild."})
        _, flows = make_flows({SEVERITY_MARKER: partial})

        with self.assertRaises(MalformedResponseError) as ctx:
            await flows.assess_symptom_severity({"symptoms": "headache"})

        self.assertIn("nextStepsRecommendation", str(ctx.exception))

    async def test_wrong_type_for_optional_field_is_malformed(self):
        payload = dict(SEVERITY_PAYLOAD, questionsToConsider="How high is your fever?")
        _, flows = make_flows({SEVERITY_MARKER: json.dumps(payload)})

        with self.assertRaises(MalformedResponseError):
            await flows.assess_symptom_severity({"symptoms": "headache"})

    async def test_provider_exception_becomes_transport_error(self):
        cause = RuntimeError("quota exceeded")
        _, flows = make_flows({SEVERITY_MARKER: cause})

        with self.assertRaises(TransportError) as ctx:
            await flows.assess_symptom_severity({"symptoms": "headache"})

        self.assertIn("quota exceeded", str(ctx.exception))
        self.assertIs(ctx.exception.__cause__, cause)
        self.assertIsInstance(ctx.exception, FlowError)

    async def test_empty_symptoms_rejected_before_provider_call(self):
        client, flows = make_flows()

        with self.assertRaises(InputValidationError) as ctx:
            await flows.assess_symptom_severity({"symptoms": "   "})

        self.assertEqual(str(ctx.exception), "Symptoms cannot be empty.")
        self.assertEqual(client.calls, [])

    async def test_non_data_uri_image_rejected(self):
        client, flows = make_flows()

        with self.assertRaises(InputValidationError):
            await flows.assess_symptom_severity({"symptoms": "rash", "imageDataUri": "http://example.com/rash.png"})

        self.assertEqual(client.calls, [])

    async def test_image_with_invalid_base64_rejected(self):
        client, flows = make_flows()

        with self.assertRaises(InputValidationError) as ctx:
            await flows.assess_symptom_severity(
                {"symptoms": "rash", "imageDataUri": "data:image/png;base64,@@not-base64@@"}
            )

        self.assertIn("not valid base64", str(ctx.exception))
        self.assertEqual(client.calls, [])


class TestPotentialConditionsFlow(unittest.IsolatedAsyncioTestCase):

    async def test_conditions_are_parsed_with_default_distinguishing_symptoms(self):
        _, flows = make_flows()

        conditions = await flows.suggest_potential_conditions({"symptoms": "sore throat"})

        self.assertEqual([c.condition for c in conditions], ["Common Cold", "Influenza", "Strep Throat"])
        self.assertEqual(conditions[2].distinguishing_symptoms, [])

    async def test_long_list_is_cut_to_maximum(self):
        extra = CONDITIONS_PAYLOAD + [{"condition": "Tonsillitis", "explanation": "Inflamed tonsils."}]
        _, flows = make_flows({CONDITIONS_MARKER: json.dumps(extra)})

        conditions = await flows.suggest_potential_conditions({"symptoms": "sore throat"})

        self.assertEqual(len(conditions), MAX_POTENTIAL_CONDITIONS)

    async def test_object_instead_of_array_is_malformed(self):
        _, flows = make_flows({CONDITIONS_MARKER: json.dumps(CONDITIONS_PAYLOAD[0])})

        with self.assertRaises(MalformedResponseError) as ctx:
            await flows.suggest_potential_conditions({"symptoms": "sore throat"})

        self.assertTrue(str(ctx.exception).startswith("Error in suggesting potential conditions: "))

    async def test_prompt_states_the_cap(self):
        client, flows = make_flows()

        await flows.suggest_potential_conditions({"symptoms": "sore throat"})

        self.assertIn(f"top {MAX_POTENTIAL_CONDITIONS} most relevant", client.calls[0]["prompt"])


class TestTextOnlyFlows(unittest.IsolatedAsyncioTestCase):

    async def test_specialty_flow(self):
        client, flows = make_flows()

        suggestion = await flows.suggest_doctor_specialty({"symptoms": "fatigue"})

        self.assertEqual(suggestion.suggested_specialty, "General Practitioner")
        self.assertEqual(len(client.calls_with(SPECIALTY_MARKER)), 1)
        self.assertIsNone(client.calls[0]["image_data_uri"])

    async def test_refine_flow_interpolates_selection(self):
        client, flows = make_flows()

        advice = await flows.refine_diagnosis({
            "originalSymptoms": "fever and cough",
            "selectedCondition": "Influenza",
        })

        self.assertTrue(advice.refined_advice)
        prompt = client.calls_with(REFINE_MARKER)[0]["prompt"]
        self.assertIn('"Influenza" seems most relevant', prompt)

    async def test_refine_confidence_is_optional(self):
        _, flows = make_flows({REFINE_MARKER: json.dumps({"refinedAdvice": "See a GP."})})

        advice = await flows.refine_diagnosis({
            "original_symptoms": "fever",
            "selected_condition": "Influenza",
        })

        self.assertIsNone(advice.confidence)

    async def test_refine_rejects_empty_condition(self):
        client, flows = make_flows()

        with self.assertRaises(InputValidationError) as ctx:
            await flows.refine_diagnosis({"original_symptoms": "fever", "selected_condition": " "})

        self.assertEqual(str(ctx.exception), "Original symptoms and selected condition cannot be empty.")
        self.assertEqual(client.calls, [])

    async def test_specialty_error_label(self):
        _, flows = make_flows({SPECIALTY_MARKER: None})

        with self.assertRaises(EmptyResponseError) as ctx:
            await flows.suggest_doctor_specialty({"symptoms": "fatigue"})

        self.assertTrue(str(ctx.exception).startswith("Error in suggesting doctor specialty: "))


if __name__ == "__main__":
    unittest.main()
