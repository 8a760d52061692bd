import json
import unittest

from stores.flows.symptomFlows import SymptomFlows
from stores.flows.errors import InputValidationError, MalformedResponseError
from stores.flows.scheme import (
    AIResponse, SeverityAssessment, ConditionSuggestion, ClarificationResult,
)
from stores.flows.updates import Unchanged, Replaced, update_from_optional
from tests.fakes import FakeGenerationClient, make_template_parser, CLARIFY_MARKER, SEVERITY_PAYLOAD


def held_response() -> AIResponse:
    return AIResponse(
        severity_assessment=SeverityAssessment.model_validate(SEVERITY_PAYLOAD),
        potential_conditions=[
            ConditionSuggestion(condition="Common Cold", explanation="Viral.", distinguishing_symptoms=["Sneezing"]),
        ],
    )


def clarification_input(response: AIResponse, **overrides) -> dict:
    data = {
        "original_symptoms": "fever and sore throat",
        "current_severity_assessment": response.severity_assessment,
        "current_potential_conditions": response.potential_conditions,
        "user_question": "Should I be worried?",
    }
    data.update(overrides)
    return data


class TestUpdateSumType(unittest.TestCase):

    def test_unchanged_returns_the_held_value(self):
        held = ["a"]
        self.assertIs(Unchanged().apply(held), held)
        self.assertFalse(Unchanged().is_replaced)

    def test_replaced_returns_the_new_value(self):
        self.assertEqual(Replaced(["b"]).apply(["a"]), ["b"])
        self.assertTrue(Replaced([]).is_replaced)

    def test_from_optional(self):
        self.assertEqual(update_from_optional(None), Unchanged())
        self.assertEqual(update_from_optional([]), Replaced([]))


class TestClarificationResult(unittest.TestCase):

    def test_absent_fields_leave_held_state_identical(self):
        held = held_response()
        before = held.model_dump_json()
        result = ClarificationResult.model_validate({"clarificationText": "It is likely viral."})

        merged = result.apply_to(held)

        self.assertIsInstance(result.severity_update, Unchanged)
        self.assertIsInstance(result.conditions_update, Unchanged)
        self.assertIs(merged, held)
        self.assertEqual(held.model_dump_json(), before)

    def test_explicit_null_counts_as_unchanged(self):
        result = ClarificationResult.model_validate({
            "clarificationText": "No change.",
            "updatedSeverityAssessment": None,
            "updatedPotentialConditions": None,
        })

        self.assertFalse(result.has_updates)

    def test_empty_condition_list_replaces(self):
        held = held_response()
        result = ClarificationResult.model_validate({
            "clarificationText": "None of these look likely now.",
            "updatedPotentialConditions": [],
        })

        merged = result.apply_to(held)

        self.assertEqual(result.conditions_update, Replaced([]))
        self.assertEqual(merged.potential_conditions, [])
        self.assertEqual(merged.severity_assessment, held.severity_assessment)
        self.assertEqual(len(held.potential_conditions), 1)

    def test_updated_severity_replaces_only_severity(self):
        held = held_response()
        result = ClarificationResult.model_validate({
            "clarificationText": "That sounds more serious.",
            "updatedSeverityAssessment": {
                "severityAssessment": "Potentially serious.",
                "nextStepsRecommendation": "Seek urgent care.",
            },
        })

        merged = result.apply_to(held)

        self.assertEqual(merged.severity_assessment.next_steps_recommendation, "Seek urgent care.")
        self.assertEqual(merged.potential_conditions, held.potential_conditions)


class TestClarifyFlow(unittest.IsolatedAsyncioTestCase):

    def make_flows(self, response=None):
        responses = {CLARIFY_MARKER: response} if response is not None else None
        client = FakeGenerationClient(responses)
        return client, SymptomFlows(generation_client=client, template_parser=make_template_parser())

    async def test_non_list_conditions_fail_the_call(self):
        bad = json.dumps({"clarificationText": "ok", "updatedPotentialConditions": "Measles"})
        _, flows = self.make_flows(bad)

        with self.assertRaises(MalformedResponseError) as ctx:
            await flows.clarify_symptoms(clarification_input(held_response()))

        self.assertTrue(str(ctx.exception).startswith("Error in clarifying symptoms: "))

    async def test_partial_updated_severity_fails_the_call(self):
        bad = json.dumps({"clarificationText": "ok", "updatedSeverityAssessment": {"severityAssessment": "x"}})
        _, flows = self.make_flows(bad)

        with self.assertRaises(MalformedResponseError):
            await flows.clarify_symptoms(clarification_input(held_response()))

    async def test_prompt_carries_prior_context(self):
        client, flows = self.make_flows()

        await flows.clarify_symptoms(clarification_input(
            held_response(), image_data_uri="data:image/png;base64,iVBORw0KGgo=",
        ))

        prompt = client.calls[0]["prompt"]
        self.assertIn("An image was provided with these symptoms.", prompt)
        self.assertIn("- How high is your fever?", prompt)
        self.assertIn("- Condition: Common Cold", prompt)
        self.assertIn("Distinguishing Symptoms: Sneezing", prompt)
        self.assertIn('"Should I be worried?"', prompt)
        self.assertIsNone(client.calls[0]["image_data_uri"])

    async def test_prompt_without_conditions_or_image(self):
        client, flows = self.make_flows()
        held = held_response().model_copy(update={"potential_conditions": []})

        await flows.clarify_symptoms(clarification_input(held))

        prompt = client.calls[0]["prompt"]
        self.assertIn("No image was provided with the initial symptoms.", prompt)
        self.assertIn("You did not list any specific potential conditions previously.", prompt)

    async def test_empty_question_rejected(self):
        client, flows = self.make_flows()

        with self.assertRaises(InputValidationError):
            await flows.clarify_symptoms(clarification_input(held_response(), user_question=""))

        self.assertEqual(client.calls, [])


if __name__ == "__main__":
    unittest.main()
