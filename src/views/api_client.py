import requests
from typing import List, Optional, Tuple
from helpers.geolocation import LocationResult
from models.db_schemes import MapMarker
from stores.flows.scheme import (
    AIResponse, RefinedAdvice, SpecialtySuggestion, ClarificationResult,
)

class HealthAssistAPIError(Exception):
    """Non-success answer from the backend, or no answer at all."""

    def __init__(self, message: str, signal: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.signal = signal
        self.status_code = status_code


class HealthAssistClient:
    """Thin HTTP client for the FastAPI backend, returning the backend's own models."""

    def __init__(self, base_url: str, timeout: float = 60):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api/v1/{path.lstrip('/')}"

    @staticmethod
    def _handle_response(response: requests.Response) -> dict:
        try:
            data = response.json()
        except ValueError:
            data = {}

        if response.status_code != 200:
            raise HealthAssistAPIError(
                data.get("error") or f"Unexpected status code {response.status_code} from the HealthAssist API.",
                signal=data.get("signal"),
                status_code=response.status_code,
            )
        return data

    def _post(self, path: str, payload: dict) -> dict:
        try:
            response = requests.post(self._url(path), json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise HealthAssistAPIError(f"Could not reach the HealthAssist API: {e}") from e
        return self._handle_response(response)

    def _get(self, path: str, params: dict) -> dict:
        params = {k: v for k, v in params.items() if v is not None}
        try:
            response = requests.get(self._url(path), params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise HealthAssistAPIError(f"Could not reach the HealthAssist API: {e}") from e
        return self._handle_response(response)

    def analyze(self, symptoms: str, image_data_uri: Optional[str] = None) -> AIResponse:
        data = self._post("symptoms/analyze", {"symptoms": symptoms, "imageDataUri": image_data_uri})
        return AIResponse.model_validate(data)

    def refine(self, original_symptoms: str, selected_condition: str) -> RefinedAdvice:
        data = self._post("symptoms/refine", {
            "originalSymptoms": original_symptoms,
            "selectedCondition": selected_condition,
        })
        return RefinedAdvice.model_validate(data)

    def clarify(self, original_symptoms: str, user_question: str, ai_response: AIResponse,
                image_data_uri: Optional[str] = None) -> ClarificationResult:
        data = self._post("symptoms/clarify", {
            "originalSymptoms": original_symptoms,
            "imageDataUri": image_data_uri,
            "currentSeverityAssessment": ai_response.severity_assessment.to_payload(),
            "currentPotentialConditions": [c.to_payload() for c in ai_response.potential_conditions],
            "userQuestion": user_question,
        })
        return ClarificationResult.model_validate(data)

    def suggest_specialty(self, symptoms: str) -> SpecialtySuggestion:
        data = self._post("symptoms/specialty", {"symptoms": symptoms})
        return SpecialtySuggestion.model_validate(data)

    def _facilities(self, path: str, params: dict) -> Tuple[LocationResult, List[MapMarker]]:
        data = self._get(path, params)
        markers = [MapMarker.model_validate(m) for m in data.get("markers", [])]
        return LocationResult.model_validate(data), markers

    def nearby_doctors(self, lat: Optional[float] = None, lng: Optional[float] = None,
                       specialty: Optional[str] = None) -> Tuple[LocationResult, List[MapMarker]]:
        return self._facilities("facilities/doctors", {"lat": lat, "lng": lng, "specialty": specialty})

    def nearby_hospitals(self, lat: Optional[float] = None,
                         lng: Optional[float] = None) -> Tuple[LocationResult, List[MapMarker]]:
        return self._facilities("facilities/hospitals", {"lat": lat, "lng": lng})
