from fastapi import APIRouter, status, Request
from fastapi.responses import JSONResponse
from routes.schemes.symptoms import AnalyzeRequest, RefineRequest, ClarifyRequest, SpecialtyRequest
from services import SymptomService
from stores.flows.errors import InputValidationError, FlowError
from models import ResponseSignal

import logging

logger = logging.getLogger('uvicorn.error')

symptoms_router = APIRouter(
    prefix="/api/v1/symptoms",
    tags=["api_v1", "symptoms"],
)

def get_symptom_service(request: Request) -> SymptomService:
    return SymptomService(
        generation_client=request.app.generation_client,
        template_parser=request.app.template_parser,
    )

def error_response(status_code: int, signal: ResponseSignal, error: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "signal": signal.value,
            "error": error,
        }
    )

@symptoms_router.post("/analyze", summary="Assess symptoms", description="Runs the severity assessment and potential conditions flows concurrently on the reported symptoms (and optional image data URI). Returns both results, or an error if either flow fails.")
async def analyze_symptoms(request: Request, analyze_request: AnalyzeRequest):

    symptom_service = get_symptom_service(request)

    try:
        ai_response = await symptom_service.get_ai_response(
            symptoms=analyze_request.symptoms,
            image_data_uri=analyze_request.image_data_uri,
        )
    except InputValidationError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, ResponseSignal.SYMPTOMS_VALIDATION_ERROR, str(e))
    except FlowError as e:
        return error_response(status.HTTP_502_BAD_GATEWAY, ResponseSignal.AI_ANALYSIS_ERROR,
                              f"Failed to get AI insights: {e}")

    return JSONResponse(
        content={
            "signal": ResponseSignal.AI_ANALYSIS_SUCCESS.value,
            **ai_response.to_payload(),
        }
    )

@symptoms_router.post("/refine", summary="Refine advice for one condition", description="Gives more specific advice for a condition the user picked from the suggestions.")
async def refine_diagnosis(request: Request, refine_request: RefineRequest):

    symptom_service = get_symptom_service(request)

    try:
        refined_advice = await symptom_service.refine_diagnosis(
            original_symptoms=refine_request.original_symptoms,
            selected_condition=refine_request.selected_condition,
        )
    except InputValidationError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, ResponseSignal.SYMPTOMS_VALIDATION_ERROR, str(e))
    except FlowError as e:
        return error_response(status.HTTP_502_BAD_GATEWAY, ResponseSignal.REFINE_DIAGNOSIS_ERROR,
                              f"Failed to get refined AI insights: {e}")

    return JSONResponse(
        content={
            "signal": ResponseSignal.REFINE_DIAGNOSIS_SUCCESS.value,
            **refined_advice.to_payload(),
        }
    )

@symptoms_router.post("/clarify", summary="Answer a follow-up question", description="Answers a follow-up question about a previous assessment. The response may carry an updated severity assessment and/or an updated list of potential conditions; absent fields mean the previous ones still hold.")
async def clarify_symptoms(request: Request, clarify_request: ClarifyRequest):

    symptom_service = get_symptom_service(request)

    try:
        clarification = await symptom_service.clarify_symptoms(
            original_symptoms=clarify_request.original_symptoms,
            user_question=clarify_request.user_question,
            current_severity_assessment=clarify_request.current_severity_assessment,
            current_potential_conditions=clarify_request.current_potential_conditions,
            image_data_uri=clarify_request.image_data_uri,
        )
    except InputValidationError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, ResponseSignal.SYMPTOMS_VALIDATION_ERROR, str(e))
    except FlowError as e:
        return error_response(status.HTTP_502_BAD_GATEWAY, ResponseSignal.CLARIFY_SYMPTOMS_ERROR,
                              f"Failed to get clarification: {e}")

    return JSONResponse(
        content={
            "signal": ResponseSignal.CLARIFY_SYMPTOMS_SUCCESS.value,
            **clarification.to_payload(),
        }
    )

@symptoms_router.post("/specialty", summary="Suggest a doctor specialty", description="Suggests the most appropriate type of medical specialist for the reported symptoms.")
async def suggest_doctor_specialty(request: Request, specialty_request: SpecialtyRequest):

    symptom_service = get_symptom_service(request)

    try:
        suggestion = await symptom_service.suggest_doctor_specialty(symptoms=specialty_request.symptoms)
    except InputValidationError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, ResponseSignal.SYMPTOMS_VALIDATION_ERROR, str(e))
    except FlowError as e:
        return error_response(status.HTTP_502_BAD_GATEWAY, ResponseSignal.SPECIALTY_SUGGESTION_ERROR,
                              f"Failed to suggest a doctor specialty: {e}")

    return JSONResponse(
        content={
            "signal": ResponseSignal.SPECIALTY_SUGGESTION_SUCCESS.value,
            **suggestion.to_payload(),
        }
    )
