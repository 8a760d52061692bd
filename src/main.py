from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from routes import base, symptoms, facilities
from routes.symptoms import error_response
from models import ResponseSignal
from helpers.config import get_settings
from stores.llm.LLMProviderFactory import LLMProviderFactory
from stores.llm.templates.template_parser import TemplateParser
import logging

logger = logging.getLogger("uvicorn")

app = FastAPI(title="HealthAssist AI")

async def startup_span():
    try:
        settings = get_settings()
        logger.info("Starting application with settings loaded")

        if settings.GENERATION_BACKEND not in settings.GENERATION_BACKEND_LITERAL:
            raise ValueError(f"GENERATION_BACKEND must be one of {settings.GENERATION_BACKEND_LITERAL}, "
                             f"got '{settings.GENERATION_BACKEND}'")

        # One generation client shared by every request; flows are built per request around it
        logger.info(f"Initializing LLM provider: {settings.GENERATION_BACKEND}")
        llm_provider_factory = LLMProviderFactory(settings)
        app.generation_client = llm_provider_factory.create(provider=settings.GENERATION_BACKEND)
        if not app.generation_client:
            raise ValueError(f"Failed to create LLM provider: {settings.GENERATION_BACKEND}")
        app.generation_client.set_generation_model(model_id=settings.GENERATION_MODEL_ID)
        logger.info(f"LLM provider initialized with model: {settings.GENERATION_MODEL_ID}")

        # Initialize template parser
        logger.info("Initializing template parser")
        app.template_parser = TemplateParser(
            language=settings.PRIMARY_LANG,
            default_language=settings.DEFAULT_LANG,
        )
        logger.info("Template parser initialized")

        logger.info("Application startup completed successfully")

    except Exception as e:
        logger.error(f"Error during application startup: {str(e)}")
        raise

async def shutdown_span():
    logger.info("Starting application shutdown")
    if hasattr(app, 'generation_client'):
        app.generation_client = None
        logger.info("LLM provider released")
    logger.info("Application shutdown completed")

app.on_event("startup")(startup_span)
app.on_event("shutdown")(shutdown_span)

app.include_router(base.base_router)
app.include_router(symptoms.symptoms_router)
app.include_router(facilities.facilities_router)

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # missing or mistyped body fields share the 400 + signal shape of service-level validation
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    logger.warning(f"Rejected request to {request.url.path}: {exc.errors()}")
    signal = (ResponseSignal.SYMPTOMS_VALIDATION_ERROR
              if request.url.path.startswith(symptoms.symptoms_router.prefix)
              else ResponseSignal.REQUEST_VALIDATION_ERROR)
    return error_response(status.HTTP_400_BAD_REQUEST, signal,
                          f"{location}: {message}" if location else message)
