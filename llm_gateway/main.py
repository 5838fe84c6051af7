from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from llm_gateway.core.config import get_settings
from llm_gateway.core.providers import MODEL_MAPS, PROVIDER_DEFAULT_MODELS
from llm_gateway.core.security import key_status
from llm_gateway.llms.errors import InvalidRequestError, LLMError, is_rate_limited
from llm_gateway.schemas.request import validate_request
from llm_gateway.schemas.response import GenerateResponse
from llm_gateway.services.llm_service import generate
from llm_gateway.utils.logger import logger

RATE_LIMIT_MESSAGE = "Rate limit reached. Please wait and try again."
GENERIC_FAILURE_MESSAGE = "LLM generation failed"

app = FastAPI(title="LLM Gateway")


def _envelope(response: GenerateResponse, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=response.model_dump(exclude_none=True), status_code=status_code)


def _log_failure(exc: Exception) -> None:
    # Never let logging stand between the caller and the error response.
    try:
        logger.error(
            "llm_generation_error",
            exc_info=exc,
            extra={"error_type": type(exc).__name__, "error": str(exc)},
        )
    except Exception:
        pass


def error_response(exc: Exception) -> JSONResponse:
    if isinstance(exc, InvalidRequestError):
        return _envelope(GenerateResponse.fail(exc.message), exc.status_code)
    if is_rate_limited(exc):
        return _envelope(GenerateResponse.fail(RATE_LIMIT_MESSAGE), 429)
    status_code = exc.status_code if isinstance(exc, LLMError) else 500
    return _envelope(GenerateResponse.fail(str(exc) or GENERIC_FAILURE_MESSAGE), status_code)


@app.get("/")
async def root():
    return {"message": "LLM Gateway", "docs": "/docs", "health": "/health", "generate": "POST /api/llm"}


@app.get("/health")
async def get_health():
    s = get_settings()
    return {
        "status": "ok",
        "providers": {
            "google": key_status(s.gemini_api_key),
            "openai": key_status(s.openai_api_key),
        },
    }


@app.get("/models")
async def get_models() -> dict:
    return {
        provider: {"models": list(models), "default": PROVIDER_DEFAULT_MODELS[provider]}
        for provider, models in MODEL_MAPS.items()
    }


@app.post("/api/llm")
async def post_llm(request: Request) -> JSONResponse:
    try:
        try:
            body = await request.json()
        except ValueError:
            raise InvalidRequestError("Invalid JSON body") from None
        gen_request = validate_request(body)
        text = await generate(gen_request)
        return _envelope(GenerateResponse.ok(text))
    except Exception as e:
        _log_failure(e)
        return error_response(e)
