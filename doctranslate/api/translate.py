# doctranslate/api/translate.py
import time
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..schemas.translate import TranslateRequest, TranslateResponse, ErrorResponse
from ..services.translation import TranslationProvider, get_translation_provider
from ..utils.logging import api_logger

router = APIRouter(prefix="/api", tags=["translate"])

MISSING_FIELDS = "Missing required fields"
TRANSLATION_FAILED = "Translation failed"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.post(
    "/translate",
    response_model=TranslateResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": TranslateRequest.model_json_schema()}}
        }
    }
)
async def translate(
        request: Request,
        provider: TranslationProvider = Depends(get_translation_provider)
):
    """Translate a piece of text with the configured provider.

    The body is read here rather than by FastAPI so that an unreadable body
    ends in the 500 error shape; a JSON value that is not an object carries
    no fields and ends in the 400.
    """
    try:
        body = await request.json()
        payload = TranslateRequest.model_validate(body if isinstance(body, dict) else {})
    except (ValueError, ValidationError) as e:
        api_logger.error("Unreadable translation request", extra={"error": str(e)}, exc_info=True)
        return error_response(500, TRANSLATION_FAILED)

    if not payload.is_complete():
        api_logger.warning("Translation request missing fields", extra={
            "has_text": bool(payload.text),
            "source_language": payload.sourceLanguage,
            "target_language": payload.targetLanguage
        })
        return error_response(400, MISSING_FIELDS)

    api_logger.info("Translating text", extra={
        "source_language": payload.sourceLanguage,
        "target_language": payload.targetLanguage,
        "document_id": payload.documentId,
        "text_length": len(payload.text)
    })

    try:
        start_time = time.time()
        translation = await provider.translate(
            payload.text,
            payload.sourceLanguage,
            payload.targetLanguage
        )

        execution_time = time.time() - start_time
        api_logger.info("Translation completed", extra={
            "source_language": payload.sourceLanguage,
            "target_language": payload.targetLanguage,
            "execution_time_ms": round(execution_time * 1000, 2)
        })
        return TranslateResponse(success=True, translation=translation)

    except Exception as e:
        api_logger.error("Translation error", extra={
            "source_language": payload.sourceLanguage,
            "target_language": payload.targetLanguage,
            "error": str(e)
        }, exc_info=True)
        return error_response(500, TRANSLATION_FAILED)
