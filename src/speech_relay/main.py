"""FastAPI application entry point."""

from ddtrace import patch_all
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from speech_relay.exceptions import ConversionError, MissingAudioError
from speech_relay.logging import setup_logging
from speech_relay.response_models import ErrorResponse
from speech_relay.routes import convert_router

logger = setup_logging()
patch_all()

app = FastAPI(title="Speech Relay Service")
app.include_router(convert_router)


@app.exception_handler(ConversionError)
def handle_conversion_error(request: Request, exc: ConversionError) -> JSONResponse:
    """Maps pipeline and validation errors to the JSON error body."""
    logger.warning(
        "Conversion request failed",
        extra={
            "path": request.url.path,
            "error": exc.message,
            "details": exc.details,
            "status_code": exc.status_code,
        },
    )
    body = ErrorResponse(error=exc.message, details=exc.details)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


@app.exception_handler(Exception)
def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for failures outside the known taxonomy."""
    logger.exception("Unexpected error", extra={"path": request.url.path})
    body = ErrorResponse(error="Conversion failed", details=str(exc) or type(exc).__name__)
    return JSONResponse(status_code=500, content=body.model_dump())


@app.exception_handler(RequestValidationError)
def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reports a malformed form (e.g. ``audio`` sent as text) as missing audio."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    return handle_conversion_error(request, MissingAudioError(details=details))
