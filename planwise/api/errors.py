import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "Invalid request JSON"
MISSING_FILE_MESSAGE = "Missing file"

# Routes whose malformed input means something more specific than bad JSON.
VALIDATION_MESSAGES = {
    "/upload": MISSING_FILE_MESSAGE,
}


class UploadTooLargeError(ValueError):
    """An uploaded file exceeded the configured byte limit."""

    def __init__(self, limit: int):
        super().__init__(f"File too large (limit {limit} bytes)")
        self.limit = limit


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return error_response(400, VALIDATION_MESSAGES.get(request.url.path, INVALID_JSON_MESSAGE))


async def _http_error_handler(request: Request, exc: StarletteHTTPException):
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def _upload_too_large_handler(request: Request, exc: UploadTooLargeError):
    return error_response(413, str(exc))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(UploadTooLargeError, _upload_too_large_handler)
