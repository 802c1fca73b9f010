import logging

from fastapi import APIRouter, Depends, File, UploadFile
from starlette.concurrency import run_in_threadpool

from planwise.api.api_ai import CompletionClient, CompletionError
from planwise.api.dependencies import get_completion_client, get_max_upload_bytes
from planwise.api.errors import MISSING_FILE_MESSAGE, UploadTooLargeError, error_response
from planwise.logic.prompts import build_upload_prompt
from planwise.utilities.constants import UPLOAD_SYSTEM_INSTRUCTION
from planwise.utilities.validators import ErrorResponse, UploadResponse

router = APIRouter()
logger = logging.getLogger(__name__)


async def read_upload_text(file: UploadFile, limit: int) -> str:
    """Read the whole upload into memory, refusing anything over `limit` bytes."""
    data = await file.read(limit + 1)
    if len(data) > limit:
        raise UploadTooLargeError(limit)
    return data.decode("utf-8", errors="replace")


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def upload(
    file: UploadFile = File(None),
    ai: CompletionClient = Depends(get_completion_client),
    max_bytes: int = Depends(get_max_upload_bytes),
):
    if file is None:
        return error_response(400, MISSING_FILE_MESSAGE)

    try:
        content = await read_upload_text(file, max_bytes)
    except UploadTooLargeError:
        logger.warning("Upload %r exceeded %d bytes", file.filename, max_bytes)
        raise
    except OSError:
        logger.exception("Could not read upload %r", file.filename)
        return error_response(500, "Could not read file")
    finally:
        await file.close()

    prompt = build_upload_prompt(content)
    try:
        summary = await run_in_threadpool(ai.complete, UPLOAD_SYSTEM_INSTRUCTION, prompt)
    except CompletionError as e:
        return error_response(500, str(e))

    return UploadResponse(summary=summary)
