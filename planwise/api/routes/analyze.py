import logging

from fastapi import APIRouter, Depends

from planwise.api.api_ai import CompletionClient, CompletionError
from planwise.api.dependencies import get_completion_client, get_repository
from planwise.api.errors import error_response
from planwise.infra.Plan_Repository import PlanRepository
from planwise.logic.prompts import build_analyze_prompt
from planwise.utilities.constants import ANALYZE_SYSTEM_INSTRUCTION
from planwise.utilities.validators import AnalyzeRequest, AnalyzeResponse, ErrorResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def analyze(
    payload: AnalyzeRequest,
    repo: PlanRepository = Depends(get_repository),
    ai: CompletionClient = Depends(get_completion_client),
):
    prompt = build_analyze_prompt(payload.title, payload.steps)
    try:
        suggestions = ai.complete(ANALYZE_SYSTEM_INSTRUCTION, prompt)
    except CompletionError as e:
        return error_response(500, str(e))

    # Saving is best-effort: the caller gets the suggestions either way.
    saved = repo.insert_plan(payload.title, payload.steps, suggestions)
    if not saved.ok:
        logger.warning("Failed to save plan %r: %s", payload.title, saved.error)

    return AnalyzeResponse(title=payload.title, steps=payload.steps, suggestions=suggestions)
