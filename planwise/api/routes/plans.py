import logging
from typing import List

from fastapi import APIRouter, Depends

from planwise.api.dependencies import get_repository
from planwise.api.errors import error_response
from planwise.infra.Plan_Repository import PlanRepository, StorageError
from planwise.utilities.constants import PLANS_LIST_LIMIT
from planwise.utilities.validators import ErrorResponse, PlanOut

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/plans", response_model=List[PlanOut], responses={500: {"model": ErrorResponse}})
def list_plans(repo: PlanRepository = Depends(get_repository)):
    """Most recent active plans, newest first."""
    try:
        listing = repo.list_recent_plans(PLANS_LIST_LIMIT)
    except StorageError:
        return error_response(500, "Failed to fetch plans")
    if listing.degraded:
        logger.warning("Listed %d plans, skipped %d undecodable rows", len(listing.plans), len(listing.warnings))
    return [plan.to_dict() for plan in listing.plans]
