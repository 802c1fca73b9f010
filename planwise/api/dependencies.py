"""Accessors for the long-lived handles that create_app stores on app.state."""
from fastapi import Request

from planwise.api.api_ai import CompletionClient
from planwise.infra.Plan_Repository import PlanRepository
from planwise.utilities.config import DEFAULT_MAX_UPLOAD_BYTES


def get_repository(request: Request) -> PlanRepository:
    return request.app.state.repository


def get_completion_client(request: Request) -> CompletionClient:
    return request.app.state.completion_client


def get_max_upload_bytes(request: Request) -> int:
    return getattr(request.app.state, "max_upload_bytes", DEFAULT_MAX_UPLOAD_BYTES)
