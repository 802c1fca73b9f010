from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from typing import Optional
import logging

from planwise.api.api_ai import CompletionClient
from planwise.api.errors import register_error_handlers
from planwise.infra.Plan_Repository import PlanRepository
from planwise.utilities.config import DEFAULT_MAX_UPLOAD_BYTES, Settings

# Routers
from planwise.api.routes import analyze, plans, upload

# Logging
logger = logging.getLogger("planwise_app")


def create_app(repository: PlanRepository,
               completion_client: CompletionClient,
               settings: Optional[Settings] = None) -> FastAPI:
    """Assemble the API around already-constructed storage and completion handles.

    Both handles are shared by every request; neither holds per-request state.
    """
    app = FastAPI(title="PlanWise API")

    app.state.repository = repository
    app.state.completion_client = completion_client
    app.state.max_upload_bytes = settings.max_upload_bytes if settings else DEFAULT_MAX_UPLOAD_BYTES

    origins = list(settings.cors_origins) if settings else ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include routers
    app.include_router(analyze.router)
    app.include_router(upload.router)
    app.include_router(plans.router)

    @app.get("/ping")
    def ping():
        return {"message": "pong"}

    return app
