"""Shared fakes for the API and storage tests."""
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from planwise.api.api_ai import CompletionError
from planwise.domain.results import PlanListing, SaveResult
from planwise.infra.Plan_Repository import PlanRepository, StorageError


def memory_repository(create_schema: bool = True) -> PlanRepository:
    """A PlanRepository over one shared in-memory SQLite connection."""
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    repo = PlanRepository(engine)
    if create_schema:
        repo.create_schema()
    return repo


class FakeCompletionClient:
    def __init__(self, reply: str = "1. Sleep more", error: str = ""):
        self.reply = reply
        self.error = error
        self.calls = []

    def complete(self, system_instruction: str, user_prompt: str) -> str:
        self.calls.append((system_instruction, user_prompt))
        if self.error:
            raise CompletionError(self.error)
        return self.reply


class FailingRepository:
    """Reports every save as failed and every listing as a query error."""

    def __init__(self):
        self.saved = []

    def insert_plan(self, goal, tasks, feedback) -> SaveResult:
        self.saved.append((goal, list(tasks), feedback))
        return SaveResult(ok=False, error="connection lost")

    def list_recent_plans(self, limit: int = 20) -> PlanListing:
        raise StorageError("connection lost")
