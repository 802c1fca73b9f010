import logging
from typing import Sequence

from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    MetaData,
    Table,
    Text,
    create_engine,
    func,
    select,
    text,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from planwise.domain.Plan import Plan
from planwise.domain.results import PlanListing, SaveResult
from planwise.logic.tasks_codec import encode_tasks
from planwise.utilities.constants import PLANS_LIST_LIMIT

logger = logging.getLogger(__name__)

metadata = MetaData()

# Text columns stay nullable: rows written by other tools may hold NULLs,
# which list_recent_plans skips instead of failing on.
plans_table = Table(
    "plans",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("goal", Text),
    Column("tasks", Text),
    Column("feedback", Text),
    Column("created_at", DateTime(timezone=True), server_default=func.now()),
    Column("deleted_at", DateTime(timezone=True), nullable=True),
)


class StorageError(RuntimeError):
    """Raised when the plans table cannot be queried."""


def normalize_database_url(url: str) -> str:
    """Accept libpq-style postgres:// URLs, which SQLAlchemy no longer does."""
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


class PlanRepository:
    def __init__(self, engine: Engine):
        self.engine = engine

    @classmethod
    def from_url(cls, database_url: str) -> "PlanRepository":
        engine = create_engine(
            normalize_database_url(database_url),
            pool_pre_ping=True,  # detect connections dropped by the server
            pool_recycle=3600,
        )
        return cls(engine)

    def ping(self) -> None:
        """Run a trivial query; raises SQLAlchemyError if the database is unreachable."""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def create_schema(self) -> None:
        metadata.create_all(self.engine, tables=[plans_table], checkfirst=True)

    def insert_plan(self, goal: str, tasks: Sequence[str], feedback: str) -> SaveResult:
        """Store one analyzed plan. Never raises on database errors.

        The outcome is reported through SaveResult so the caller decides how
        loudly to complain; the analyze endpoint only logs it.
        """
        stmt = plans_table.insert().values(
            goal=goal,
            tasks=encode_tasks(tasks),
            feedback=feedback,
            created_at=func.now(),
        )
        try:
            with self.engine.begin() as conn:
                result = conn.execute(stmt)
                plan_id = result.inserted_primary_key[0]
        except SQLAlchemyError as e:
            logger.exception("Failed to insert plan %r", goal)
            return SaveResult(ok=False, error=str(e))
        logger.debug("Inserted plan %s", plan_id)
        return SaveResult(ok=True, plan_id=plan_id)

    def list_recent_plans(self, limit: int = PLANS_LIST_LIMIT) -> PlanListing:
        """Return up to `limit` active plans, newest first.

        Rows that cannot be decoded are left out of the listing and reported
        in PlanListing.warnings. Raises StorageError if the query itself fails.
        """
        limit = max(0, min(int(limit), PLANS_LIST_LIMIT))
        stmt = (
            select(
                plans_table.c.id,
                plans_table.c.goal,
                plans_table.c.tasks,
                plans_table.c.feedback,
                plans_table.c.created_at,
            )
            .where(plans_table.c.deleted_at.is_(None))
            .order_by(plans_table.c.created_at.desc(), plans_table.c.id.desc())
            .limit(limit)
        )
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch plans")
            raise StorageError(str(e)) from e

        listing = PlanListing()
        for row in rows:
            try:
                listing.plans.append(Plan.from_row(row))
            except (TypeError, ValueError) as e:
                msg = f"Skipped plan row {row.get('id')!r}: {e}"
                logger.warning(msg)
                listing.warnings.append(msg)
        return listing
