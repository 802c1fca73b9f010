"""Plan domain entity: a submitted goal, its ordered tasks and the generated feedback."""
from datetime import datetime
from typing import Any, List, Mapping, Optional

from planwise.logic.tasks_codec import decode_tasks


class Plan:
    def __init__(self, id: int, goal: str, tasks: Optional[List[str]] = None,
                 feedback: str = "", created_at: Optional[datetime] = None):
        self.id = id
        self.goal = goal
        self.tasks = tasks[:] if tasks else []
        self.feedback = feedback
        self.created_at = created_at

    def __repr__(self) -> str:
        return f"<Plan(id={self.id}, goal={self.goal!r}, tasks={len(self.tasks)})>"

    @staticmethod
    def from_row(row: Mapping[str, Any]) -> "Plan":
        '''Decode a `plans` row. Raises ValueError/TypeError when a column holds something unusable.'''
        plan_id = row["id"]
        goal = row["goal"]
        feedback = row["feedback"]
        created_at = row["created_at"]
        if not isinstance(plan_id, int):
            raise TypeError(f"id must be an integer, got {plan_id!r}")
        if goal is None or feedback is None:
            raise ValueError(f"plan {plan_id} has NULL goal or feedback")
        if not isinstance(created_at, datetime):
            raise ValueError(f"plan {plan_id} has invalid created_at {created_at!r}")
        return Plan(plan_id, str(goal), decode_tasks(row["tasks"]), str(feedback), created_at)

    def to_dict(self):
        '''Converts the Plan to the JSON shape served by GET /plans.'''
        return {
            "id": self.id,
            "goal": self.goal,
            "tasks": self.tasks,
            "feedback": self.feedback,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
