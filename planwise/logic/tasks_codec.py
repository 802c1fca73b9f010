"""Encoding of a plan's ordered steps into the single `tasks` text column.

New rows are written as a JSON array so steps may contain any character.
Rows written by the old service are comma-joined; those are still readable,
but a step that contained a comma comes back split in two.
"""
import json
from typing import List, Sequence

from planwise.utilities.constants import TASKS_LEGACY_DELIMITER


def encode_tasks(tasks: Sequence[str]) -> str:
    return json.dumps(list(tasks), ensure_ascii=False)


def decode_tasks(raw: str) -> List[str]:
    """Turn a stored `tasks` value back into a list of steps.

    Raises TypeError if `raw` is not a string (e.g. a NULL column).
    """
    if not isinstance(raw, str):
        raise TypeError(f"tasks column must be text, got {type(raw).__name__}")
    if raw == "":
        return []
    if raw.startswith("["):
        try:
            parsed = json.loads(raw)
        except ValueError:
            parsed = None
        if isinstance(parsed, list) and all(isinstance(t, str) for t in parsed):
            return parsed
    # legacy comma-joined value
    return raw.split(TASKS_LEGACY_DELIMITER)
