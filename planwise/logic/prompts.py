"""Prompt construction for the analyze and upload endpoints.

Title, steps and document text are inserted verbatim: nothing is escaped or
truncated, so whatever the user sends is what the model sees.
"""
from typing import Iterable

from planwise.utilities.constants import ANALYZE_PROMPT_TEMPLATE, UPLOAD_PROMPT_TEMPLATE


def number_steps(steps: Iterable[str]) -> str:
    """Render steps as '1. first\\n2. second\\n' (empty string for no steps)."""
    return "".join(f"{i}. {step}\n" for i, step in enumerate(steps, start=1))


def build_analyze_prompt(title: str, steps: Iterable[str]) -> str:
    return ANALYZE_PROMPT_TEMPLATE.format(title=title, steps=number_steps(steps))


def build_upload_prompt(document_text: str) -> str:
    return UPLOAD_PROMPT_TEMPLATE.format(document=document_text)
