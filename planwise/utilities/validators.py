"""
Request/response schemas using Pydantic.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime


class AnalyzeRequest(BaseModel):
    """Body of POST /analyze. Both fields may be omitted or null."""
    title: str = ""
    steps: List[str] = Field(default_factory=list)

    @field_validator("title", mode="before")
    @classmethod
    def _null_title(cls, v):
        return "" if v is None else v

    @field_validator("steps", mode="before")
    @classmethod
    def _null_steps(cls, v):
        return [] if v is None else v


class AnalyzeResponse(BaseModel):
    title: str
    steps: List[str]
    suggestions: str


class UploadResponse(BaseModel):
    summary: str


class PlanOut(BaseModel):
    id: int
    goal: str
    tasks: List[str]
    feedback: str
    created_at: Optional[datetime] = None


class ErrorResponse(BaseModel):
    error: str
