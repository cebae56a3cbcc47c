from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .report import AnalysisReport, ScoreBreakdown, SectionCheck


def split_custom_keywords(value: Any) -> list[str]:
    """Accept a comma-separated string or a list; trim and drop empty entries."""
    if value is None:
        return []
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = []
        for item in value:
            items.extend(str(item).split(","))
    else:
        raise ValueError("custom_keywords must be a string or a list of strings")
    return [item.strip() for item in items if item.strip()]


class AnalyzeRequest(BaseModel):
    resume_text: str = Field(min_length=1)
    job_description_text: str = ""
    custom_keywords: list[str] = Field(default_factory=list, max_length=100)

    @field_validator("custom_keywords", mode="before")
    @classmethod
    def _split_custom_keywords(cls, value: Any) -> list[str]:
        return split_custom_keywords(value)


class KeywordsRequest(BaseModel):
    job_description_text: str = ""
    custom_keywords: list[str] = Field(default_factory=list, max_length=100)

    @field_validator("custom_keywords", mode="before")
    @classmethod
    def _split_custom_keywords(cls, value: Any) -> list[str]:
        return split_custom_keywords(value)


class KeywordsResponse(BaseModel):
    keywords: list[str]


class AnalyzeResponse(BaseModel):
    report: AnalysisReport
    suggestions: list[str]
    checklist: list[SectionCheck]
    breakdown: ScoreBreakdown
    generated_at: datetime
