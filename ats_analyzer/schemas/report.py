from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ScoreLabel = Literal["Poor", "Fair", "Good", "Excellent"]


class ContactInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: str | None = None
    phone: str | None = None
    linkedin: str | None = None
    github: str | None = None
    portfolio: str | None = None

    @property
    def has_profile_link(self) -> bool:
        return bool(self.linkedin or self.github or self.portfolio)


class ResumeStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    word_count: int = Field(default=0, ge=0)
    estimated_pages: int = Field(default=1, ge=0)
    reading_time_min: int = Field(default=1, ge=0)
    bullet_lines: int = Field(default=0, ge=0)
    emails: int = Field(default=0, ge=0)
    phones: int = Field(default=0, ge=0)
    links: int = Field(default=0, ge=0)
    dates: int = Field(default=0, ge=0)


class SectionExtraction(BaseModel):
    model_config = ConfigDict(frozen=True)

    sections: dict[str, str] = Field(default_factory=dict)
    contact: ContactInfo = Field(default_factory=ContactInfo)


class SectionCheck(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    present: bool


class KeywordMatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    found: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)


class ScoreBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    structure: int = Field(ge=0)
    contact: int = Field(ge=0)
    keywords: int = Field(ge=0)
    formatting: int = Field(ge=0)


class ScoreResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    label: ScoreLabel
    coverage: float = Field(ge=0.0, le=1.0)


class AnalysisReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    sections: dict[str, str] = Field(default_factory=dict)
    contact: ContactInfo
    stats: ResumeStats
    keywords: list[str] = Field(default_factory=list)
    keyword_match: KeywordMatchResult
    score: int = Field(ge=0, le=100)
    label: ScoreLabel
    coverage: float = Field(ge=0.0, le=1.0)
    normalized_resume_text: str = ""


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    report: AnalysisReport
    suggestions: list[str] = Field(default_factory=list)
    checklist: list[SectionCheck] = Field(default_factory=list)
    breakdown: ScoreBreakdown
