from .api import AnalyzeRequest, AnalyzeResponse, KeywordsRequest, KeywordsResponse
from .report import (
    AnalysisReport,
    AnalysisResult,
    ContactInfo,
    KeywordMatchResult,
    ResumeStats,
    ScoreBreakdown,
    ScoreResult,
    SectionCheck,
    SectionExtraction,
)

__all__ = [
    "AnalyzeRequest",
    "AnalyzeResponse",
    "KeywordsRequest",
    "KeywordsResponse",
    "AnalysisReport",
    "AnalysisResult",
    "ContactInfo",
    "KeywordMatchResult",
    "ResumeStats",
    "ScoreBreakdown",
    "ScoreResult",
    "SectionCheck",
    "SectionExtraction",
]
