from __future__ import annotations

import logging
from typing import Iterable

from ats_analyzer.core.rules import AnalyzerRules, get_analyzer_rules
from ats_analyzer.features.keywords import extract_keywords
from ats_analyzer.features.matching import match_keywords
from ats_analyzer.features.sections import build_section_checklist, extract_sections
from ats_analyzer.features.stats import collect_stats
from ats_analyzer.normalize.text import normalize_text
from ats_analyzer.schemas.report import AnalysisReport, AnalysisResult
from ats_analyzer.scoring.score import compute_score, score_breakdown
from ats_analyzer.scoring.suggestions import generate_suggestions

logger = logging.getLogger(__name__)


def analyze_resume(
    resume_text: str,
    job_description_text: str = "",
    custom_keywords: Iterable[str] | None = None,
    rules: AnalyzerRules | None = None,
) -> AnalysisResult:
    """Run the full ATS pipeline over already-decoded résumé text.

    Pure and deterministic: identical inputs give identical results, and no
    text input makes it raise.
    """
    rules = rules or get_analyzer_rules()
    normalized = normalize_text(resume_text)

    extraction = extract_sections(normalized, rules)
    stats = collect_stats(normalized, rules)
    keywords = extract_keywords(job_description_text, custom_keywords, rules)
    keyword_match = match_keywords(normalized, keywords, rules)

    sections = dict(extraction.sections)
    result = compute_score(sections, extraction.contact, stats, keyword_match, rules)
    breakdown = score_breakdown(sections, extraction.contact, stats, keyword_match, rules)
    suggestions = generate_suggestions(
        sections,
        extraction.contact,
        stats,
        keyword_match,
        normalized,
        rules,
    )

    report = AnalysisReport(
        sections=sections,
        contact=extraction.contact,
        stats=stats,
        keywords=keywords,
        keyword_match=keyword_match,
        score=result.score,
        label=result.label,
        coverage=result.coverage,
        normalized_resume_text=normalized,
    )

    logger.info(
        "resume_analysis_completed score=%d label=%s keywords=%d found=%d sections=%s words=%d",
        result.score,
        result.label,
        len(keywords),
        len(keyword_match.found),
        ",".join(sorted(sections)) or "-",
        stats.word_count,
    )

    return AnalysisResult(
        report=report,
        suggestions=suggestions,
        checklist=build_section_checklist(sections),
        breakdown=breakdown,
    )
