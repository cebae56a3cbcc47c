from __future__ import annotations

from ats_analyzer.core.rules import AnalyzerRules, get_analyzer_rules
from ats_analyzer.normalize.utils import round_half_up
from ats_analyzer.schemas.report import (
    ContactInfo,
    KeywordMatchResult,
    ResumeStats,
    ScoreBreakdown,
    ScoreLabel,
    ScoreResult,
)


def keyword_coverage(keyword_match: KeywordMatchResult) -> float:
    total = len(keyword_match.found) + len(keyword_match.missing)
    if total == 0:
        return 0.0
    return len(keyword_match.found) / total


def _structure_score(sections: dict[str, str], weights) -> int:
    score = 0
    for key in ("experience", "education", "skills", "summary"):
        if sections.get(key):
            score += weights[key]
    if sections.get("projects") or sections.get("certifications"):
        score += weights["projects_or_certifications"]
    return score


def _contact_score(contact: ContactInfo, weights) -> int:
    score = 0
    if contact.email:
        score += weights["email"]
    if contact.phone:
        score += weights["phone"]
    if contact.has_profile_link:
        score += weights["link"]
    return score


def _formatting_score(stats: ResumeStats, rules: AnalyzerRules) -> int:
    weights = rules.score.formatting
    score = 0
    if rules.min_words <= stats.word_count <= rules.max_words:
        score += weights["length"]
    if stats.bullet_lines >= rules.min_bullets:
        score += weights["bullets"]
    if stats.dates >= rules.min_dates:
        score += weights["dates"]
    if stats.emails >= 1 or stats.phones >= 1:
        score += weights["contact"]
    return score


def score_breakdown(
    sections: dict[str, str],
    contact: ContactInfo,
    stats: ResumeStats,
    keyword_match: KeywordMatchResult,
    rules: AnalyzerRules | None = None,
) -> ScoreBreakdown:
    rules = rules or get_analyzer_rules()
    return ScoreBreakdown(
        structure=_structure_score(sections, rules.score.structure),
        contact=_contact_score(contact, rules.score.contact),
        keywords=round_half_up(keyword_coverage(keyword_match) * rules.score.keyword_weight),
        formatting=_formatting_score(stats, rules),
    )


def label_for_score(score: int, rules: AnalyzerRules | None = None) -> ScoreLabel:
    rules = rules or get_analyzer_rules()
    if score >= rules.score.label_excellent:
        return "Excellent"
    if score >= rules.score.label_good:
        return "Good"
    if score >= rules.score.label_fair:
        return "Fair"
    return "Poor"


def compute_score(
    sections: dict[str, str],
    contact: ContactInfo,
    stats: ResumeStats,
    keyword_match: KeywordMatchResult,
    rules: AnalyzerRules | None = None,
) -> ScoreResult:
    """Combine structure, contact, keyword and formatting subscores into 0..100."""
    rules = rules or get_analyzer_rules()
    breakdown = score_breakdown(sections, contact, stats, keyword_match, rules)
    raw = breakdown.structure + breakdown.contact + breakdown.keywords + breakdown.formatting
    score = max(0, min(100, round_half_up(raw)))
    return ScoreResult(
        score=score,
        label=label_for_score(score, rules),
        coverage=keyword_coverage(keyword_match),
    )
