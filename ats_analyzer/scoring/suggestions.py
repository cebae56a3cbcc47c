from __future__ import annotations

from ats_analyzer.core.rules import AnalyzerRules, get_analyzer_rules
from ats_analyzer.normalize.utils import METRIC_RE, capped
from ats_analyzer.schemas.report import ContactInfo, KeywordMatchResult, ResumeStats

MISSING_SECTION_MESSAGES = (
    ("experience", "Add a 'Work Experience' section with role, company, dates, and achievements."),
    ("education", "Add an 'Education' section with degree, institution, and graduation date."),
    ("skills", "Add a 'Skills' section listing relevant technologies and tools."),
    ("summary", "Add a brief professional summary at the top tailored to the job."),
)
MISSING_EMAIL = "Include a professional email address."
MISSING_PHONE = "Include a reachable phone number with country/area code."
MISSING_LINKS = "Add a LinkedIn, GitHub, or portfolio link."
MISSING_KEYWORDS = "Incorporate missing job keywords: {keywords}. Mention where applicable."
TOO_SHORT = "Your resume is quite short. Expand content with responsibilities and quantified achievements."
TOO_LONG = "Your resume is long. Condense content to 1-2 pages focusing on impact."
FEW_BULLETS = "Use bullet points for readability and scannability (aim for 5+)."
NO_METRICS = "Add metrics to quantify impact (e.g., increased X by Y%, reduced Z by N)."
FEW_DATES = "Include dates for roles and education to establish a clear timeline."
FEW_ACTION_VERBS = "Start bullet points with strong action verbs (e.g., Led, Built, Optimized)."


def count_action_verbs(text: str, rules: AnalyzerRules | None = None) -> int:
    rules = rules or get_analyzer_rules()
    lowered = capped(text, rules.max_match_chars).lower()
    return sum(1 for verb in rules.action_verbs if verb in lowered)


def has_metrics(text: str, rules: AnalyzerRules | None = None) -> bool:
    rules = rules or get_analyzer_rules()
    return METRIC_RE.search(capped(text, rules.max_match_chars)) is not None


def generate_suggestions(
    sections: dict[str, str],
    contact: ContactInfo,
    stats: ResumeStats,
    keyword_match: KeywordMatchResult,
    normalized_text: str,
    rules: AnalyzerRules | None = None,
) -> list[str]:
    """Evaluate each rule in a fixed order; every rule adds at most one message."""
    rules = rules or get_analyzer_rules()
    suggestions: list[str] = []

    for key, message in MISSING_SECTION_MESSAGES:
        if not sections.get(key):
            suggestions.append(message)

    if not contact.email:
        suggestions.append(MISSING_EMAIL)
    if not contact.phone:
        suggestions.append(MISSING_PHONE)
    if not contact.has_profile_link:
        suggestions.append(MISSING_LINKS)

    if keyword_match.missing:
        top_missing = ", ".join(keyword_match.missing[: rules.max_missing_in_suggestion])
        suggestions.append(MISSING_KEYWORDS.format(keywords=top_missing))

    if stats.word_count < rules.min_words:
        suggestions.append(TOO_SHORT)
    if stats.word_count > rules.max_words:
        suggestions.append(TOO_LONG)

    if stats.bullet_lines < rules.min_bullets:
        suggestions.append(FEW_BULLETS)
    if not has_metrics(normalized_text, rules):
        suggestions.append(NO_METRICS)

    if stats.dates < rules.min_dates:
        suggestions.append(FEW_DATES)

    if count_action_verbs(normalized_text, rules) < rules.min_action_verbs:
        suggestions.append(FEW_ACTION_VERBS)

    return suggestions
