from __future__ import annotations

from ats_analyzer.core.rules import AnalyzerRules, get_analyzer_rules
from ats_analyzer.normalize.text import normalize_text, split_words
from ats_analyzer.normalize.utils import (
    BULLET_LINE_RE,
    DATE_RE,
    EMAIL_RE,
    PHONE_RE,
    URL_RE,
    capped,
    count_matches,
    round_half_up,
)
from ats_analyzer.schemas.report import ResumeStats

WORDS_PER_PAGE = 500
WORDS_PER_MINUTE = 200


def collect_stats(text: str, rules: AnalyzerRules | None = None) -> ResumeStats:
    rules = rules or get_analyzer_rules()
    clean = normalize_text(text)
    scan = capped(clean, rules.max_match_chars)
    word_count = len(split_words(clean))

    return ResumeStats(
        word_count=word_count,
        estimated_pages=max(1, round_half_up(word_count / WORDS_PER_PAGE)),
        reading_time_min=max(1, round_half_up(word_count / WORDS_PER_MINUTE)),
        bullet_lines=count_matches(BULLET_LINE_RE, scan),
        emails=count_matches(EMAIL_RE, scan),
        phones=count_matches(PHONE_RE, scan),
        links=count_matches(URL_RE, scan),
        dates=count_matches(DATE_RE, scan),
    )
