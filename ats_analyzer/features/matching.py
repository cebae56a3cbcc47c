from __future__ import annotations

from typing import Iterable

from ats_analyzer.core.rules import AnalyzerRules, get_analyzer_rules
from ats_analyzer.normalize.text import normalize_text, split_words
from ats_analyzer.normalize.utils import capped
from ats_analyzer.schemas.report import KeywordMatchResult


def match_keywords(
    resume_text: str,
    keywords: Iterable[str],
    rules: AnalyzerRules | None = None,
) -> KeywordMatchResult:
    rules = rules or get_analyzer_rules()
    text = capped(normalize_text(resume_text), rules.max_match_chars).lower()
    # Exact token hits first; the substring fallback covers terms the tokenizer
    # splits apart, such as "ci/cd".
    bag = set(split_words(text))

    found: list[str] = []
    missing: list[str] = []
    for keyword in keywords:
        needle = keyword.lower()
        if needle and (needle in bag or needle in text):
            found.append(keyword)
        else:
            missing.append(keyword)
    return KeywordMatchResult(found=found, missing=missing)
