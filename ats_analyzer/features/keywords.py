from __future__ import annotations

from typing import Iterable

from ats_analyzer.core.rules import AnalyzerRules, get_analyzer_rules
from ats_analyzer.normalize.text import normalize_text, split_words
from ats_analyzer.normalize.utils import capped


def normalize_custom_keywords(custom_keywords: Iterable[str] | None) -> list[str]:
    if not custom_keywords:
        return []
    cleaned = (str(keyword).strip().lower() for keyword in custom_keywords)
    return [keyword for keyword in cleaned if keyword]


def canonical_keyword(term: str) -> str:
    return term.rstrip(".")


def rank_keywords(
    job_description_text: str,
    custom_keywords: Iterable[str] | None = None,
    rules: AnalyzerRules | None = None,
) -> list[tuple[str, int]]:
    """Weighted terms, heaviest first.

    Token frequency is seeded from the job description, curated vocabulary
    terms found anywhere in it get a fixed boost, and custom keywords get a
    larger one. The sort is stable, so equal weights keep insertion order:
    description tokens by first appearance, then curated terms, then custom
    keywords.
    """
    rules = rules or get_analyzer_rules()
    jd = capped(normalize_text(job_description_text), rules.max_match_chars).lower()

    weights: dict[str, int] = {}
    for token in split_words(jd):
        if token in rules.stopwords or len(token) < rules.min_token_length:
            continue
        weights[token] = weights.get(token, 0) + 1

    for term in rules.curated_terms:
        if term in jd:
            weights[term] = weights.get(term, 0) + rules.curated_boost

    for keyword in normalize_custom_keywords(custom_keywords):
        weights[keyword] = weights.get(keyword, 0) + rules.custom_boost

    return sorted(weights.items(), key=lambda item: -item[1])


def extract_keywords(
    job_description_text: str,
    custom_keywords: Iterable[str] | None = None,
    rules: AnalyzerRules | None = None,
) -> list[str]:
    rules = rules or get_analyzer_rules()
    keywords: list[str] = []
    seen: set[str] = set()
    for term, _weight in rank_keywords(job_description_text, custom_keywords, rules):
        canonical = canonical_keyword(term)
        if len(canonical) < rules.min_token_length or canonical in seen:
            continue
        keywords.append(canonical)
        seen.add(canonical)
        if len(keywords) >= rules.max_keywords:
            break
    return keywords
