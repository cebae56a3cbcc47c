from __future__ import annotations

import logging
import re
from functools import lru_cache

from ats_analyzer.core.rules import AnalyzerRules, get_analyzer_rules
from ats_analyzer.normalize.text import normalize_text
from ats_analyzer.normalize.utils import (
    EMAIL_RE,
    GITHUB_RE,
    LINKEDIN_RE,
    PHONE_RE,
    capped,
    first_match,
    first_portfolio_url,
)
from ats_analyzer.schemas.report import ContactInfo, SectionCheck, SectionExtraction

logger = logging.getLogger(__name__)

_CHECKLIST = (
    ("summary", "Summary"),
    ("skills", "Skills"),
    ("experience", "Experience"),
    ("education", "Education"),
    ("projects", "Projects"),
    ("certifications", "Certifications"),
)

# Horizontal whitespace only. Each run is unambiguous, so a line is matched in one pass.
_HSPACE = r"[^\S\n]"


def _label_pattern(label: str) -> str:
    return rf"{_HSPACE}+".join(re.escape(part) for part in label.split())


@lru_cache(maxsize=8)
def _compile_headings(
    headings: tuple[tuple[str, tuple[str, ...]], ...],
) -> tuple[tuple[str, re.Pattern[str]], ...]:
    compiled: list[tuple[str, re.Pattern[str]]] = []
    for key, labels in headings:
        alternation = "|".join(_label_pattern(label) for label in labels)
        pattern = re.compile(
            rf"^{_HSPACE}*(?:{alternation}){_HSPACE}*(?::{_HSPACE}*)?$",
            re.IGNORECASE | re.MULTILINE,
        )
        compiled.append((key, pattern))
    return tuple(compiled)


def find_headings(text: str, rules: AnalyzerRules | None = None) -> list[tuple[int, str]]:
    """Return (offset, key) for every heading line, sorted by offset."""
    rules = rules or get_analyzer_rules()
    scan = capped(text, rules.max_match_chars)
    hits: list[tuple[int, str]] = []
    for key, pattern in _compile_headings(rules.headings):
        hits.extend((match.start(), key) for match in pattern.finditer(scan))
    hits.sort(key=lambda hit: hit[0])
    return hits


def detect_contact_info(text: str, rules: AnalyzerRules | None = None) -> ContactInfo:
    rules = rules or get_analyzer_rules()
    scan = capped(normalize_text(text), rules.max_match_chars)
    return ContactInfo(
        email=first_match(EMAIL_RE, scan),
        phone=first_match(PHONE_RE, scan),
        linkedin=first_match(LINKEDIN_RE, scan),
        github=first_match(GITHUB_RE, scan),
        portfolio=first_portfolio_url(scan),
    )


def extract_sections(text: str, rules: AnalyzerRules | None = None) -> SectionExtraction:
    rules = rules or get_analyzer_rules()
    clean = normalize_text(text)
    hits = find_headings(clean, rules)

    sections: dict[str, str] = {}
    for index, (start, key) in enumerate(hits):
        end = hits[index + 1][0] if index + 1 < len(hits) else len(clean)
        body = clean[start:end].strip()
        if key not in sections or rules.duplicate_policy == "last":
            sections[key] = body
        elif rules.duplicate_policy == "concatenate":
            sections[key] = f"{sections[key]}\n\n{body}"

    if len(hits) > len(sections):
        logger.debug(
            "duplicate_section_headings headings=%d sections=%d policy=%s",
            len(hits),
            len(sections),
            rules.duplicate_policy,
        )

    return SectionExtraction(sections=sections, contact=detect_contact_info(clean, rules))


def build_section_checklist(sections: dict[str, str]) -> list[SectionCheck]:
    return [
        SectionCheck(key=key, label=label, present=bool(sections.get(key)))
        for key, label in _CHECKLIST
    ]
