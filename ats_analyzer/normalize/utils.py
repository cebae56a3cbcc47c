from __future__ import annotations

import math
import re

from ats_analyzer.core.rules import get_analyzer_rules

# Every quantifier below is bounded so a scan stays linear in the input length.
EMAIL_RE = re.compile(r"[A-Z0-9._%+-]{1,64}@[A-Z0-9.-]{1,253}\.[A-Z]{2,24}", re.IGNORECASE)
PHONE_RE = re.compile(r"\+?\d{1,3}?[-.\s]?\(?\d{2,4}\)?[-.\s]?\d{3,4}[-.\s]?\d{3,4}")
URL_RE = re.compile(r"https?://\S+")
LINKEDIN_RE = re.compile(r"https?://(?:www\.)?linkedin\.com/[^\s)]+", re.IGNORECASE)
GITHUB_RE = re.compile(r"https?://(?:www\.)?github\.com/[^\s)]+", re.IGNORECASE)
PORTFOLIO_URL_RE = re.compile(r"https?://(?P<host>[^\s/?#]+)(?P<rest>\S*)", re.IGNORECASE)
_TLD_RE = re.compile(r"\.[a-z]{2,}", re.IGNORECASE)
DATE_RE = re.compile(
    r"(?:\b\d{4}\b)|(?:\b(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]{0,6}\.?\s{1,4}\d{4}\b)",
    re.IGNORECASE,
)
BULLET_LINE_RE = re.compile(r"^[^\S\n]*[-*•]", re.MULTILINE)
METRIC_RE = re.compile(r"\b(\d+%|\$\d+|\d+k|\d+,\d+|\b\d+\b)\b")
WORD_SPLIT_RE = re.compile(r"[^a-z0-9+#.]", re.IGNORECASE)

_PROFILE_HOSTS = ("linkedin", "github")


def capped(text: str, limit: int | None = None) -> str:
    """Bound the amount of text handed to pattern scans.

    The cut falls on the last whitespace at or before ``limit`` so a token is
    never split in half; a single token longer than ``limit`` is cut hard.
    """
    if limit is None:
        limit = get_analyzer_rules().max_match_chars
    if limit <= 0 or len(text) <= limit:
        return text
    if text[limit].isspace():
        return text[:limit]
    boundary = limit - 1
    while boundary > 0 and not text[boundary].isspace():
        boundary -= 1
    if boundary <= 0:
        return text[:limit]
    return text[:boundary]


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def first_match(pattern: re.Pattern[str], text: str) -> str | None:
    match = pattern.search(text)
    return match.group(0) if match else None


def count_matches(pattern: re.Pattern[str], text: str) -> int:
    return sum(1 for _ in pattern.finditer(text))


def first_portfolio_url(text: str) -> str | None:
    for match in PORTFOLIO_URL_RE.finditer(text):
        url = match.group(0)
        lowered = url.lower()
        if any(host in lowered for host in _PROFILE_HOSTS):
            continue
        if not _TLD_RE.search(match.group("host")):
            continue
        return url
    return None
