from .keywords import extract_keywords, rank_keywords
from .matching import match_keywords
from .sections import build_section_checklist, detect_contact_info, extract_sections
from .stats import collect_stats

__all__ = [
    "collect_stats",
    "extract_sections",
    "detect_contact_info",
    "build_section_checklist",
    "extract_keywords",
    "rank_keywords",
    "match_keywords",
]
