from .score import compute_score, keyword_coverage, label_for_score, score_breakdown
from .suggestions import generate_suggestions

__all__ = [
    "compute_score",
    "keyword_coverage",
    "label_for_score",
    "score_breakdown",
    "generate_suggestions",
]
