from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

_RULES_PATH = Path(__file__).with_name("rules.yaml")

SECTION_KEYS = ("summary", "skills", "experience", "education", "projects", "certifications", "awards")
DUPLICATE_POLICIES = ("last", "first", "concatenate")


@dataclass(frozen=True)
class ScoreWeights:
    structure: Mapping[str, int]
    contact: Mapping[str, int]
    keyword_weight: int
    formatting: Mapping[str, int]
    label_excellent: int
    label_good: int
    label_fair: int


@dataclass(frozen=True)
class AnalyzerRules:
    stopwords: frozenset[str]
    curated_terms: tuple[str, ...]
    curated_boost: int
    custom_boost: int
    max_keywords: int
    min_token_length: int
    max_match_chars: int
    max_missing_in_suggestion: int
    headings: tuple[tuple[str, tuple[str, ...]], ...]
    duplicate_policy: str
    score: ScoreWeights
    action_verbs: tuple[str, ...]
    min_words: int
    max_words: int
    min_bullets: int
    min_dates: int
    min_action_verbs: int
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    def with_overrides(self, **changes: Any) -> "AnalyzerRules":
        """Return a copy with some fields replaced, validating the duplicate policy."""
        updated = replace(self, **changes)
        _validate_policy(updated.duplicate_policy)
        return updated


def _validate_policy(policy: str) -> str:
    if policy not in DUPLICATE_POLICIES:
        raise RuntimeError(
            f"Invalid sections.duplicate_policy '{policy}'. Expected one of: {', '.join(DUPLICATE_POLICIES)}."
        )
    return policy


def _require(mapping: Any, key: str, context: str) -> Any:
    if not isinstance(mapping, dict) or key not in mapping:
        raise RuntimeError(f"Invalid rules config '{_RULES_PATH}': missing '{context}.{key}'.")
    return mapping[key]


def _as_terms(values: Any, context: str) -> tuple[str, ...]:
    if not isinstance(values, list):
        raise RuntimeError(f"Invalid rules config '{_RULES_PATH}': '{context}' must be a list.")
    return tuple(str(value).strip().lower() for value in values if str(value).strip())


def _frozen_ints(mapping: Any, context: str) -> Mapping[str, int]:
    if not isinstance(mapping, dict):
        raise RuntimeError(f"Invalid rules config '{_RULES_PATH}': '{context}' must be a mapping.")
    return MappingProxyType({str(key): int(value) for key, value in mapping.items()})


def load_rules_config(path: Path = _RULES_PATH) -> dict[str, Any]:
    """Read and parse the YAML rules file into a plain mapping."""
    try:
        import yaml  # type: ignore[import-not-found]
    except Exception as exc:
        raise RuntimeError(
            "Unable to parse analyzer rules because PyYAML is unavailable. "
            "Install dependency: PyYAML."
        ) from exc

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Failed to read analyzer rules '{path}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:  # type: ignore[attr-defined]
        raise RuntimeError(f"Invalid YAML in analyzer rules '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid analyzer rules '{path}': expected a top-level mapping.")
    return parsed


def build_rules(config: dict[str, Any]) -> AnalyzerRules:
    limits = _require(config, "limits", "root")
    keywords = _require(config, "keywords", "root")
    sections = _require(config, "sections", "root")
    score = _require(config, "score", "root")
    suggestions = _require(config, "suggestions", "root")

    raw_headings = _require(sections, "headings", "sections")
    headings: list[tuple[str, tuple[str, ...]]] = []
    for key in SECTION_KEYS:
        labels = _as_terms(_require(raw_headings, key, "sections.headings"), f"sections.headings.{key}")
        headings.append((key, labels))

    labels = _require(score, "labels", "score")
    weights = ScoreWeights(
        structure=_frozen_ints(_require(score, "structure", "score"), "score.structure"),
        contact=_frozen_ints(_require(score, "contact", "score"), "score.contact"),
        keyword_weight=int(_require(score, "keyword_weight", "score")),
        formatting=_frozen_ints(_require(score, "formatting", "score"), "score.formatting"),
        label_excellent=int(_require(labels, "excellent", "score.labels")),
        label_good=int(_require(labels, "good", "score.labels")),
        label_fair=int(_require(labels, "fair", "score.labels")),
    )

    return AnalyzerRules(
        stopwords=frozenset(_as_terms(_require(keywords, "stopwords", "keywords"), "keywords.stopwords")),
        curated_terms=_as_terms(_require(keywords, "curated", "keywords"), "keywords.curated"),
        curated_boost=int(_require(keywords, "curated_boost", "keywords")),
        custom_boost=int(_require(keywords, "custom_boost", "keywords")),
        max_keywords=int(_require(limits, "max_keywords", "limits")),
        min_token_length=int(_require(limits, "min_token_length", "limits")),
        max_match_chars=int(_require(limits, "max_match_chars", "limits")),
        max_missing_in_suggestion=int(_require(limits, "max_missing_in_suggestion", "limits")),
        headings=tuple(headings),
        duplicate_policy=_validate_policy(str(sections.get("duplicate_policy", "last")).strip().lower()),
        score=weights,
        action_verbs=_as_terms(_require(suggestions, "action_verbs", "suggestions"), "suggestions.action_verbs"),
        min_words=int(_require(suggestions, "min_words", "suggestions")),
        max_words=int(_require(suggestions, "max_words", "suggestions")),
        min_bullets=int(_require(suggestions, "min_bullets", "suggestions")),
        min_dates=int(_require(suggestions, "min_dates", "suggestions")),
        min_action_verbs=int(_require(suggestions, "min_action_verbs", "suggestions")),
        raw=MappingProxyType(config),
    )


@lru_cache(maxsize=1)
def get_analyzer_rules() -> AnalyzerRules:
    """Load the packaged rules file once and cache the frozen result."""
    return build_rules(load_rules_config())


def get_rule_value(path: str, default: Any = None) -> Any:
    """Get a raw rules value by dot path, e.g. 'score.labels.good'."""
    if not path:
        return default

    current: Any = get_analyzer_rules().raw
    for key in path.split("."):
        if not isinstance(current, Mapping):
            return default
        if key not in current:
            return default
        current = current[key]
    return current
