from __future__ import annotations

import re

from .utils import WORD_SPLIT_RE

_INVISIBLE_RE = re.compile("[\u200b-\u200d\ufeff]")


def normalize_text(text: str | None) -> str:
    """Canonical form used by every analysis step.

    Carriage returns are dropped, tabs become single spaces, zero-width and BOM
    code points are removed, then outer whitespace is trimmed. Never raises.
    """
    if not text:
        return ""
    cleaned = text.replace("\r", "").replace("\t", " ")
    cleaned = _INVISIBLE_RE.sub("", cleaned)
    return cleaned.strip()


def split_words(text: str | None) -> list[str]:
    if not text:
        return []
    return [token for token in WORD_SPLIT_RE.split(text.lower()) if token]
