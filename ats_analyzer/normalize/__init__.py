from .text import normalize_text, split_words

__all__ = ["normalize_text", "split_words"]
