"""Utility modules for PageGist."""

from .text import clean_text, count_words

__all__ = ["clean_text", "count_words"]
