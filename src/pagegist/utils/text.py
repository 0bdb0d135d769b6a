"""
Plain-text helpers shared by the extractor and the summarizer.
"""

from __future__ import annotations

import re

_WHITESPACE_RUN = re.compile(r"\s+")


def clean_text(text: str) -> str:
    """Collapse every whitespace run (blank lines included) to one space and trim."""
    if not text:
        return ""
    return _WHITESPACE_RUN.sub(" ", text).strip()


def count_words(text: str) -> int:
    """Number of whitespace-separated tokens in ``text``."""
    return len(text.split())
