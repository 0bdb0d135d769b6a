"""
Keyword extraction from titles and body text.
"""

from __future__ import annotations

import re
from collections import Counter
from itertools import islice
from typing import Iterable, Optional

from ..config.config import SummarizationSettings
from .models import KeywordSet

_NON_WORD = re.compile(r"[^\w\s]")


class KeywordExtractor:
    """Derives salient lowercase terms, ignoring stop words and short tokens."""

    def __init__(self, settings: Optional[SummarizationSettings] = None) -> None:
        self.settings = settings or SummarizationSettings()
        self.stop_words = frozenset(word.lower() for word in self.settings.stop_words)

    def extract_from_title(self, title: str) -> KeywordSet:
        """Title terms in the order they appear, capped. Repeats are kept."""
        eligible = self._eligible(title.lower().split(), self.settings.title_keyword_min_length)
        return tuple(islice(eligible, self.settings.title_keyword_limit))

    def extract_top_keywords(self, text: str, limit: Optional[int] = None) -> KeywordSet:
        """The ``limit`` most frequent body terms; earlier terms win ties."""
        if limit is None:
            limit = self.settings.content_keyword_limit
        if limit <= 0:
            return ()

        tokens = _NON_WORD.sub(" ", text.lower()).split()
        counts = Counter(self._eligible(tokens, self.settings.content_keyword_min_length))
        return tuple(word for word, _ in counts.most_common(limit))

    def _eligible(self, tokens: Iterable[str], min_length: int) -> Iterable[str]:
        return (token for token in tokens if len(token) >= min_length and token not in self.stop_words)
