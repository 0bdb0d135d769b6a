"""
Hand-tuned linear relevance model for ranking sentences.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from ..config.config import SummarizationSettings
from .models import ScoredSentence, Sentence

NUMERIC_DETAIL = re.compile(r"\d+%|\$\d+|\d+,\d+|\d+ (million|billion|thousand|percent)")
QUOTED_SPAN = re.compile(r'"[^"]*"')


class SentenceScorer:
    """
    Scores sentences by position, length, keyword overlap and lexical cues.

    Every component is additive and all weights come from
    ``SummarizationSettings.weights``. The score is a relative ranking
    signal with no fixed bound.
    """

    def __init__(self, settings: Optional[SummarizationSettings] = None) -> None:
        self.settings = settings or SummarizationSettings()
        self.weights = self.settings.weights
        self._attribution = re.compile("|".join(re.escape(verb) for verb in self.settings.attribution_verbs))

    def score(
        self,
        sentences: Sequence[Sentence],
        keywords: Sequence[str],
        total_count: Optional[int] = None,
    ) -> List[ScoredSentence]:
        if total_count is None:
            total_count = len(sentences)
        lowered_keywords = [keyword.lower() for keyword in keywords]
        return [
            ScoredSentence(sentence=sentence, score=self.score_sentence(sentence, lowered_keywords, total_count))
            for sentence in sentences
        ]

    def score_sentence(self, sentence: Sentence, keywords: Sequence[str], total_count: int) -> int:
        lowered = sentence.text.lower()
        return (
            self._position_score(sentence.original_index, total_count)
            + self._length_score(sentence.token_count)
            + self._keyword_score(lowered, keywords)
            + self._lexical_score(sentence.text, lowered)
        )

    def _position_score(self, index: int, total_count: int) -> int:
        w = self.weights
        score = 0
        if index == 0:
            score += w.first_sentence
        if index == 1:
            score += w.second_sentence
        if index < total_count * w.early_fraction:
            score += w.early_sentence
        if index > total_count * w.late_fraction:
            score += w.late_sentence
        return score

    def _length_score(self, word_count: int) -> int:
        w = self.weights
        if 15 <= word_count <= 35:
            return w.ideal_length
        if 10 <= word_count <= 45:
            return w.acceptable_length
        if word_count < 8 or word_count > 60:
            return w.poor_length
        return 0

    def _keyword_score(self, lowered: str, keywords: Sequence[str]) -> int:
        # Repeated keywords count once per occurrence in the list.
        return sum(self.weights.keyword_hit for keyword in keywords if keyword in lowered)

    def _lexical_score(self, text: str, lowered: str) -> int:
        w = self.weights
        s = self.settings
        score = 0

        score += w.value_indicator * _count_present(lowered, s.value_indicators)

        if NUMERIC_DETAIL.search(text):
            score += w.numeric_detail

        if QUOTED_SPAN.search(text) or self._attribution.search(lowered):
            score += w.quotation

        score += w.action_word * _count_present(lowered, s.action_words)
        score += w.filler_phrase * _count_present(lowered, s.filler_phrases)
        return score


def _count_present(lowered: str, terms: Sequence[str]) -> int:
    return sum(1 for term in terms if term in lowered)
