"""
Local extractive summarization: no network, no model, fixed weights.
"""

from __future__ import annotations

import time
from typing import Optional

import structlog

from ..config.config import SummarizationSettings
from ..observability import increment, observe
from ..utils.text import clean_text
from .keywords import KeywordExtractor
from .models import Summary
from .scorer import SentenceScorer
from .selector import SummarySelector
from .sentences import split_sentences

logger = structlog.get_logger(__name__)


class LocalSummarizer:
    """
    Turns article text into at most ``max_points`` key sentences.

    Pipeline: clean the text, split it into eligible sentences, and when
    there are more than ``direct_return_threshold`` of them, score each one
    against the title and body keywords and keep the best in source order.
    """

    def __init__(
        self,
        settings: Optional[SummarizationSettings] = None,
        keyword_extractor: Optional[KeywordExtractor] = None,
        scorer: Optional[SentenceScorer] = None,
        selector: Optional[SummarySelector] = None,
    ) -> None:
        self.settings = settings or SummarizationSettings()
        self.keyword_extractor = keyword_extractor or KeywordExtractor(self.settings)
        self.scorer = scorer or SentenceScorer(self.settings)
        self.selector = selector or SummarySelector(self.settings.max_points)
        self.logger = logger.bind(component="LocalSummarizer")

    def summarize(self, content: str, title: str = "") -> Summary:
        start_time = time.perf_counter()

        cleaned = clean_text(content)
        sentences = split_sentences(cleaned, self.settings.min_sentence_length)

        if len(sentences) <= self.settings.direct_return_threshold:
            points: Summary = tuple(sentence.text for sentence in sentences)
            mode = "direct"
        else:
            keywords = self.keyword_extractor.extract_from_title(title) + self.keyword_extractor.extract_top_keywords(
                cleaned, self.settings.content_keyword_limit
            )
            scored = self.scorer.score(sentences, keywords, len(sentences))
            points = self.selector.select(scored, self.settings.max_points)
            mode = "scored"

        elapsed = time.perf_counter() - start_time
        increment("summaries_generated", labels={"mode": mode})
        observe("summarize_duration_seconds", elapsed)
        self.logger.debug(
            "Summary generated",
            mode=mode,
            sentences=len(sentences),
            points=len(points),
            duration=elapsed,
        )
        return points
