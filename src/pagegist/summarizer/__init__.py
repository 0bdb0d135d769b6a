"""Local extractive summarization of article text."""

from .keywords import KeywordExtractor
from .local import LocalSummarizer
from .models import KeywordSet, ScoredSentence, Sentence, Summary
from .scorer import SentenceScorer
from .selector import SummarySelector
from .sentences import split_sentences

__all__ = [
    "KeywordExtractor",
    "KeywordSet",
    "LocalSummarizer",
    "ScoredSentence",
    "Sentence",
    "SentenceScorer",
    "Summary",
    "SummarySelector",
    "split_sentences",
]
