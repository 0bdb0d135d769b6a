"""
Default word lists used by keyword extraction and sentence scoring.

These are plain data; the configuration models copy them into their defaults
so that callers and tests can override any of them.
"""

from __future__ import annotations

STOP_WORDS: frozenset[str] = frozenset(
    {
        "a", "about", "above", "after", "again", "against", "all", "also", "am",
        "an", "and", "another", "any", "are", "aren't", "around", "as", "at",
        "be", "because", "become", "been", "before", "being", "below", "between", "both",
        "but", "by", "can", "can't", "cannot", "could", "couldn't", "did", "didn't",
        "do", "does", "doesn't", "doing", "don't", "down", "during", "each", "either",
        "enough", "even", "ever", "every", "few", "for", "from", "further", "get",
        "gets", "got", "had", "hadn't", "has", "hasn't", "have", "haven't", "having",
        "he", "her", "here", "hers", "herself", "him", "himself", "his", "how",
        "however", "i", "if", "in", "including", "into", "is", "isn't", "it",
        "its", "itself", "just", "least", "less", "let", "like", "made", "make",
        "many", "may", "me", "might", "more", "most", "much", "must", "my",
        "myself", "never", "next", "no", "nor", "not", "now", "of", "off",
        "often", "on", "once", "one", "only", "or", "other", "others", "ought",
        "our", "ours", "ourselves", "out", "over", "own", "really", "said", "same",
        "says", "she", "should", "since", "so", "some", "something", "still", "such",
        "than", "that", "the", "their", "theirs", "them", "themselves", "then", "there",
        "there's", "these", "they", "thing", "things", "think", "this", "those", "though",
        "through", "to", "too", "under", "until", "up", "upon", "us", "used",
        "using", "very", "was", "wasn't", "we", "well", "went", "were", "weren't",
        "what", "whatever", "when", "where", "where's", "whether", "which", "while", "who",
        "whole", "whom", "whose", "why", "will", "with", "within", "without", "won't",
        "would", "wouldn't", "yet", "you", "your", "yours", "yourself", "yourselves",
    }
)

VALUE_INDICATORS: tuple[str, ...] = (
    "important",
    "significant",
    "key",
    "crucial",
    "essential",
    "main",
    "primary",
    "shows",
    "reveals",
    "found",
    "discovered",
    "research",
    "study",
    "data",
    "result",
    "results",
    "conclusion",
    "findings",
    "evidence",
    "proof",
    "new",
    "breakthrough",
    "innovation",
    "technology",
    "development",
    "impact",
    "effect",
    "influence",
    "change",
    "improvement",
    "benefit",
    "problem",
    "solution",
    "challenge",
    "opportunity",
    "trend",
    "future",
    "expert",
    "analysis",
    "report",
    "according",
    "official",
    "confirmed",
)

ACTION_WORDS: tuple[str, ...] = (
    "can",
    "should",
    "will",
    "how to",
    "way to",
    "method",
    "approach",
    "strategy",
)

FILLER_PHRASES: tuple[str, ...] = (
    "click here",
    "read more",
    "subscribe",
    "follow us",
    "share this",
)

ATTRIBUTION_VERBS: tuple[str, ...] = ("said", "stated", "reported", "announced")
