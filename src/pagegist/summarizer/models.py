"""
Value types produced while summarizing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

KeywordSet = Tuple[str, ...]
Summary = Tuple[str, ...]


@dataclass(slots=True, frozen=True)
class Sentence:
    """A trimmed sentence and its position among the eligible sentences."""

    text: str
    original_index: int
    token_count: int


@dataclass(slots=True, frozen=True)
class ScoredSentence:
    sentence: Sentence
    score: int

    @property
    def text(self) -> str:
        return self.sentence.text

    @property
    def original_index(self) -> int:
        return self.sentence.original_index
