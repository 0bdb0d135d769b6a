"""
Data models for extraction results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Tuple

from ..utils.text import count_words
from .protocols import DocumentNode


class LocatorStrategy(str, Enum):
    """Which cascade step produced the main content."""

    SEMANTIC = "semantic"
    DENSITY = "density"
    FALLBACK = "fallback"
    RAW_TEXT = "raw_text"


@dataclass(slots=True, frozen=True)
class ContentCandidate:
    """A subtree considered by density scoring."""

    node: DocumentNode
    score: float


@dataclass(slots=True, frozen=True)
class LocatedContent:
    """Cleaned main-content text and the strategy that found it."""

    text: str
    strategy: LocatorStrategy


@dataclass(slots=True, frozen=True)
class ExtractedContent:
    """Result of extracting the readable part of a page."""

    title: str
    content: str
    headings: Tuple[str, ...] = ()
    source_url: str = ""
    extracted_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    word_count: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "word_count", count_words(self.content))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "content": self.content,
            "wordCount": self.word_count,
            "headings": list(self.headings),
            "url": self.source_url,
            "timestamp": self.extracted_at.isoformat(),
        }
