"""
Main-content location for noisy web pages.

The locator runs a three-step cascade and accepts the first result longer
than ``min_content_length`` characters:

1. Semantic match: the first element matched by a priority-ordered list of
   selectors (``article``, ``main``, CMS and platform content classes).
2. Density scoring: the ``div``/``section``/``article`` with the most
   paragraphs and text, penalised for sidebar/footer/header classes and
   ad-like ids.
3. Fallback: the whole body with noise stripped. This step always returns,
   possibly with very little text.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

import structlog

from ..config.config import ExtractionSettings
from ..utils.text import clean_text
from .models import ContentCandidate, LocatedContent, LocatorStrategy
from .noise_filter import NoiseFilter
from .protocols import DocumentNode

logger = structlog.get_logger(__name__)

HEADING_SELECTOR = "h1, h2, h3, h4, h5, h6"


class ContentLocator:
    """Finds the article region of a document and returns its cleaned text."""

    def __init__(
        self,
        settings: Optional[ExtractionSettings] = None,
        noise_filter: Optional[NoiseFilter] = None,
    ) -> None:
        self.settings = settings or ExtractionSettings()
        self.noise_filter = noise_filter or NoiseFilter(self.settings.noise)
        self.logger = logger.bind(component="ContentLocator")

    # --- Main content ---

    def locate(self, document: DocumentNode) -> str:
        """Return the cleaned text of the document's main content."""
        return self.locate_content(document).text

    def locate_content(self, document: DocumentNode) -> LocatedContent:
        """Run the cascade and report which strategy won."""
        threshold = self.settings.min_content_length

        semantic = self._semantic_match(document)
        if len(semantic) > threshold:
            return self._located(semantic, LocatorStrategy.SEMANTIC)

        candidate = self.best_candidate(document)
        if candidate is not None:
            dense = self.clean(candidate.node)
            if len(dense) > threshold:
                return self._located(dense, LocatorStrategy.DENSITY)

        return self._located(self._fallback(document), LocatorStrategy.FALLBACK)

    def clean(self, node: DocumentNode) -> str:
        """Noise-filtered, whitespace-normalised text of ``node``."""
        return clean_text(self.noise_filter.filter(node).text)

    def _located(self, text: str, strategy: LocatorStrategy) -> LocatedContent:
        self.logger.debug("Main content located", strategy=strategy.value, length=len(text))
        return LocatedContent(text=text, strategy=strategy)

    def _semantic_match(self, document: DocumentNode) -> str:
        for selector in self.settings.content_selectors:
            element = document.select_one(selector)
            if element is None:
                continue
            content = self.clean(element)
            if len(content) > self.settings.min_content_length:
                self.logger.debug("Semantic selector matched", selector=selector)
                return content
        return ""

    def _fallback(self, document: DocumentNode) -> str:
        return self.clean(body_of(document))

    # --- Density scoring ---

    def score_candidate(self, node: DocumentNode) -> float:
        """Density score of a block element, floored at zero."""
        paragraphs = sum(1 for descendant in node.descendants() if descendant.tag == "p")
        score = paragraphs * 3 + min(len(node.text) / 100, 10)

        classes = set(node.classes)
        for penalised in self.settings.density_penalty_classes:
            if penalised in classes:
                score -= 10
        if "ad" in node.element_id:
            score -= 15

        return max(0.0, score)

    def candidates(self, document: DocumentNode) -> List[ContentCandidate]:
        tags = set(self.settings.density_candidate_tags)
        return [
            ContentCandidate(node=node, score=self.score_candidate(node))
            for node in document.descendants()
            if node.tag in tags
        ]

    def best_candidate(self, document: DocumentNode) -> Optional[ContentCandidate]:
        """Highest-scoring candidate; the earliest wins ties and zero never wins."""
        best: Optional[ContentCandidate] = None
        for candidate in self.candidates(document):
            if candidate.score > (best.score if best else 0):
                best = candidate
        return best

    # --- Title and headings ---

    def extract_title(self, document: DocumentNode) -> str:
        """First non-empty title candidate, or the configured fallback title."""
        for title in self._title_candidates(document):
            title = (title or "").strip()
            if title:
                return title
        return self.settings.fallback_title

    def _title_candidates(self, document: DocumentNode) -> Iterator[Optional[str]]:
        yield _text_of(document.select_one("h1"))

        for selector in self.settings.meta_title_selectors:
            meta = document.select_one(selector)
            yield meta.get_attribute("content") if meta is not None else None

        for selector in self.settings.title_selectors:
            yield _text_of(document.select_one(selector))

        document_title = _text_of(document.select_one("title")) or ""
        yield document_title
        yield self._shorten_title(document_title)

    def _shorten_title(self, title: str) -> str:
        for separator in self.settings.title_separators:
            head = title.split(separator)[0]
            if head.strip():
                return head
        return title

    def extract_headings(self, document: DocumentNode) -> List[str]:
        """Text of every h1-h6 shorter than ``max_heading_length``, in document order."""
        headings = []
        for heading in document.select(HEADING_SELECTOR):
            text = heading.text.strip()
            if 0 < len(text) < self.settings.max_heading_length:
                headings.append(text)
        return headings


def body_of(document: DocumentNode) -> DocumentNode:
    """The document's ``<body>``, or the node itself when it has none."""
    if document.tag == "body":
        return document
    return document.select_one("body") or document


def _text_of(node: Optional[DocumentNode]) -> Optional[str]:
    return node.text if node is not None else None
