"""
Public entry points of the extraction and summarization pipeline.

The module-level functions build their components from the global
``settings`` on each call; construct ``Pipeline`` directly to inject a
custom ``Config``.
"""

from __future__ import annotations

from typing import Optional, Union

from .config.config import Config, settings
from .extractor.eligibility import PageEligibility
from .extractor.models import ExtractedContent
from .extractor.page_extractor import PageExtractor
from .extractor.protocols import DocumentNode
from .summarizer.local import LocalSummarizer
from .summarizer.models import Summary


class Pipeline:
    """Page extraction followed by local summarization."""

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config or Config()
        self.extractor = PageExtractor(self.config.extraction)
        self.summarizer = LocalSummarizer(self.config.summarization)

    def extract_content(self, document: Union[DocumentNode, str], url: str = "") -> ExtractedContent:
        return self.extractor.extract_content(document, url)

    def should_process(self, url: str, document: Union[DocumentNode, str]) -> bool:
        return self.extractor.should_process(url, document)

    def is_long_form(self, extracted: ExtractedContent) -> bool:
        return self.extractor.is_long_form(extracted)

    def has_significant_content(self, extracted: ExtractedContent) -> bool:
        return self.extractor.has_significant_content(extracted)

    def summarize_locally(self, content: str, title: str = "") -> Summary:
        return self.summarizer.summarize(content, title)

    def summarize_page(self, document: Union[DocumentNode, str], url: str = "") -> Summary:
        """Extract a page and summarize its main content under its own title."""
        extracted = self.extract_content(document, url)
        return self.summarize_locally(extracted.content, extracted.title)


def extract_content(document: Union[DocumentNode, str], url: str = "") -> ExtractedContent:
    return PageExtractor(settings.extraction).extract_content(document, url)


def should_process(url: str, document: Union[DocumentNode, str]) -> bool:
    return PageEligibility(settings.extraction).should_process(url, document)


def is_long_form(extracted: ExtractedContent) -> bool:
    return PageEligibility(settings.extraction).is_long_form(extracted)


def has_significant_content(extracted: ExtractedContent) -> bool:
    return PageEligibility(settings.extraction).has_significant_content(extracted)


def summarize_locally(content: str, title: str = "") -> Summary:
    return LocalSummarizer(settings.summarization).summarize(content, title)
