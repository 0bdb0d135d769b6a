"""
Page-level extraction: title, main content and headings in one result.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Optional, Union

import structlog

from ..config.config import ExtractionSettings
from ..observability import increment
from ..utils.text import clean_text
from .content_locator import ContentLocator
from .eligibility import PageEligibility
from .models import ExtractedContent, LocatedContent, LocatorStrategy
from .protocols import DocumentNode

logger = structlog.get_logger(__name__)


class PageExtractor:
    """
    Builds an ExtractedContent from a parsed document or raw body text.

    Raw text has no structure to search, so it is only whitespace-cleaned
    and gets the fallback title and no headings.
    """

    def __init__(
        self,
        settings: Optional[ExtractionSettings] = None,
        locator: Optional[ContentLocator] = None,
    ) -> None:
        self.settings = settings or ExtractionSettings()
        self.locator = locator or ContentLocator(self.settings)
        self.eligibility = PageEligibility(self.settings)
        self.logger = logger.bind(component="PageExtractor")

    def extract_content(self, document: Union[DocumentNode, str], url: str = "") -> ExtractedContent:
        start_time = time.perf_counter()

        if isinstance(document, str):
            located = LocatedContent(text=clean_text(document), strategy=LocatorStrategy.RAW_TEXT)
            title = self.settings.fallback_title
            headings: tuple[str, ...] = ()
        else:
            located = self.locator.locate_content(document)
            title = self.locator.extract_title(document)
            headings = tuple(self.locator.extract_headings(document))

        extracted = ExtractedContent(
            title=title,
            content=located.text,
            headings=headings,
            source_url=url,
            extracted_at=datetime.now(timezone.utc),
        )

        increment("documents_extracted", labels={"strategy": located.strategy.value})
        self.logger.info(
            "Content extracted",
            url=url,
            strategy=located.strategy.value,
            word_count=extracted.word_count,
            headings=len(headings),
            extraction_time=time.perf_counter() - start_time,
        )
        return extracted

    def should_process(self, url: str, document: Union[DocumentNode, str]) -> bool:
        return self.eligibility.should_process(url, document)

    def is_long_form(self, extracted: ExtractedContent) -> bool:
        return self.eligibility.is_long_form(extracted)

    def has_significant_content(self, extracted: ExtractedContent) -> bool:
        return self.eligibility.has_significant_content(extracted)
