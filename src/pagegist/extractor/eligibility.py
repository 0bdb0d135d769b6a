"""
Predicates deciding whether a page is worth extracting and summarizing.
"""

from __future__ import annotations

import re
from typing import List, Optional, Pattern, Union

import structlog

from ..config.config import ExtractionSettings
from ..observability import increment
from .content_locator import body_of
from .models import ExtractedContent
from .protocols import DocumentNode

logger = structlog.get_logger(__name__)


class PageEligibility:
    """URL and length gates applied before and after extraction."""

    def __init__(self, settings: Optional[ExtractionSettings] = None) -> None:
        self.settings = settings or ExtractionSettings()
        self._excluded: List[Pattern[str]] = [
            re.compile(pattern, re.IGNORECASE) for pattern in self.settings.excluded_url_patterns
        ]

    def rejection_reason(self, url: str, document: Union[DocumentNode, str]) -> Optional[str]:
        """Why the page should be skipped, or ``None`` when it is eligible."""
        for pattern in self._excluded:
            if pattern.search(url):
                return "excluded_url"

        body_text = document if isinstance(document, str) else body_of(document).text
        if len(body_text) < self.settings.min_body_text_length:
            return "too_short"

        return None

    def should_process(self, url: str, document: Union[DocumentNode, str]) -> bool:
        reason = self.rejection_reason(url, document)
        if reason is not None:
            increment("pages_skipped", labels={"reason": reason})
            logger.debug("Page skipped", url=url, reason=reason)
            return False
        return True

    def has_significant_content(self, extracted: ExtractedContent) -> bool:
        return extracted.word_count >= self.settings.min_word_count

    def is_long_form(self, extracted: ExtractedContent) -> bool:
        return extracted.word_count >= self.settings.long_form_word_count
