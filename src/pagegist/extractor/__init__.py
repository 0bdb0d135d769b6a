"""
PageGist content extraction.

Locates the article inside a noisy page with a three-step cascade:
1. Semantic selectors (article, main, CMS and platform content classes)
2. Density scoring of block elements by paragraphs and text length
3. Fallback: the whole body with navigation, ads and widgets stripped

Trees are accessed through the ``DocumentNode`` protocol; ``SoupNode``
adapts BeautifulSoup documents to it.
"""

from .content_locator import ContentLocator
from .eligibility import PageEligibility
from .models import ContentCandidate, ExtractedContent, LocatedContent, LocatorStrategy
from .noise_filter import NoiseFilter
from .page_extractor import PageExtractor
from .protocols import DocumentNode
from .soup_node import SoupNode, parse_html

__all__ = [
    "ContentLocator",
    "ContentCandidate",
    "DocumentNode",
    "ExtractedContent",
    "LocatedContent",
    "LocatorStrategy",
    "NoiseFilter",
    "PageEligibility",
    "PageExtractor",
    "SoupNode",
    "parse_html",
]
