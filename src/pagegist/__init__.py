"""
PageGist - local key-point summaries of web pages.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import Config
from .extractor import ExtractedContent, SoupNode, parse_html
from .pipeline import (
    Pipeline,
    extract_content,
    has_significant_content,
    is_long_form,
    should_process,
    summarize_locally,
)

__all__ = [
    "__version__",
    "Config",
    "ExtractedContent",
    "Pipeline",
    "SoupNode",
    "extract_content",
    "has_significant_content",
    "is_long_form",
    "parse_html",
    "should_process",
    "summarize_locally",
]
