"""
Input validation for requests reaching the HTTP and CLI surfaces.
"""

from __future__ import annotations

from typing import Any, List, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field


class RequestValidationError(ValueError):
    """Raised when a summarize or extract request is malformed."""

    pass


class ContentValidationError(RequestValidationError):
    """Raised when the content to summarize is missing, blank or too long."""

    pass


class URLValidationError(RequestValidationError):
    """Raised when URL validation fails."""

    pass


class ValidationRules(BaseModel):
    """Rules for request validation."""

    max_content_length: int = Field(default=50_000, gt=0)
    allowed_schemes: List[str] = Field(default_factory=lambda: ["http", "https"])
    max_url_length: int = 2048


class InputValidator:
    """Validates summarize and extract requests before they hit the pipeline."""

    def __init__(self, rules: Optional[ValidationRules] = None) -> None:
        self.rules = rules or ValidationRules()

    def validate_summary_request(self, content: Any, title: Any = None) -> str:
        """
        Returns:
            The content, unchanged

        Raises:
            ContentValidationError: If content is missing, blank or too long
            RequestValidationError: If a title is given but is not a string
        """
        if not content or not isinstance(content, str):
            raise ContentValidationError("Content is required and must be a string")

        if not content.strip():
            raise ContentValidationError("Content cannot be empty")

        if len(content) > self.rules.max_content_length:
            raise ContentValidationError(
                f"Content is too long (max {self.rules.max_content_length:,} characters)"
            )

        if title is not None and not isinstance(title, str):
            raise RequestValidationError("Title must be a string")

        return content

    def validate_url(self, url: Any) -> str:
        """
        Returns:
            The URL, unchanged

        Raises:
            URLValidationError: If the URL is missing, malformed or not http(s)
        """
        if not url or not isinstance(url, str):
            raise URLValidationError("URL is required and must be a string")

        if len(url) > self.rules.max_url_length:
            raise URLValidationError(f"URL exceeds maximum length of {self.rules.max_url_length}")

        try:
            parsed = urlparse(url)
        except ValueError as e:
            raise URLValidationError(f"Invalid URL format: {e}") from e

        if parsed.scheme not in self.rules.allowed_schemes:
            raise URLValidationError("URL must start with http:// or https://")

        if not parsed.netloc:
            raise URLValidationError("Invalid URL format")

        return url
