"""Request validation."""

from .validation import (
    ContentValidationError,
    InputValidator,
    RequestValidationError,
    URLValidationError,
    ValidationRules,
)

__all__ = [
    "ContentValidationError",
    "InputValidator",
    "RequestValidationError",
    "URLValidationError",
    "ValidationRules",
]
