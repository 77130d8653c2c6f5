"""Structural validation for the site descriptor and content tree."""

from .base import (
    ERROR,
    WARNING,
    ValidationContext,
    ValidationError,
    ValidationIssue,
    Validator,
)
from .documents import DocumentValidator
from .links import LinkValidator
from .navigation import NavigationValidator
from .paths import PathValidator
from .runner import default_validators, ensure_valid, run_validators

__all__ = [
    "ERROR",
    "WARNING",
    "DocumentValidator",
    "LinkValidator",
    "NavigationValidator",
    "PathValidator",
    "ValidationContext",
    "ValidationError",
    "ValidationIssue",
    "Validator",
    "default_validators",
    "ensure_valid",
    "run_validators",
]
