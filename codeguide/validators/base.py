"""Core validation data structures and helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence

from ..config import SiteConfig
from ..models import ContentTree

ERROR = "error"
WARNING = "warning"


@dataclass
class ValidationIssue:
    """Represents a single structural problem in the site."""

    check: str
    path: Optional[str]
    detail: str
    severity: str = ERROR

    @property
    def is_error(self) -> bool:
        return self.severity == ERROR

    def __str__(self) -> str:
        location = self.path or "<site>"
        return f"{self.severity}: [{self.check}] {location}: {self.detail}"


class ValidationError(RuntimeError):
    """Raised when validation fails with one or more errors."""

    def __init__(self, message: str, issues: Sequence[ValidationIssue]) -> None:
        super().__init__(message)
        self.issues = list(issues)


class Validator(Protocol):
    """Protocol implemented by structural validators."""

    name: str

    def validate(self, context: "ValidationContext") -> List[ValidationIssue]:
        """Run validation and return any issues."""


@dataclass
class ValidationContext:
    """Descriptor and content tree shared with validators."""

    config: SiteConfig
    tree: ContentTree
