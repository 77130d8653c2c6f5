"""Per-document content checks."""

from __future__ import annotations

from typing import List

from ..front_matter import check_flags
from ..models import INDEX_NAMES
from .base import WARNING, ValidationContext, ValidationIssue


class DocumentValidator:
    """Checks that documents have a body, sane front matter and a way in."""

    name = "documents"

    def validate(self, context: ValidationContext) -> List[ValidationIssue]:
        issues: List[ValidationIssue] = []
        for document in context.tree:
            if document.error:
                issues.append(
                    ValidationIssue(check=self.name, path=document.path, detail=document.error)
                )
            for problem in check_flags(document.front_matter):
                issues.append(ValidationIssue(check=self.name, path=document.path, detail=problem))
            if not document.body.strip():
                issues.append(
                    ValidationIssue(check=self.name, path=document.path, detail="Document has no content")
                )

        issues.extend(self._orphans(context))
        return issues

    def _orphans(self, context: ValidationContext) -> List[ValidationIssue]:
        entry_points = [name for name in INDEX_NAMES if name in context.tree]
        entry_points.extend(entry.target for entry in context.config.theme.navbar)
        if not entry_points:
            return []

        reachable = context.tree.reachable_from(entry_points)
        return [
            ValidationIssue(
                check=self.name,
                path=document.path,
                detail="Document is not reachable from the home page or the navbar",
                severity=WARNING,
            )
            for document in context.tree
            if document.path not in reachable
        ]


__all__ = ["DocumentValidator"]
