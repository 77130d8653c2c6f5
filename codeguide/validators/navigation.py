"""Navbar consistency checks."""

from __future__ import annotations

from typing import List

from .base import WARNING, ValidationContext, ValidationIssue


class NavigationValidator:
    """Ensures every navbar entry points at an existing document."""

    name = "navigation"

    def validate(self, context: ValidationContext) -> List[ValidationIssue]:
        navbar = context.config.theme.navbar
        if not navbar:
            return [
                ValidationIssue(
                    check=self.name,
                    path=None,
                    detail="Navbar declares no entries",
                    severity=WARNING,
                )
            ]

        issues: List[ValidationIssue] = []
        seen: set[str] = set()
        for entry in navbar:
            document = context.tree.get(entry.target) or context.tree.by_route(entry.target)
            if document is None:
                issues.append(
                    ValidationIssue(
                        check=self.name,
                        path=entry.target,
                        detail="Navbar entry points at a document that does not exist",
                    )
                )
                continue
            if document.path in seen:
                issues.append(
                    ValidationIssue(
                        check=self.name,
                        path=entry.target,
                        detail="Navbar lists the same document more than once",
                        severity=WARNING,
                    )
                )
            seen.add(document.path)
        return issues


__all__ = ["NavigationValidator"]
