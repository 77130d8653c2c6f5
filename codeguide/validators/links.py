"""Cross-document link checks."""

from __future__ import annotations

from typing import List

from ..models import is_external
from .base import WARNING, ValidationContext, ValidationIssue


class LinkValidator:
    """Ensures relative links land on a document or an asset."""

    name = "links"

    def validate(self, context: ValidationContext) -> List[ValidationIssue]:
        tree = context.tree
        public_root = context.config.public_path
        issues: List[ValidationIssue] = []

        for document in tree:
            for target in document.links():
                if not target:
                    issues.append(self._issue(document.path, "Empty link target detected"))
                    continue
                if target.startswith("#") or is_external(target):
                    continue
                if tree.resolve_link(document, target) is not None:
                    continue

                normalized = tree.resolve_target(target, base_dir=document.directory)
                if normalized is None:
                    issues.append(self._issue(document.path, f"Link leaves the content tree: {target}"))
                    continue
                if (tree.root / normalized).exists() or (public_root / normalized).exists():
                    continue
                issues.append(self._issue(document.path, f"Link target not found: {target}"))
        return issues

    def _issue(self, path: str, detail: str) -> ValidationIssue:
        return ValidationIssue(check=self.name, path=path, detail=detail, severity=WARNING)


__all__ = ["LinkValidator"]
