"""Runs the structural validators over a site."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..logging import get_logger
from .base import ValidationContext, ValidationError, ValidationIssue, Validator
from .documents import DocumentValidator
from .links import LinkValidator
from .navigation import NavigationValidator
from .paths import PathValidator

logger = get_logger("validators")


def default_validators() -> List[Validator]:
    return [PathValidator(), NavigationValidator(), DocumentValidator(), LinkValidator()]


def run_validators(
    context: ValidationContext, validators: Optional[Sequence[Validator]] = None
) -> List[ValidationIssue]:
    """Run each validator in order and collect every issue."""
    issues: List[ValidationIssue] = []
    for validator in validators if validators is not None else default_validators():
        found = validator.validate(context)
        logger.debug("Validator %s reported %d issue(s)", validator.name, len(found))
        issues.extend(found)
    return issues


def ensure_valid(
    context: ValidationContext,
    validators: Optional[Sequence[Validator]] = None,
    *,
    strict: bool = False,
) -> List[ValidationIssue]:
    """Raise ``ValidationError`` on errors (or on warnings too when ``strict``)."""
    issues = run_validators(context, validators)
    failing = [issue for issue in issues if strict or issue.is_error]
    if failing:
        raise ValidationError(f"Site validation failed with {len(failing)} issue(s)", failing)
    return issues


__all__ = ["default_validators", "ensure_valid", "run_validators"]
