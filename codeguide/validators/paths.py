"""Checks for the base path and the output/asset directories."""

from __future__ import annotations

import re
from pathlib import PurePosixPath, PureWindowsPath
from typing import List, Optional

from .base import ValidationContext, ValidationIssue

_WHITESPACE = re.compile(r"\s")


class PathValidator:
    """Ensures ``base``, ``dest`` and ``public`` are usable path strings."""

    name = "paths"

    def validate(self, context: ValidationContext) -> List[ValidationIssue]:
        config = context.config
        issues: List[ValidationIssue] = []

        problem = _check_base(config.base)
        if problem:
            issues.append(ValidationIssue(check=self.name, path="base", detail=problem))

        for key, value in (("dest", config.dest), ("public", config.public)):
            problem = _check_directory(value)
            if problem:
                issues.append(ValidationIssue(check=self.name, path=key, detail=problem))

        if config.dest.strip() and _normalise(config.dest) == _normalise(config.public):
            issues.append(
                ValidationIssue(
                    check=self.name,
                    path="dest",
                    detail="Output directory must differ from the public assets directory",
                )
            )
        return issues


def _check_base(base: str) -> Optional[str]:
    if not base:
        return "Base path must not be empty"
    if not base.startswith("/") or not base.endswith("/"):
        return "Base path must start and end with '/'"
    if _WHITESPACE.search(base) or "\\" in base:
        return "Base path must not contain whitespace or backslashes"
    if ".." in base.split("/"):
        return "Base path must not contain '..' segments"
    return None


def _check_directory(value: str) -> Optional[str]:
    if not value.strip():
        return "Directory must not be empty"
    if value != value.strip():
        return "Directory must not have surrounding whitespace"
    if PurePosixPath(value).is_absolute() or PureWindowsPath(value).is_absolute():
        return "Directory must be relative to the content root"
    if ".." in value.replace("\\", "/").split("/"):
        return "Directory must not contain '..' segments"
    if _normalise(value) == ".":
        return "Directory must not be the content root itself"
    return None


def _normalise(value: str) -> str:
    return PurePosixPath(value.replace("\\", "/")).as_posix()


__all__ = ["PathValidator"]
