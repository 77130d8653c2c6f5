"""Content tree discovery."""

from __future__ import annotations

import hashlib
import os
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from .config import SiteConfig
from .front_matter import FrontMatterError, split_front_matter
from .logging import get_logger
from .models import ContentDocument, ContentTree

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".venv",
    ".vuepress",
    "node_modules",
    "__pycache__",
    ".pytest_cache",
    ".idea",
    ".codeguide",
}

_MARKDOWN_SUFFIXES = {".md"}

logger = get_logger("scanner")


@dataclass
class IgnoreRule:
    """Represents an ignore rule parsed from .gitignore."""

    pattern: str
    directory_only: bool
    anchored: bool
    negate: bool
    has_slash: bool

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if not self.pattern:
            return False
        if self.directory_only and not is_dir:
            return False

        if self.anchored or self.has_slash:
            if fnmatchcase(rel_path, self.pattern):
                return True
            return self.directory_only and rel_path.startswith(f"{self.pattern}/")

        return any(fnmatchcase(part, self.pattern) for part in rel_path.split("/"))


def _build_ignore_rule(pattern: str, negate: bool = False) -> IgnoreRule | None:
    pattern = pattern.strip()
    if not pattern:
        return None

    directory_only = pattern.endswith("/")
    if directory_only:
        pattern = pattern[:-1]

    anchored = pattern.startswith("/")
    if anchored:
        pattern = pattern[1:]

    return IgnoreRule(
        pattern=pattern,
        directory_only=directory_only,
        anchored=anchored,
        negate=negate,
        has_slash="/" in pattern,
    )


def _parse_gitignore(path: Path) -> List[IgnoreRule]:
    if not path.exists():
        return []

    rules: List[IgnoreRule] = []
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        negate = line.startswith("!")
        if negate:
            line = line[1:]
        rule = _build_ignore_rule(line, negate=negate)
        if rule is not None:
            rules.append(rule)
    return rules


def _config_rules(config: SiteConfig | None) -> List[IgnoreRule]:
    """Generated output and static assets are not content."""
    if config is None:
        return []
    rules: List[IgnoreRule] = []
    for directory in (config.dest, config.public):
        cleaned = directory.strip().strip("/")
        if not cleaned or cleaned == ".":
            continue
        rule = _build_ignore_rule(f"/{cleaned}/")
        if rule is not None:
            rules.append(rule)
    return rules


def _should_ignore(rel_path: str, is_dir: bool, rules: Sequence[IgnoreRule]) -> bool:
    ignored = False
    for rule in rules:
        if rule.matches(rel_path, is_dir):
            ignored = not rule.negate
    return ignored


def _iter_markdown(root: Path, rules: Sequence[IgnoreRule]) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(root):
        current_dir = Path(dirpath)
        rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

        kept = []
        for name in sorted(dirnames):
            if name in _EXCLUDED_DIRS:
                continue
            rel_path = f"{rel_dir}/{name}" if rel_dir else name
            if _should_ignore(rel_path, True, rules):
                continue
            kept.append(name)
        dirnames[:] = kept

        for filename in sorted(filenames):
            if Path(filename).suffix.lower() not in _MARKDOWN_SUFFIXES:
                continue
            rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
            if _should_ignore(rel_path, False, rules):
                continue
            yield current_dir / filename


def _hash_bytes(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


class ContentScanner:
    """Walks the content root to produce a content tree."""

    def scan(self, root: str | Path, *, config: Optional[SiteConfig] = None) -> ContentTree:
        """Return a tree of every Markdown document under ``root``."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Content root not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Content root is not a directory: {root}")

        rules = _parse_gitignore(root_path / ".gitignore")
        rules.extend(_config_rules(config))

        documents: List[ContentDocument] = []
        for path in _iter_markdown(root_path, rules):
            rel_path = path.relative_to(root_path).as_posix()
            raw = path.read_bytes()
            try:
                text = raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                logger.debug("Undecodable document %s: %s", rel_path, exc)
                text = raw.decode("utf-8", errors="replace")
                error = f"Document is not valid UTF-8: {exc.reason} at byte {exc.start}"
                front_matter, body = {}, text
            else:
                try:
                    front_matter, body = split_front_matter(text)
                    error = None
                except FrontMatterError as exc:
                    logger.debug("Malformed front matter in %s: %s", rel_path, exc)
                    front_matter, body, error = {}, text, str(exc)
            documents.append(
                ContentDocument(
                    path=rel_path,
                    body=body,
                    front_matter=front_matter,
                    hash=_hash_bytes(raw),
                    error=error,
                )
            )

        logger.debug("Discovered %d document(s) under %s", len(documents), root_path)
        return ContentTree(root=root_path, documents=documents)


__all__ = ["ContentScanner", "IgnoreRule"]
