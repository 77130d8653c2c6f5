"""Core data models for the content tree."""

from __future__ import annotations

import posixpath
import re
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any, Dict, Iterable, List, Optional, Set

from .front_matter import sidebar_enabled

INDEX_NAMES = ("README.md", "index.md")

_LINK_PATTERN = re.compile(r"\[([^\]]*)\]\(([^)\s]*)(?:\s+\"[^\"]*\")?\)")
_HEADING_PATTERN = re.compile(r"^#\s+(.+?)\s*#*\s*$")
_EXTERNAL_PREFIXES = ("http://", "https://", "mailto:", "tel:", "//")


def route_for(path: str) -> str:
    """Return the site route a document path is served under."""
    posix = PurePosixPath(path.lstrip("/"))
    parent = posix.parent.as_posix()
    prefix = "/" if parent == "." else f"/{parent}/"
    if posix.name in INDEX_NAMES:
        return prefix
    return f"{prefix}{posix.stem}.html"


def iter_link_targets(markdown: str) -> Iterable[str]:
    """Yield Markdown link targets, skipping fenced code blocks."""
    in_code = False
    for line in markdown.splitlines():
        if line.strip().startswith(("```", "~~~")):
            in_code = not in_code
            continue
        if in_code:
            continue
        for match in _LINK_PATTERN.finditer(line):
            yield match.group(2).strip()


def is_external(target: str) -> bool:
    return target.startswith(_EXTERNAL_PREFIXES)


@dataclass
class ContentDocument:
    """A single Markdown document in the content tree."""

    path: str
    body: str
    front_matter: Dict[str, Any] = field(default_factory=dict)
    hash: str = ""
    error: Optional[str] = None  # unreadable file or malformed front matter

    @property
    def route(self) -> str:
        return route_for(self.path)

    @property
    def title(self) -> str:
        title = self.front_matter.get("title")
        if isinstance(title, str) and title.strip():
            return title.strip()
        in_code = False
        for line in self.body.splitlines():
            stripped = line.strip()
            if stripped.startswith(("```", "~~~")):
                in_code = not in_code
                continue
            if in_code:
                continue
            match = _HEADING_PATTERN.match(stripped)
            if match:
                return match.group(1)
        return PurePosixPath(self.path).stem

    @property
    def shows_sidebar(self) -> bool:
        return sidebar_enabled(self.front_matter)

    @property
    def directory(self) -> str:
        parent = PurePosixPath(self.path).parent.as_posix()
        return "" if parent == "." else parent

    def links(self) -> List[str]:
        return list(iter_link_targets(self.body))


class ContentTree:
    """Normalized view of the Markdown documents under a content root."""

    def __init__(self, root: Path, documents: Iterable[ContentDocument]) -> None:
        self.root = root
        self._documents: Dict[str, ContentDocument] = {}
        for document in sorted(documents, key=lambda doc: doc.path):
            self._documents[document.path] = document

    def __iter__(self):
        return iter(self._documents.values())

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.get(path) is not None

    @property
    def documents(self) -> List[ContentDocument]:
        return list(self._documents.values())

    def get(self, path: str) -> Optional[ContentDocument]:
        """Look up a document by tree-relative or site-absolute path."""
        normalized = posixpath.normpath(path.lstrip("/")) if path.strip("/") else ""
        return self._documents.get(normalized)

    def by_route(self, route: str) -> Optional[ContentDocument]:
        for document in self._documents.values():
            if document.route == route:
                return document
        return None

    def children(self, directory: str) -> List[ContentDocument]:
        """Return the documents directly inside ``directory``."""
        wanted = directory.strip("/")
        return [doc for doc in self._documents.values() if doc.directory == wanted]

    def resolve_target(self, target: str, *, base_dir: str = "") -> Optional[str]:
        """Map a link target to a normalized tree-relative path, or None if it leaves the tree."""
        cleaned = target.split("#", 1)[0].split("?", 1)[0].replace("\\", "/")
        if not cleaned:
            return None
        if cleaned.startswith("/"):
            joined = cleaned.lstrip("/")
        else:
            joined = posixpath.join(base_dir, cleaned)
        trailing_slash = cleaned.endswith("/")
        normalized = posixpath.normpath(joined) if joined else "."
        if normalized == ".":
            normalized = ""
        if normalized == ".." or normalized.startswith("../"):
            return None
        if trailing_slash and normalized:
            normalized += "/"
        return normalized

    def resolve_link(self, document: ContentDocument, target: str) -> Optional[ContentDocument]:
        """Resolve a link found in ``document`` to the document it points at."""
        if not target or target.startswith("#") or is_external(target):
            return None
        normalized = self.resolve_target(target, base_dir=document.directory)
        if normalized is None:
            return None
        for candidate in _candidates(normalized):
            found = self._documents.get(candidate)
            if found is not None:
                return found
        return None

    def reachable_from(self, paths: Iterable[str]) -> Set[str]:
        """Return every document path reachable by following links from ``paths``.

        Entry points may be document paths or routes.
        """
        seen: Set[str] = set()
        pending = []
        for path in paths:
            document = self.get(path) or self.by_route(path)
            if document is not None:
                pending.append(document)
        while pending:
            document = pending.pop()
            if document.path in seen:
                continue
            seen.add(document.path)
            for target in document.links():
                linked = self.resolve_link(document, target)
                if linked is not None and linked.path not in seen:
                    pending.append(linked)
        return seen


def _candidates(normalized: str) -> List[str]:
    if normalized == "" or normalized.endswith("/"):
        directory = normalized.rstrip("/")
        return [posixpath.join(directory, name) for name in INDEX_NAMES]
    if normalized.endswith(".md"):
        return [normalized]
    if normalized.endswith(".html"):
        return [normalized[: -len(".html")] + ".md"]
    return [f"{normalized}.md"] + [posixpath.join(normalized, name) for name in INDEX_NAMES]


__all__ = [
    "INDEX_NAMES",
    "ContentDocument",
    "ContentTree",
    "is_external",
    "iter_link_targets",
    "route_for",
]
