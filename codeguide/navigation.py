"""Navbar and sidebar models derived from the descriptor and content tree."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List

from .config import SiteConfig
from .models import ContentDocument, ContentTree


class NavigationError(RuntimeError):
    """Raised when a navbar entry does not point at a document."""


@dataclass(frozen=True)
class NavItem:
    """A resolved navbar entry."""

    label: str
    route: str
    path: str


@dataclass(frozen=True)
class SidebarItem:
    """A heading-derived sidebar link."""

    title: str
    anchor: str
    level: int


def resolve_navbar(config: SiteConfig, tree: ContentTree) -> List[NavItem]:
    """Resolve navbar entries to documents, preserving declared order."""
    items: List[NavItem] = []
    for entry in config.theme.navbar:
        document = tree.get(entry.target)
        if document is None:
            document = tree.by_route(entry.target)
        if document is None:
            raise NavigationError(f"Navbar entry points at a missing document: {entry.target}")
        items.append(
            NavItem(label=entry.label or document.title, route=document.route, path=document.path)
        )
    return items


def build_sidebar(document: ContentDocument) -> List[SidebarItem]:
    """Return level two and three headings, or nothing when the sidebar is off."""
    if not document.shows_sidebar:
        return []

    items: List[SidebarItem] = []
    seen: Dict[str, int] = {}
    in_code = False
    for line in document.body.splitlines():
        stripped = line.strip()
        if stripped.startswith(("```", "~~~")):
            in_code = not in_code
            continue
        if in_code:
            continue
        match = re.match(r"^(#{2,3})\s+(.*?)\s*#*$", stripped)
        if not match:
            continue
        title = match.group(2).strip()
        anchor = slugify(title)
        count = seen.get(anchor, 0)
        seen[anchor] = count + 1
        if count:
            anchor = f"{anchor}-{count}"
        items.append(SidebarItem(title=title, anchor=anchor, level=len(match.group(1))))
    return items


def slugify(title: str) -> str:
    """GitHub-style heading anchor."""
    slug = title.strip().lower()
    slug = re.sub(r"[`*~]", "", slug)
    slug = re.sub(r"[^\w\s-]", "", slug)
    return re.sub(r"\s", "-", slug)


__all__ = [
    "NavItem",
    "NavigationError",
    "SidebarItem",
    "build_sidebar",
    "resolve_navbar",
    "slugify",
]
