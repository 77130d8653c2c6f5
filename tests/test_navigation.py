"""Tests for navbar resolution and sidebar building."""

from __future__ import annotations

import pytest

from codeguide.models import ContentDocument
from codeguide.navigation import NavigationError, NavItem, SidebarItem, build_sidebar, resolve_navbar


def test_resolve_navbar_preserves_declared_order(site_builder) -> None:
    site_builder.standard_site()

    navbar = resolve_navbar(site_builder.load(), site_builder.scan())

    assert navbar == [
        NavItem(label="Architecture", route="/architecture/", path="architecture/README.md"),
        NavItem(label="Code Style", route="/code-style/", path="code-style/README.md"),
    ]


def test_resolve_navbar_accepts_routes_and_labels(site_builder) -> None:
    site_builder.standard_site()
    site_builder.descriptor(
        """
        themeConfig:
          navbar:
            - text: Style first
              link: /code-style/
            - /architecture/apex.html
        """
    )

    navbar = resolve_navbar(site_builder.load(), site_builder.scan())

    assert [(item.label, item.path) for item in navbar] == [
        ("Style first", "code-style/README.md"),
        ("Apex Architecture", "architecture/apex.md"),
    ]


def test_resolve_navbar_raises_for_missing_document(site_builder) -> None:
    site_builder.standard_site()
    (site_builder.path() / "code-style" / "README.md").unlink()

    with pytest.raises(NavigationError, match="/code-style/README.md"):
        resolve_navbar(site_builder.load(), site_builder.scan())


def test_build_sidebar_lists_second_and_third_level_headings() -> None:
    document = ContentDocument(
        path="a.md",
        body=(
            "# Title\n\n## Build & Test\n\n### `Naming` Rules\n\n"
            "```\n## inside code\n```\n\n## Build & Test\n#### Too deep\n"
        ),
    )

    assert build_sidebar(document) == [
        SidebarItem(title="Build & Test", anchor="build--test", level=2),
        SidebarItem(title="`Naming` Rules", anchor="naming-rules", level=3),
        SidebarItem(title="Build & Test", anchor="build--test-1", level=2),
    ]


def test_build_sidebar_is_empty_when_suppressed() -> None:
    document = ContentDocument(path="a.md", body="## Section\n", front_matter={"sidebar": False})

    assert build_sidebar(document) == []
