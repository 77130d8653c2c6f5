"""Tests for cross-document link checks."""

from __future__ import annotations

from codeguide.validators import WARNING, LinkValidator


def test_link_validator_accepts_documents_assets_and_external_links(site_builder) -> None:
    site_builder.standard_site()
    site_builder.write(
        {
            "architecture/apex.md": """
            # Apex Architecture

            See [style](../code-style/apex.html#naming), [home](/), [top](#layers),
            [docs](https://developer.salesforce.com), ![diagram](./layers.svg)
            and ![logo](/logo.png).
            """,
            "architecture/layers.svg": "<svg/>",
            "public/logo.png": "png",
        }
    )

    assert LinkValidator().validate(site_builder.context()) == []


def test_link_validator_warns_on_broken_and_escaping_links(site_builder) -> None:
    site_builder.standard_site()
    site_builder.write(
        {
            "code-style/apex.md": """
            # Apex Code Style

            [Missing](./javascript.md) [Outside](../../secret.md) [Empty]()
            """,
        }
    )

    issues = LinkValidator().validate(site_builder.context())

    assert [issue.detail for issue in issues] == [
        "Link target not found: ./javascript.md",
        "Link leaves the content tree: ../../secret.md",
        "Empty link target detected",
    ]
    assert all(issue.severity == WARNING for issue in issues)
    assert all(issue.path == "code-style/apex.md" for issue in issues)


def test_link_validator_resolves_assets_in_configured_public_directory(site_builder) -> None:
    site_builder.standard_site()
    site_builder.descriptor("public: static\n")
    site_builder.write(
        {
            "code-style/apex.md": """
            # Apex Code Style

            ![Formatter settings](/images/prettier.png) ![Stale](/images/old.png)
            """,
            "static/images/prettier.png": "png",
            "public/images/old.png": "png",
        }
    )

    issues = LinkValidator().validate(site_builder.context())

    assert [issue.detail for issue in issues] == ["Link target not found: /images/old.png"]
