"""Tests for codeguide.config."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from codeguide.config import ConfigError, NavEntry, SiteConfig, ThemeConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, SiteConfig)
    assert config.root == tmp_path.resolve()
    assert config.lang == "en-US"
    assert config.title == ""
    assert config.base == "/"
    assert config.dest == "docs"
    assert config.public == "public"
    assert config.theme == ThemeConfig()


def test_load_config_parses_expected_fields(site_builder) -> None:
    site_builder.descriptor()

    config = site_builder.load()

    assert config.root == site_builder.path().resolve()
    assert config.title == "Example Guide"
    assert config.description == "Example guidelines"
    assert config.base == "/example-guide/"
    assert config.dest_path == config.root / "docs"
    assert config.public_path == config.root / "public"
    assert config.theme.navbar == (
        NavEntry(target="/architecture/README.md"),
        NavEntry(target="/code-style/README.md"),
    )
    assert config.theme.repo == "example/example-guide"
    assert config.theme.docs_branch == "gh-pages"


def test_load_config_accepts_descriptor_file_path(site_builder) -> None:
    descriptor = site_builder.descriptor()

    assert load_config(descriptor).title == "Example Guide"


def test_load_config_accepts_labelled_navbar_items(site_builder) -> None:
    site_builder.descriptor(
        """
        themeConfig:
          navbar:
            - text: Architecture
              link: /architecture/
            - /code-style/README.md
        """
    )

    navbar = site_builder.load().theme.navbar

    assert navbar[0] == NavEntry(target="/architecture/", label="Architecture")
    assert navbar[1] == NavEntry(target="/code-style/README.md")


@pytest.mark.parametrize(
    "descriptor, message",
    [
        ("- just\n- a list\n", "mapping at the root"),
        ("titel: Typo\n", "Unknown site key"),
        ("themeConfig:\n  sidebar: auto\n", "Unknown themeConfig key"),
        ("themeConfig:\n  navbar: /architecture/\n", "must be a list"),
        ("themeConfig:\n  navbar:\n    - text: Missing link\n", "requires a link"),
        ("themeConfig:\n  navbar:\n    - 42\n", "string or a {text, link} mapping"),
        ("title: [not, a, string]\n", "title must be a string"),
        ("base: true\n", "base must be a string"),
        ("base: 1\n", "base must be a string"),
        ("dest: 3.5\n", "dest must be a string"),
        ("themeConfig:\n  docsBranch: 2024\n", "themeConfig.docsBranch must be a string"),
        ("title: 'unterminated\n", "Failed to parse"),
    ],
)
def test_load_config_rejects_malformed_descriptors(site_builder, descriptor: str, message: str) -> None:
    site_builder.descriptor(descriptor)

    with pytest.raises(ConfigError) as excinfo:
        site_builder.load()
    assert message in str(excinfo.value)


def test_site_config_is_immutable(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    with pytest.raises(FrozenInstanceError):
        config.title = "Changed"  # type: ignore[misc]


def test_repo_url_and_edit_url(site_builder) -> None:
    site_builder.descriptor()
    config = site_builder.load()

    assert config.repo_url == "https://github.com/example/example-guide"
    assert (
        config.edit_url("/code-style/apex.md")
        == "https://github.com/example/example-guide/edit/gh-pages/code-style/apex.md"
    )


def test_edit_url_is_none_without_repo(tmp_path: Path) -> None:
    assert load_config(tmp_path).edit_url("README.md") is None


def test_repo_url_keeps_full_urls(tmp_path: Path) -> None:
    config = SiteConfig(root=tmp_path, theme=ThemeConfig(repo="https://gitlab.com/team/guide/"))

    assert config.repo_url == "https://gitlab.com/team/guide"
    assert config.edit_url("README.md") == "https://gitlab.com/team/guide/edit/main/README.md"


def test_to_generator_config_uses_generator_key_names(site_builder) -> None:
    site_builder.descriptor(
        """
        title: Guide
        themeConfig:
          navbar:
            - text: Style
              link: /code-style/
        """
    )

    payload = site_builder.load().to_generator_config()

    assert payload == {
        "lang": "en-US",
        "title": "Guide",
        "description": "",
        "base": "/",
        "dest": "docs",
        "public": "public",
        "themeConfig": {"navbar": [{"text": "Style", "link": "/code-style/"}]},
    }


def test_load_config_rejects_undecodable_descriptor(site_builder) -> None:
    descriptor = site_builder.descriptor()
    descriptor.write_bytes(b"title: Caf\xe9 Guide\n")

    with pytest.raises(ConfigError) as excinfo:
        site_builder.load()
    assert ".site.yml is not valid UTF-8" in str(excinfo.value)
