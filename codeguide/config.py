"""Site descriptor loading for codeguide (.site.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any, Dict, List, Optional, Tuple

import yaml

CONFIG_FILENAME = ".site.yml"

_TOP_LEVEL_KEYS = {"lang", "title", "description", "base", "dest", "public", "themeConfig"}
_THEME_KEYS = {"navbar", "repo", "docsBranch"}
_NAV_ITEM_KEYS = {"text", "link"}

_GITHUB_URL = "https://github.com"
_DEFAULT_EDIT_BRANCH = "main"


class ConfigError(RuntimeError):
    """Raised when the site descriptor cannot be parsed."""


@dataclass(frozen=True)
class NavEntry:
    """A single navbar item pointing at a document in the content tree."""

    target: str
    label: Optional[str] = None


@dataclass(frozen=True)
class ThemeConfig:
    """Theme-specific settings: navbar, source repository and docs branch."""

    navbar: Tuple[NavEntry, ...] = ()
    repo: Optional[str] = None
    docs_branch: Optional[str] = None


@dataclass(frozen=True)
class SiteConfig:
    """Represents the site-wide settings defined in .site.yml."""

    root: Path
    lang: str = "en-US"
    title: str = ""
    description: str = ""
    base: str = "/"
    dest: str = "docs"
    public: str = "public"
    theme: ThemeConfig = field(default_factory=ThemeConfig)

    @property
    def dest_path(self) -> Path:
        return self.root / self.dest

    @property
    def public_path(self) -> Path:
        return self.root / self.public

    @property
    def repo_url(self) -> Optional[str]:
        """Expand a bare ``owner/name`` repo into a GitHub URL."""
        repo = self.theme.repo
        if not repo:
            return None
        if "://" in repo:
            return repo.rstrip("/")
        return f"{_GITHUB_URL}/{repo.strip('/')}"

    def edit_url(self, document_path: str) -> Optional[str]:
        """Return the "edit this page" link for a document, if a repo is set."""
        repo_url = self.repo_url
        if repo_url is None:
            return None
        branch = self.theme.docs_branch or _DEFAULT_EDIT_BRANCH
        relative = PurePosixPath(document_path.lstrip("/")).as_posix()
        return f"{repo_url}/edit/{branch}/{relative}"

    def to_generator_config(self) -> Dict[str, Any]:
        """Return the descriptor in the shape the site generator consumes."""
        navbar: List[Any] = []
        for entry in self.theme.navbar:
            if entry.label:
                navbar.append({"text": entry.label, "link": entry.target})
            else:
                navbar.append(entry.target)
        theme: Dict[str, Any] = {"navbar": navbar}
        if self.theme.repo:
            theme["repo"] = self.theme.repo
        if self.theme.docs_branch:
            theme["docsBranch"] = self.theme.docs_branch
        return {
            "lang": self.lang,
            "title": self.title,
            "description": self.description,
            "base": self.base,
            "dest": self.dest,
            "public": self.public,
            "themeConfig": theme,
        }


def load_config(config_path: Path) -> SiteConfig:
    """Load the site descriptor from disk."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    if not config_file.exists():
        return SiteConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")
    _reject_unknown(data, _TOP_LEVEL_KEYS, context="site")

    theme_data = data.get("themeConfig")
    if theme_data is None:
        theme_data = {}
    if not isinstance(theme_data, dict):
        raise ConfigError("themeConfig must be a mapping")
    _reject_unknown(theme_data, _THEME_KEYS, context="themeConfig")

    theme = ThemeConfig(
        navbar=_parse_navbar(theme_data.get("navbar")),
        repo=_as_optional_str(theme_data.get("repo"), "themeConfig.repo"),
        docs_branch=_as_optional_str(theme_data.get("docsBranch"), "themeConfig.docsBranch"),
    )

    defaults = SiteConfig(root=root)
    return SiteConfig(
        root=root,
        lang=_as_str(data.get("lang"), "lang", defaults.lang),
        title=_as_str(data.get("title"), "title", defaults.title),
        description=_as_str(data.get("description"), "description", defaults.description),
        base=_as_str(data.get("base"), "base", defaults.base),
        dest=_as_str(data.get("dest"), "dest", defaults.dest),
        public=_as_str(data.get("public"), "public", defaults.public),
        theme=theme,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if not config_path.exists() and config_path.suffix not in {".yml", ".yaml"}:
        # A missing content root, not a missing descriptor file.
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigError(f"{path.name} is not valid UTF-8: {exc.reason} at byte {exc.start}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _reject_unknown(data: Dict[str, Any], allowed: set[str], *, context: str) -> None:
    unknown = sorted(str(key) for key in data if key not in allowed)
    if unknown:
        raise ConfigError(f"Unknown {context} key(s): {', '.join(unknown)}")


def _parse_navbar(value: Any) -> Tuple[NavEntry, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ConfigError("themeConfig.navbar must be a list")
    entries: List[NavEntry] = []
    for index, item in enumerate(value):
        where = f"themeConfig.navbar[{index}]"
        if isinstance(item, str):
            if not item.strip():
                raise ConfigError(f"{where} must not be empty")
            entries.append(NavEntry(target=item.strip()))
            continue
        if isinstance(item, dict):
            _reject_unknown(item, _NAV_ITEM_KEYS, context=where)
            link = _as_optional_str(item.get("link"), f"{where}.link")
            if not link:
                raise ConfigError(f"{where} requires a link")
            label = _as_optional_str(item.get("text"), f"{where}.text")
            entries.append(NavEntry(target=link.strip(), label=label))
            continue
        raise ConfigError(f"{where} must be a string or a {{text, link}} mapping")
    return tuple(entries)


def _as_str(value: Any, key: str, default: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ConfigError(f"{key} must be a string")
    return value


def _as_optional_str(value: Any, key: str) -> Optional[str]:
    if value is None:
        return None
    return _as_str(value, key, "")


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "NavEntry",
    "SiteConfig",
    "ThemeConfig",
    "load_config",
]
