"""Front matter parsing and per-document flag checks."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Tuple

import yaml

_DELIMITER = "---"

_SIDEBAR_MODES = {"auto", "heading"}

# flag -> accepted python types
_FLAG_TYPES: Dict[str, Tuple[type, ...]] = {
    "sidebar": (bool, str),
    "title": (str,),
    "description": (str,),
    "home": (bool,),
    "navbar": (bool,),
    "editLink": (bool,),
    "lastUpdated": (bool,),
    "prev": (bool, str),
    "next": (bool, str),
    "lang": (str,),
}


class FrontMatterError(ValueError):
    """Raised when a document's front matter block is malformed."""


def split_front_matter(text: str) -> Tuple[Dict[str, Any], str]:
    """Split ``text`` into its front matter mapping and the remaining body."""
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    if normalized.startswith("\ufeff"):
        normalized = normalized[1:]
    lines = normalized.split("\n")
    if not lines or lines[0].strip() != _DELIMITER:
        return {}, normalized

    for index in range(1, len(lines)):
        if lines[index].strip() == _DELIMITER:
            block = "\n".join(lines[1:index])
            body = "\n".join(lines[index + 1 :])
            return _load_block(block), body
    raise FrontMatterError("Front matter block is not terminated")


def _load_block(block: str) -> Dict[str, Any]:
    if not block.strip():
        return {}
    try:
        loaded = yaml.safe_load(block)
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"Invalid front matter: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise FrontMatterError("Front matter must be a mapping")
    return loaded


def check_flags(flags: Mapping[str, Any]) -> List[str]:
    """Return a description of every unknown or wrongly typed flag."""
    problems: List[str] = []
    for key, value in flags.items():
        expected = _FLAG_TYPES.get(str(key))
        if expected is None:
            problems.append(f"Unknown front matter flag: {key}")
            continue
        if not isinstance(value, expected):
            names = " or ".join(kind.__name__ for kind in expected)
            problems.append(f"Front matter flag {key!r} must be {names}")
            continue
        if key == "sidebar" and isinstance(value, str) and value not in _SIDEBAR_MODES:
            problems.append(
                f"Front matter flag 'sidebar' must be a boolean or one of {sorted(_SIDEBAR_MODES)}"
            )
    return problems


def sidebar_enabled(flags: Mapping[str, Any]) -> bool:
    """A sidebar is shown unless the document sets ``sidebar: false``."""
    return flags.get("sidebar", True) is not False


__all__ = ["FrontMatterError", "check_flags", "sidebar_enabled", "split_front_matter"]
