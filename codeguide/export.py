"""Renders the site generator's configuration module from the descriptor."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .config import SiteConfig
from .logging import get_logger

GENERATOR_DIR = ".vuepress"
GENERATOR_CONFIG = "config.js"
_TEMPLATE_NAME = "config.js.j2"

logger = get_logger("export")


def _js_literal(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


def _create_env(templates_dir: Path | None = None) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(templates_dir or Path(__file__).with_name("templates"))),
        autoescape=False,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters["js"] = _js_literal
    return env


def render_generator_config(config: SiteConfig, *, templates_dir: Path | None = None) -> str:
    """Return the generator's ``config.js`` for ``config``."""
    payload = config.to_generator_config()
    template = _create_env(templates_dir).get_template(_TEMPLATE_NAME)
    return template.render(site=payload, theme=payload["themeConfig"])


def write_generator_config(config: SiteConfig, target: Path | None = None) -> bool:
    """Write ``config.js`` if its contents changed; return whether a write happened."""
    target = target or config.root / GENERATOR_DIR / GENERATOR_CONFIG
    rendered = render_generator_config(config)
    if target.exists() and target.read_text(encoding="utf-8") == rendered:
        logger.debug("%s already up to date", target)
        return False
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(rendered, encoding="utf-8")
    logger.debug("Wrote %s", target)
    return True


__all__ = ["GENERATOR_CONFIG", "GENERATOR_DIR", "render_generator_config", "write_generator_config"]
