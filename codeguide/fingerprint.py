"""Stable digest of everything a site build consumes."""

from __future__ import annotations

import hashlib
import json

from .config import SiteConfig
from .models import ContentTree

_FINGERPRINT_VERSION = 1


def fingerprint(config: SiteConfig, tree: ContentTree) -> str:
    """Return a SHA-256 digest that changes only when build inputs change."""
    payload = {
        "version": _FINGERPRINT_VERSION,
        "config": config.to_generator_config(),
        "documents": sorted([document.path, document.hash] for document in tree),
    }
    canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


__all__ = ["fingerprint"]
