"""Site descriptor and content tree tooling for the Salesforce Code Guide."""

from .config import ConfigError, NavEntry, SiteConfig, ThemeConfig, load_config
from .content_scanner import ContentScanner
from .models import ContentDocument, ContentTree

__all__ = [
    "ConfigError",
    "ContentDocument",
    "ContentScanner",
    "ContentTree",
    "NavEntry",
    "SiteConfig",
    "ThemeConfig",
    "load_config",
]
