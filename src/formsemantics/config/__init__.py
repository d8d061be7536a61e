"""Configuration package.

Usage:
    from formsemantics.config import get_settings

    settings = get_settings()
    print(settings.semantic_version)
"""

from .settings import SemanticSettings, get_settings, reset_settings

__all__ = ["SemanticSettings", "get_settings", "reset_settings"]
