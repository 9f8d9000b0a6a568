"""Configuration module.

Usage:
    from status_page.config import get_settings

    settings = get_settings()
    print(settings.database_url)
    print(settings.providers)
"""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
