"""
Configuration de l'application.
"""

from portal.infrastructure.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
