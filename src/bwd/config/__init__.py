"""
Configuration management module for bwd.

Usage:
    from bwd.config import BwdSettings, settings_provider

    settings = settings_provider.get_settings()
    level = settings.log_level
"""

from bwd.config.settings import BwdSettings, SettingsProvider, settings_provider

__all__ = [
    "BwdSettings",
    "SettingsProvider",
    "settings_provider",
]
