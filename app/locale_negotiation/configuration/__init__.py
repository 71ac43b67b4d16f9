"""Configuration module - public API.

Centralized configuration using Pydantic BaseSettings.

Exports:
    Settings: Main settings class
    I18nSettings: Locale negotiation settings class
"""

from locale_negotiation.configuration.settings import Settings
from locale_negotiation.configuration.i18n import I18nSettings

__all__ = ["Settings", "I18nSettings"]
