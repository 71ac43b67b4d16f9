"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for configuration and the
locale resolver.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from locale_negotiation.configuration import Settings

if TYPE_CHECKING:
    from locale_negotiation.i18n.resolvers import LocaleResolver


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_locale_resolver() -> "LocaleResolver":
    """
    Get application-scoped locale resolver singleton.

    The resolver validates the configured locales when it is built, so a
    misconfiguration surfaces on the first call instead of per request.

    Returns:
        LocaleResolver: Cached resolver built from get_settings().

    Raises:
        ConfigurationError: If the configured locales are empty.
    """
    # resolvers import logging, which imports this module
    from locale_negotiation.i18n.resolvers import LocaleResolver

    return LocaleResolver.from_settings(get_settings())
