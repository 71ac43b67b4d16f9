"""Shared fixtures for locale negotiation tests."""

import pytest

from locale_negotiation.logging import configure_logging
from locale_negotiation.services import providers


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Configure suppressed logging once for the test session."""
    configure_logging()


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Reset cached settings and resolver between tests."""
    providers.get_settings.cache_clear()
    providers.get_locale_resolver.cache_clear()
    yield
    providers.get_settings.cache_clear()
    providers.get_locale_resolver.cache_clear()


@pytest.fixture
def supported_locales():
    """Supported locales from the usage example, in preference order."""
    return [
        "de-DE",
        "en-US",
        "es-ES",
        "fr-CA",
        "fr-FR",
        "nl_BE",
        "nl-NL",
        "pt-BR",
        "pt-PT",
        "ru-RU",
    ]
