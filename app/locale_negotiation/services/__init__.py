"""Service providers - public API."""

from locale_negotiation.services.providers import get_locale_resolver, get_settings

__all__ = ["get_settings", "get_locale_resolver"]
