"""Locale resolution for incoming requests.

Wraps negotiation with a fixed, pre-validated configuration so callers
check their supported locales once at startup and then resolve a locale
per request from the Accept-Language header value.
"""

from typing import Optional, Sequence

import structlog

from locale_negotiation.configuration import Settings
from locale_negotiation.i18n.models import DuplicateTagPolicy, NegotiationResult
from locale_negotiation.i18n.negotiator import (
    negotiate_with_details,
    validate_configuration,
)

logger = structlog.get_logger(component="i18n.resolver")


class LocaleResolver:
    """Resolves the locale for a request from its Accept-Language header.

    Example:
        resolver = LocaleResolver(["de-DE", "en-US", "fr-FR"], "en-US")
        resolver.resolve_from_header("fr-FR,en;q=0.8")  # "fr-FR"
    """

    def __init__(
        self,
        supported_locales: Sequence[str],
        default_locale: str,
        duplicates: DuplicateTagPolicy = DuplicateTagPolicy.COLLAPSE,
    ):
        """Initialize and validate the resolver configuration.

        Args:
            supported_locales: Supported locales in preference order.
            default_locale: Fallback locale when no preference matches.
            duplicates: Treatment of tags repeated in a header.

        Raises:
            ConfigurationError: If supported_locales or default_locale is empty.
        """
        validate_configuration(supported_locales, default_locale)
        self.supported_locales = tuple(supported_locales)
        self.default_locale = default_locale
        self.duplicates = duplicates
        self.log = logger.bind(default_locale=default_locale)

    @classmethod
    def from_settings(cls, settings: Settings) -> "LocaleResolver":
        """Build a resolver from the i18n section of the settings."""
        return cls(
            supported_locales=settings.i18n.supported_locales,
            default_locale=settings.i18n.default_locale,
            duplicates=DuplicateTagPolicy(settings.i18n.duplicate_tag_policy),
        )

    def resolve(self, accept_language: Optional[str]) -> NegotiationResult:
        """Resolve a header value, reporting which pass selected the locale."""
        result = negotiate_with_details(
            accept_language,
            self.supported_locales,
            self.default_locale,
            self.duplicates,
        )
        self.log.debug(
            "resolved_from_header",
            locale=result.locale,
            phase=result.phase.value,
            accept_language=accept_language,
        )
        return result

    def resolve_from_header(self, accept_language: Optional[str]) -> str:
        """Resolve locale from an HTTP Accept-Language header value.

        Args:
            accept_language: Accept-Language header value, may be None.

        Returns:
            A supported locale, or the default locale if none match.
        """
        return self.resolve(accept_language).locale
