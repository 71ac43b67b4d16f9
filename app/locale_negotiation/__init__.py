"""Accept-Language locale negotiation.

Example:
    from locale_negotiation import negotiate

    negotiate("fr-FR,en;q=0.8", ["de-DE", "en-US", "fr-FR"], "en-US")  # "fr-FR"
"""

from locale_negotiation.i18n import (
    ConfigurationError,
    LocaleResolver,
    NegotiationError,
    negotiate,
)

__all__ = ["ConfigurationError", "LocaleResolver", "NegotiationError", "negotiate"]
