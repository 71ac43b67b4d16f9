"""Locale negotiation against a list of supported locales.

Selection runs in three passes over the ranked header candidates:

1. Exact pass: region-qualified candidates must equal a supported locale;
   language-only candidates match any supported locale they prefix.
2. Language pass: every candidate is reduced to its language and matched
   as a prefix, so ``fr-XX`` still selects a supported ``fr-FR``.
3. Default: the caller's default locale.

Supported locales are scanned in the caller's order at every step.
"""

from typing import Optional, Sequence

from locale_negotiation.i18n.exceptions import ConfigurationError
from locale_negotiation.i18n.models import (
    DuplicateTagPolicy,
    MatchPhase,
    NegotiationResult,
)
from locale_negotiation.i18n.parser import parse_accept_language, rank_candidates
from locale_negotiation.logging import get_module_logger

logger = get_module_logger()


def validate_configuration(supported: Sequence[str], default: str) -> None:
    """Check the static negotiation configuration.

    Args:
        supported: Supported locales in preference order.
        default: Fallback locale.

    Raises:
        ConfigurationError: If supported is empty or default is empty.
    """
    if not supported:
        logger.warning("negotiation_misconfigured", reason="empty_supported")
        raise ConfigurationError("empty supported locale list")
    if not default:
        logger.warning("negotiation_misconfigured", reason="empty_default")
        raise ConfigurationError("empty default locale")


def negotiate_with_details(
    header: Optional[str],
    supported: Sequence[str],
    default: str,
    duplicates: DuplicateTagPolicy = DuplicateTagPolicy.COLLAPSE,
) -> NegotiationResult:
    """Select the best supported locale and report how it was chosen.

    Args:
        header: Accept-Language header value, may be empty or None.
        supported: Supported locales in preference order.
        default: Locale returned when nothing matches.
        duplicates: Treatment of tags repeated in the header.

    Returns:
        NegotiationResult with the selected locale and matching pass.

    Raises:
        ConfigurationError: If supported or default is empty.
    """
    validate_configuration(supported, default)

    if not header:
        return NegotiationResult(locale=default, phase=MatchPhase.DEFAULT)

    ranked = rank_candidates(parse_accept_language(header, duplicates))
    log = logger.bind(candidates=len(ranked))

    for candidate in ranked:
        for locale in supported:
            if candidate.tag.matches(locale):
                log.debug("locale_negotiated", locale=locale, phase="exact")
                return NegotiationResult(
                    locale=locale, phase=MatchPhase.EXACT, candidate=candidate
                )

    for candidate in ranked:
        for locale in supported:
            if candidate.tag.matches_language(locale):
                log.debug("locale_negotiated", locale=locale, phase="language")
                return NegotiationResult(
                    locale=locale, phase=MatchPhase.LANGUAGE, candidate=candidate
                )

    log.debug("locale_negotiated", locale=default, phase="default")
    return NegotiationResult(locale=default, phase=MatchPhase.DEFAULT)


def negotiate(
    header: Optional[str],
    supported: Sequence[str],
    default: str,
    duplicates: DuplicateTagPolicy = DuplicateTagPolicy.COLLAPSE,
) -> str:
    """Select the best supported locale for an Accept-Language header.

    Example:
        >>> negotiate("fr-FR,en;q=0.8", ["de-DE", "en-US", "fr-FR"], "en-US")
        'fr-FR'
        >>> negotiate("nl-BE", ["nl-NL"], "en-US")
        'nl-NL'

    Raises:
        ConfigurationError: If supported or default is empty.
    """
    return negotiate_with_details(header, supported, default, duplicates).locale
