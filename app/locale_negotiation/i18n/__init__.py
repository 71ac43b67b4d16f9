"""i18n - Accept-Language negotiation.

Main components:
- models: LocaleTag, WeightedCandidate, NegotiationResult and enums
- parser: header tokenizing, tag normalization and ranking
- negotiator: negotiate() and the three-pass matching
- resolvers: LocaleResolver with startup-validated configuration
"""

from locale_negotiation.i18n.exceptions import ConfigurationError, NegotiationError
from locale_negotiation.i18n.models import (
    DuplicateTagPolicy,
    LocaleTag,
    MatchPhase,
    NegotiationResult,
    WeightedCandidate,
)
from locale_negotiation.i18n.negotiator import (
    negotiate,
    negotiate_with_details,
    validate_configuration,
)
from locale_negotiation.i18n.parser import (
    parse_accept_language,
    parse_quality,
    rank_candidates,
    tokenize,
)
from locale_negotiation.i18n.resolvers import LocaleResolver

__all__ = [
    "ConfigurationError",
    "NegotiationError",
    "DuplicateTagPolicy",
    "LocaleTag",
    "MatchPhase",
    "NegotiationResult",
    "WeightedCandidate",
    "negotiate",
    "negotiate_with_details",
    "validate_configuration",
    "parse_accept_language",
    "parse_quality",
    "rank_candidates",
    "tokenize",
    "LocaleResolver",
]
