"""Locale negotiation models.

Defines the value types produced while parsing an Accept-Language header
and the result of a negotiation.
"""

import re
import string
from dataclasses import dataclass
from enum import Enum
from typing import Optional

REGION_SEPARATOR = "-"

_UPPER_ASCII = re.compile(r"[A-Z]+")

# Case mapping limited to ASCII letters; other characters pass through
_TO_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


class DuplicateTagPolicy(str, Enum):
    """How repeated tags in a single header are treated.

    COLLAPSE keeps one candidate per normalized tag, at the position of its
    first occurrence, carrying the quality of its last occurrence.
    KEEP_ALL keeps every occurrence as its own candidate.
    """

    COLLAPSE = "collapse"
    KEEP_ALL = "keep_all"


class MatchPhase(str, Enum):
    """Which negotiation pass produced the selected locale."""

    EXACT = "exact"
    LANGUAGE = "language"
    DEFAULT = "default"


@dataclass(frozen=True)
class LocaleTag:
    """Normalized locale tag made of a language and an optional region.

    The region is ``None`` when the raw tag had no separator. An empty
    region is kept for a trailing separator (e.g. ``"en-"``) so that the
    tag renders back exactly as it was normalized. Case is normalized on
    construction, whichever way the tag is built.

    Attributes:
        language: Lowercased text before the last separator.
        region: Uppercased text after the last separator, if any.
    """

    language: str
    region: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "language", self.language.translate(_TO_ASCII_LOWER))
        if self.region is not None:
            object.__setattr__(self, "region", self.region.translate(_TO_ASCII_UPPER))

    @classmethod
    def parse(cls, raw: str) -> "LocaleTag":
        """Split a raw tag from a header at its last separator.

        Only ASCII letters change case; ``"de-ß"`` keeps its region as is.

        Args:
            raw: Tag text (e.g. "en-us", "DE", "fr-CA").

        Returns:
            LocaleTag with lowercase language and uppercase region.
        """
        language, separator, region = raw.rpartition(REGION_SEPARATOR)
        if not separator:
            return cls(language=raw)
        return cls(language=language, region=region)

    def __str__(self) -> str:
        if self.region is None:
            return self.language
        return f"{self.language}{REGION_SEPARATOR}{self.region}"

    @property
    def is_region_qualified(self) -> bool:
        """True when the tag carries a region of uppercase ASCII letters."""
        return self.region is not None and bool(_UPPER_ASCII.fullmatch(self.region))

    def matches(self, supported: str) -> bool:
        """Check a supported locale against this tag at the tag's own precision.

        Region-qualified tags require exact equality. Anything else is
        treated as a language range and matched as a literal prefix, so
        ``de`` matches ``de-DE``.

        Args:
            supported: Supported locale string, compared verbatim.

        Returns:
            True if the supported locale satisfies this tag.
        """
        tag = str(self)
        if self.is_region_qualified:
            return supported == tag
        return bool(tag) and supported.startswith(tag)

    def matches_language(self, supported: str) -> bool:
        """Check a supported locale against the language part only.

        An empty language (e.g. from ``"-US"``) matches nothing.
        """
        return bool(self.language) and supported.startswith(self.language)


@dataclass(frozen=True)
class WeightedCandidate:
    """One entry of an Accept-Language header after normalization.

    Attributes:
        tag: Normalized locale tag.
        quality: Parsed q-value. Not clamped to [0, 1].
    """

    tag: LocaleTag
    quality: float = 1.0


@dataclass(frozen=True)
class NegotiationResult:
    """Outcome of a negotiation.

    Attributes:
        locale: Selected locale, either a supported entry or the default.
        phase: Pass that selected the locale.
        candidate: Header candidate that matched, None for the default.
    """

    locale: str
    phase: MatchPhase
    candidate: Optional[WeightedCandidate] = None
