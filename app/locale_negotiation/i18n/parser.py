"""Accept-Language header parsing.

Turns a raw header value such as ``"fr-FR,en;q=0.8"`` into normalized,
ranked candidates:

1. Remove all whitespace and split on commas.
2. Split each token at its first ``;`` into a tag and a q-value.
3. Normalize each tag (lowercase language, uppercase region).
4. Stable sort by q-value, highest first.
"""

import re
from typing import Dict, List, Tuple

from locale_negotiation.i18n.models import (
    DuplicateTagPolicy,
    LocaleTag,
    WeightedCandidate,
)

DEFAULT_QUALITY = 1.0

# Leading numeric prefix, the way a loose float cast reads "0.8abc" as 0.8
_NUMERIC_PREFIX = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_quality(text: str) -> float:
    """Parse a q-value leniently.

    Args:
        text: Text following the ``=`` of a ``q=`` parameter.

    Returns:
        The numeric prefix of text as a float, or 0.0 when there is none.
    """
    match = _NUMERIC_PREFIX.match(text)
    if match is None:
        return 0.0
    return float(match.group(0))


def tokenize(header: str) -> List[Tuple[str, float]]:
    """Split a header value into (raw tag, quality) pairs in header order.

    Tokens with an empty tag (e.g. from ``"en,,fr"`` or ``";q=0.5"``) are
    dropped.

    Args:
        header: Raw Accept-Language value.

    Returns:
        List of (raw_tag, quality) tuples.
    """
    compact = "".join(header.split())
    tokens = []
    for token in compact.split(","):
        raw_tag, separator, params = token.partition(";")
        if separator:
            _, equals, value = params.partition("=")
            quality = parse_quality(value) if equals else 0.0
        else:
            quality = DEFAULT_QUALITY
        if raw_tag:
            tokens.append((raw_tag, quality))
    return tokens


def parse_accept_language(
    header: str,
    duplicates: DuplicateTagPolicy = DuplicateTagPolicy.COLLAPSE,
) -> List[WeightedCandidate]:
    """Parse a header into normalized candidates, unsorted.

    Args:
        header: Raw Accept-Language value.
        duplicates: Treatment of tags repeated after normalization.

    Returns:
        Candidates in header order.
    """
    candidates = [
        WeightedCandidate(tag=LocaleTag.parse(raw_tag), quality=quality)
        for raw_tag, quality in tokenize(header)
    ]
    if duplicates == DuplicateTagPolicy.KEEP_ALL:
        return candidates

    # dict keeps first insertion position while later values overwrite
    collapsed: Dict[LocaleTag, WeightedCandidate] = {}
    for candidate in candidates:
        collapsed[candidate.tag] = candidate
    return list(collapsed.values())


def rank_candidates(candidates: List[WeightedCandidate]) -> List[WeightedCandidate]:
    """Order candidates by quality, highest first, keeping ties in order."""
    return sorted(candidates, key=lambda candidate: candidate.quality, reverse=True)
