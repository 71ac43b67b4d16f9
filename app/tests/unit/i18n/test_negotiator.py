"""Tests for locale_negotiation.i18n.negotiator module."""

import pytest

from locale_negotiation.i18n import (
    ConfigurationError,
    DuplicateTagPolicy,
    MatchPhase,
    NegotiationError,
    negotiate,
    negotiate_with_details,
    validate_configuration,
)

SAMPLE_HEADERS = [
    "",
    "fr-FR,en;q=0.8",
    "nl-BE;q=1.0",
    "de-DE,fr-FR",
    "es-419,es;q=0.9",
    "*",
    "x-klingon;q=0.2,ru",
    "en;q=abc, pt ; q=0.1",
]


class TestNegotiateScenarios:
    """End-to-end negotiation scenarios."""

    def test_exact_region_match_wins_by_quality(self):
        """The highest-quality exact match is selected."""
        result = negotiate("fr-FR,en;q=0.8", ["de-DE", "en-US", "fr-FR"], "en-US")
        assert result == "fr-FR"

    def test_higher_quality_ranked_first(self):
        """Candidates are tried in quality order, not header order."""
        result = negotiate("pt-BR;q=0.5,pt-PT;q=0.9", ["pt-BR", "pt-PT"], "pt-PT")
        assert result == "pt-PT"

    def test_higher_quality_listed_first(self):
        """The higher-quality exact match wins when listed first."""
        result = negotiate_with_details(
            "pt-PT;q=0.9,pt-BR;q=0.5", ["pt-BR", "pt-PT"], "pt-PT"
        )
        assert result.locale == "pt-PT"
        assert result.phase is MatchPhase.EXACT

    def test_language_fallback_pass(self):
        """An unsupported region falls back to the language."""
        result = negotiate_with_details("nl-BE;q=1.0", ["nl-NL"], "en-US")
        assert result.locale == "nl-NL"
        assert result.phase is MatchPhase.LANGUAGE
        assert str(result.candidate.tag) == "nl-BE"

    def test_no_match_returns_default(self):
        """The default is returned when neither pass matches."""
        result = negotiate_with_details("de-DE,fr-FR", ["es-ES"], "en-US")
        assert result.locale == "en-US"
        assert result.phase is MatchPhase.DEFAULT
        assert result.candidate is None

    def test_empty_header_returns_default(self):
        """An empty header short-circuits to the default."""
        assert negotiate("", ["en-US"], "en-US") == "en-US"

    def test_empty_supported_raises(self):
        """An empty supported list is a configuration error."""
        with pytest.raises(ConfigurationError):
            negotiate("en", [], "en-US")


class TestNegotiateMatching:
    """Tests for matching details of negotiate()."""

    def test_none_header_returns_default(self):
        """A missing header returns the default."""
        assert negotiate(None, ["de-DE"], "en-US") == "en-US"

    def test_whitespace_header_returns_default(self):
        """A whitespace-only header names no locale."""
        assert negotiate("  \t ", ["de-DE"], "en-US") == "en-US"

    def test_language_candidate_matches_prefix_in_exact_pass(self):
        """A bare language matches a regional supported locale directly."""
        result = negotiate_with_details("de", ["de-DE"], "en-US")
        assert result.locale == "de-DE"
        assert result.phase is MatchPhase.EXACT

    def test_supported_order_breaks_prefix_ties(self):
        """The first supported locale with the prefix wins."""
        assert negotiate("en", ["en-GB", "en-US"], "de-DE") == "en-GB"

    def test_header_order_breaks_quality_ties(self):
        """Equal qualities are tried in header order."""
        header = "fr;q=0.5,de;q=0.5"
        assert negotiate(header, ["de-DE", "fr-FR"], "en-US") == "fr-FR"

    def test_exact_pass_beats_higher_quality_language_fallback(self):
        """Any exact match outranks a language-only fallback."""
        header = "fr-CA,en-US;q=0.5"
        assert negotiate(header, ["en-US", "fr-FR"], "de-DE") == "en-US"

    def test_header_case_is_normalized(self):
        """Header tags are normalized before matching."""
        assert negotiate("FR-fr", ["fr-FR"], "en-US") == "fr-FR"

    def test_supported_locales_compared_verbatim(self, supported_locales):
        """Supported entries are not normalized."""
        assert negotiate("nl-be", supported_locales, "pt-BR") == "nl_BE"

    def test_numeric_region_uses_language_fallback(self):
        """A numeric region only matches through the language pass."""
        result = negotiate_with_details("es-419", ["es-ES"], "en-US")
        assert result.locale == "es-ES"
        assert result.phase is MatchPhase.LANGUAGE

    def test_zero_quality_still_matches(self):
        """q=0 ranks last but is not an exclusion."""
        assert negotiate("de;q=0", ["de-DE"], "en-US") == "de-DE"

    def test_wildcard_matches_nothing(self):
        """'*' is treated as a literal tag."""
        assert negotiate("*", ["de-DE"], "en-US") == "en-US"

    def test_empty_language_does_not_match_everything(self):
        """A tag with an empty language falls through to the default."""
        assert negotiate("-US", ["de-DE"], "en-US") == "en-US"

    def test_supported_accepts_tuple(self):
        """Any sequence works as the supported locales."""
        assert negotiate("pt", ("pt-BR", "pt-PT"), "en-US") == "pt-BR"


class TestDuplicateTags:
    """Tests for repeated tags in one header."""

    HEADER = "en-US,fr-FR;q=0.9,en-us;q=0.1"

    def test_collapse_uses_last_quality(self):
        """By default the last occurrence's quality wins."""
        assert negotiate(self.HEADER, ["en-US", "fr-FR"], "de-DE") == "fr-FR"

    def test_keep_all_uses_each_occurrence(self):
        """KEEP_ALL ranks the first occurrence on its own quality."""
        result = negotiate(
            self.HEADER,
            ["en-US", "fr-FR"],
            "de-DE",
            duplicates=DuplicateTagPolicy.KEEP_ALL,
        )
        assert result == "en-US"


class TestConfigurationErrors:
    """Tests for precondition checks."""

    def test_empty_supported_message(self):
        """Empty supported locales report the supported list."""
        with pytest.raises(ConfigurationError, match="empty supported locale list"):
            negotiate("", [], "en-US")

    def test_empty_default_raises(self):
        """An empty default is rejected even with an empty header."""
        with pytest.raises(ConfigurationError, match="empty default locale"):
            negotiate("", ["en-US"], "")

    def test_empty_default_raises_for_matching_header(self):
        """The default is validated before the header is used."""
        with pytest.raises(ConfigurationError):
            negotiate("en-US", ["en-US"], "")

    def test_supported_checked_before_default(self):
        """With both empty, the supported list is reported."""
        with pytest.raises(ConfigurationError, match="supported"):
            negotiate("en", [], "")

    def test_configuration_error_is_negotiation_error(self):
        """ConfigurationError derives from NegotiationError."""
        with pytest.raises(NegotiationError):
            validate_configuration([], "en-US")

    def test_validate_configuration_accepts_valid(self):
        """Valid configuration passes silently."""
        assert validate_configuration(["en-US"], "en-US") is None


class TestNegotiateProperties:
    """Properties that hold for every input."""

    @pytest.mark.parametrize("header", SAMPLE_HEADERS)
    def test_result_is_supported_or_default(self, header, supported_locales):
        """The result is always a supported locale or the default."""
        result = negotiate(header, supported_locales, "en-GB")
        assert result in set(supported_locales) | {"en-GB"}

    @pytest.mark.parametrize("header", SAMPLE_HEADERS)
    def test_negotiate_is_deterministic(self, header, supported_locales):
        """Identical inputs give identical results."""
        first = negotiate(header, supported_locales, "en-GB")
        second = negotiate(header, supported_locales, "en-GB")
        assert first == second

    def test_negotiate_does_not_mutate_supported(self, supported_locales):
        """The supported list is left untouched."""
        before = list(supported_locales)
        negotiate("ru,de;q=0.2", supported_locales, "en-US")
        assert supported_locales == before
