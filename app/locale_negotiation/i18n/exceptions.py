"""Exceptions raised by locale negotiation.

Only configuration problems are errors. Malformed header content never
raises; it degrades to the default locale instead.
"""


class NegotiationError(Exception):
    """Base exception for all locale negotiation errors.

    Example:
        try:
            locale = negotiate(header, supported, default)
        except NegotiationError as e:
            logger.error("negotiation_error", error=str(e))
    """

    pass


class ConfigurationError(NegotiationError):
    """Raised when the supported locales or the default locale are empty.

    Example:
        >>> negotiate("en", [], "en-US")
        Traceback (most recent call last):
        ...
        ConfigurationError: empty supported locale list
    """

    pass
