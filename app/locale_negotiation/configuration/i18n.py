"""Locale negotiation settings."""

from typing import List, Literal

from pydantic import Field

from locale_negotiation.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Static locale negotiation configuration.

    Validated once when a LocaleResolver is built from it, not per request.

    Environment Variables:
        I18N_SUPPORTED_LOCALES: JSON list of supported locales in preference
            order (default: ["en-US"])
        I18N_DEFAULT_LOCALE: Locale used when nothing matches (default: en-US)
        I18N_DUPLICATE_TAG_POLICY: 'collapse' or 'keep_all' (default: collapse)

    Example:
        ```python
        from locale_negotiation.services import get_settings

        settings = get_settings()
        supported = settings.i18n.supported_locales
        ```
    """

    supported_locales: List[str] = Field(
        default_factory=lambda: ["en-US"],
        alias="I18N_SUPPORTED_LOCALES",
        description="Supported locales, in preference order",
    )
    default_locale: str = Field(
        default="en-US",
        alias="I18N_DEFAULT_LOCALE",
        description="Fallback locale when no header candidate matches",
    )
    duplicate_tag_policy: Literal["collapse", "keep_all"] = Field(
        default="collapse",
        alias="I18N_DUPLICATE_TAG_POLICY",
        description="Treatment of tags repeated in one Accept-Language header",
    )
