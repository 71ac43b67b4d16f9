"""Structured logging for locale negotiation, built on structlog.

Importing this package configures nothing; applications call
configure_logging() once at startup.

Public API:
    - configure_logging(): Initialize logging for the application
    - build_processors(): The processor chain configure_logging installs
    - get_module_logger(): Get a logger for the calling module

Processors:
    - add_app_info(): Add app name/version to every entry
    - truncate_large_values(): Limit string lengths
"""

from locale_negotiation.logging.setup import (
    APP_NAME,
    build_processors,
    configure_logging,
    get_module_logger,
)
from locale_negotiation.logging.formatters import (
    add_app_info,
    truncate_large_values,
)

__all__ = [
    "APP_NAME",
    "build_processors",
    "configure_logging",
    "get_module_logger",
    "add_app_info",
    "truncate_large_values",
]
