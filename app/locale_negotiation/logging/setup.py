"""Structlog configuration and logger setup.

Usage:
    from locale_negotiation.logging import configure_logging, get_module_logger

    # Configure logging at app startup
    configure_logging()

    # Get a logger for your module
    logger = get_module_logger()
    logger.info("event_name", key="value")

Dependencies:
    - locale_negotiation.services.providers.get_settings
"""

import inspect
import logging
import sys
from typing import Any, Callable, Optional, Sequence

import structlog
from structlog.stdlib import BoundLogger

from locale_negotiation.configuration import Settings
from locale_negotiation.logging.formatters import add_app_info, truncate_large_values
from locale_negotiation.services.providers import get_settings

APP_NAME = "locale-negotiation"

Processor = Callable[[Any, str, dict], dict]


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    settings: Optional[Settings] = None,
    extra_processors: Optional[Sequence[Processor]] = None,
) -> BoundLogger:
    """Configure structured logging.

    Configures structlog with context variable merging, ISO timestamps,
    call-site information, truncation of oversized values (header values
    come straight from clients) and environment-aware rendering.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        is_production: Optional override for production mode. Defaults to
            settings.is_production. Controls JSON vs console output.
        settings: Settings to read defaults from. Defaults to get_settings().
        extra_processors: Processors inserted before the renderer.

    Returns:
        Configured logger instance

    Example:
        logger = configure_logging(log_level="DEBUG", is_production=False)
    """
    # Suppress all logging during tests
    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    settings = settings or get_settings()
    prod_mode = is_production if is_production is not None else settings.is_production

    structlog.configure(
        processors=build_processors(settings, prod_mode, extra_processors),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


def build_processors(
    settings: Settings,
    is_production: bool,
    extra_processors: Optional[Sequence[Processor]] = None,
) -> list:
    """Build the structlog processor chain used by configure_logging.

    Every entry carries the application name and settings.GIT_SHA as its
    version. The chain ends with a JSON renderer in production and a
    console renderer otherwise.
    """
    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        add_app_info(APP_NAME, settings.GIT_SHA),
        truncate_large_values(),
    ]
    processors.extend(extra_processors or [])

    if not is_production:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())
    return processors


def get_module_logger() -> Any:
    """Get a logger for the calling module with full path context.

    The logger is a lazy structlog proxy: nothing is configured on import,
    and the configuration active at the time of each call is used.

    Returns:
        Logger bound with ``component`` (last module path segment) and
        ``module_path``.

    Example:
        # In locale_negotiation/i18n/negotiator.py
        logger = get_module_logger()
        # context: {"component": "negotiator", "module_path": "locale_negotiation.i18n.negotiator"}
    """
    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(frame) if frame is not None else None
    if module is None:
        return structlog.get_logger(component="unknown")

    module_name = module.__name__
    return structlog.get_logger(
        component=module_name.split(".")[-1],
        module_path=module_name,
    )
