"""Structlog configuration and logger setup.

Configures structlog with environment-aware rendering and provides
module-scoped loggers for the rest of the package.

Usage:
    from localekit.logging import configure_logging, get_module_logger

    # Once, at application startup (the library never does this itself)
    configure_logging()

    logger = get_module_logger()
    logger.info("event_name", key="value")

Dependencies:
    - localekit.configuration.Settings
"""

import inspect
import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from localekit.configuration import Settings
from localekit.configuration import settings as default_settings


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging.

    Args:
        settings: Settings instance to read LOG_LEVEL and production mode
            from. Defaults to the module-level singleton.
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
        is_production: Optional override for production mode. Controls JSON
            vs console output.

    Returns:
        Configured logger instance
    """
    # Suppress all logging during tests
    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)

        # Basic processors are still needed to avoid errors, but nothing is
        # emitted because the root logger level is above CRITICAL
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

    if settings is None:
        settings = default_settings

    prod_mode = is_production if is_production is not None else settings.is_production

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if not prod_mode:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
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


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    Binds ``component`` (last dotted part) and ``module_path`` of the
    calling module. The logger is resolved lazily on first use, so it
    follows whatever configuration the host application applies later.
    Importing this package never configures logging.

    Example:
        # In localekit/resolver.py
        logger = get_module_logger()
        # context: {"component": "resolver", "module_path": "localekit.resolver"}
    """
    current_frame = inspect.currentframe()
    if current_frame is None:
        return structlog.stdlib.get_logger()

    frame = current_frame.f_back
    if frame is None:
        return structlog.stdlib.get_logger()

    module = inspect.getmodule(frame)
    if module:
        module_name = module.__name__
        parts = module_name.split(".")
        context = {
            "component": parts[-1],
            "module_path": module_name,
        }
        return structlog.stdlib.get_logger(**context)

    return structlog.stdlib.get_logger(component="unknown")
