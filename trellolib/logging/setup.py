"""Structlog configuration and logger setup.

The library never configures logging on import. Applications call
``configure_logging()`` once at startup; until then structlog's defaults
apply.

Usage:
    from trellolib.logging import configure_logging, get_module_logger

    configure_logging(log_level="DEBUG")

    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from trellolib.configuration import TrelloSettings
from trellolib.logging.formatters import mask_sensitive_data, truncate_large_values


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def configure_logging(
    log_level: Optional[str] = None,
    json_output: Optional[bool] = None,
    settings: Optional[TrelloSettings] = None,
) -> BoundLogger:
    """Configure structured logging for the client.

    Configures structlog with:
    - Context variable merging
    - Credential masking for request parameters
    - Proper exception formatting with stack traces
    - Test environment detection for log suppression

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.log_level if not provided.
        json_output: Render JSON lines instead of the console renderer.
            Defaults to False.
        settings: Settings to read defaults from; read from the environment
            when None

    Returns:
        Configured logger instance
    """
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

    if log_level is None:
        log_level = (settings or TrelloSettings()).log_level

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        mask_sensitive_data(),
        truncate_large_values(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Get a logger instance, bound to ``name`` when given."""
    if name:
        return structlog.stdlib.get_logger(logger_name=name)
    return structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    The logger is resolved on first use, so module level loggers pick up a
    later ``configure_logging()`` call.
    """
    current_frame = inspect.currentframe()
    if current_frame is None:
        return structlog.stdlib.get_logger()

    frame = current_frame.f_back
    module = inspect.getmodule(frame)

    if module:
        module_name = module.__name__
        parts = module_name.split(".")
        return structlog.stdlib.get_logger(
            component=parts[-1], module_path=module_name
        )

    return structlog.stdlib.get_logger(component="unknown")
