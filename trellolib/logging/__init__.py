"""Structured logging for the Trello client.

Public API:
    - configure_logging(): Configure structlog for the application
    - get_logger(): Get a logger instance with a specific name
    - get_module_logger(): Get a logger for the calling module

Formatters:
    - mask_sensitive_data(): Processor to redact credentials
    - truncate_large_values(): Processor to limit string lengths

Example:
    from trellolib.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("board_loaded", board_id="b1")
"""

from trellolib.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
)
from trellolib.logging.formatters import (
    SENSITIVE_PATTERNS,
    mask_sensitive_data,
    truncate_large_values,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "get_module_logger",
    "mask_sensitive_data",
    "truncate_large_values",
    "SENSITIVE_PATTERNS",
]
