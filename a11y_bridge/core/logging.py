"""
Logging configuration for the accessibility report bridge.
"""

import logging.config
import sys

import structlog

# HTML snippets can be arbitrarily large; keep log lines bounded.
MAX_LOGGED_VALUE_LENGTH = 500


def truncate_long_values_processor(logger, method_name, event_dict):
    """
    Structlog processor that shortens oversized string values.

    Applies to every string value except the event message itself.
    """
    for key, value in list(event_dict.items()):
        if key == "event" or not isinstance(value, str):
            continue
        if len(value) > MAX_LOGGED_VALUE_LENGTH:
            event_dict[key] = f"{value[:MAX_LOGGED_VALUE_LENGTH]}... [{len(value)} chars]"

    return event_dict


def setup_logging(level: str = "INFO", truncate_values: bool = True) -> None:
    """
    Setup structured logging with structlog.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        truncate_values: Enable the long-value truncation processor (default: True)
    """

    # Configure standard library logging
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        stream=sys.stdout,
        format="%(message)s",
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if truncate_values:
        processors.append(truncate_long_values_processor)

    # JSON renderer last
    processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
