"""
Logging setup for FlatTax.

Everything logs through structlog; call configure_logging() once at startup
(the Streamlit page does this) and get_logger(__name__) everywhere else.
"""
import logging
import sys

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(level: str = "INFO", format_json: bool = False) -> None:
    """
    Configure stdlib logging and structlog.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, render JSON lines; otherwise console output
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(level=log_level, stream=sys.stdout, format="%(message)s", force=True)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    return structlog.get_logger(name)
