"""
Structured Logging

All modules log through structlog with the same processor chain, so that
fetch failures and fallback substitutions show up as JSON events with
the tab id and reason attached.

Only operational events are logged. Blank cells and unrecognized rows
are normal in a hand-edited spreadsheet and are never logged.
"""

import logging
import sys

import structlog


_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Configure stdlib logging and structlog (idempotent)."""
    global _configured
    if _configured:
        return

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a named structured logger. Configuration is bound lazily on first use."""
    return structlog.get_logger(name)
