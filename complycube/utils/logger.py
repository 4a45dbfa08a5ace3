# complycube/utils/logger.py

"""
Structured Logging Configuration (structlog).

Provides a centralized logger instance configured for structured,
machine-readable (JSON) or human-readable (console) output. Every
ComplyCube request and its outcome is logged through here.
"""

import sys
import logging

import structlog

from structlog.processors import EventRenamer, dict_tracebacks
from structlog.processors import StackInfoRenderer
from structlog.processors import CallsiteParameterAdder
from structlog.processors import CallsiteParameter
from structlog.stdlib import add_logger_name, add_log_level


from config.settings import get_settings


def key_stripper(keys):
    def processor(logger, method_name, event_dict):
        for key in keys:
            event_dict.pop(key, None)
        return event_dict
    return processor

# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

def configure_logging():
    """
    Configures structlog to format logs based on settings.

    ``log_format=text`` renders coloured console output when attached to a
    terminal; everything else is rendered as JSON.
    """
    settings = get_settings()

    use_console = settings.log_format == "text" and sys.stderr.isatty()

    shared_processors = [
        structlog.processors.TimeStamper(fmt="iso"),
        # e.g. 'CompanyLookupClient'
        add_logger_name,
        add_log_level,
        structlog.processors.format_exc_info,
        StackInfoRenderer(),
        CallsiteParameterAdder(parameters=[
            CallsiteParameter.PATHNAME,
            CallsiteParameter.LINENO,
            CallsiteParameter.FUNC_NAME,
        ]),
        EventRenamer("message"),
        key_stripper(keys=['_record', '_from_structlog']),
        dict_tracebacks,
    ]

    if use_console:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True, sort_keys=True)
        ]
    else:
        processors = shared_processors + [
            structlog.processors.JSONRenderer(sort_keys=True)
        ]

    # stderr keeps CLI output (tables, --json dumps) on stdout clean
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=settings.log_level.upper(),
    )

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Returns a configured structlog logger instance.

    Args:
        name: The name of the logger (e.g., the class name).
    """
    global _logging_configured
    if not _logging_configured:
        configure_logging()
        _logging_configured = True

    return structlog.get_logger(name)

# Initial configuration state
_logging_configured = False
