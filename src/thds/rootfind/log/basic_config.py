"""Console logging for applications that have not configured logging themselves.

Importing thds.rootfind.log applies this configuration only if the root logger
has no handlers yet.
"""

import logging
import logging.config

from .kw_formatter import ThdsCompactFormatter

_BASE_LOG_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {"default": {"()": ThdsCompactFormatter}},
    "handlers": {"console": {"class": "logging.StreamHandler", "formatter": "default"}},
    "root": {"handlers": ["console"]},
}


def configure_console_logging() -> bool:
    """Returns True if a console handler was installed."""
    if logging.getLogger().hasHandlers():
        return False
    logging.config.dictConfig(_BASE_LOG_CONFIG)
    return True


configure_console_logging()
