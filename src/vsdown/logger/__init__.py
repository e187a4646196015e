"""Logging utilities for vsdown.

Colored console output, a rotating log file and a QueueHandler /
QueueListener pair so async code never blocks on log I/O.

Usage:
    >>> from vsdown.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Processing %s", version)  # Use %-style formatting

Rules:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Handlers are ONLY attached (via the QueueListener) to the root
       'vsdown' logger; child loggers propagate to it.
    4. Never use f-strings in log calls.
"""

from vsdown.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
)
from vsdown.logger.handlers import ConfigurationError
from vsdown.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    set_console_level,
    setup_logging,
    update_logger_levels,
)

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "set_console_level",
    "setup_logging",
    "update_logger_levels",
]
