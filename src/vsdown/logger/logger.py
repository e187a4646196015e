"""Main logger module providing the public API functions.

- setup_logging(): configure the QueueHandler architecture once
- get_logger(): module-level logger access
- set_console_level(): adjust console verbosity at runtime
- update_logger_levels(): apply levels read from settings.conf
- flush_all_handlers(): ensure pending records are written
- clear_logger_state(): reset everything for tests
"""

import atexit
import contextlib
import logging
import os
import time
from logging.handlers import RotatingFileHandler
from pathlib import Path

from vsdown.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_DIR_ENV_VAR,
    LOG_FILE_NAME,
)
from vsdown.logger.handlers import ROOT_LOGGER_NAME, setup_root_logger
from vsdown.logger.state import get_state


def load_log_settings() -> tuple[str, str, Path]:
    """Return bootstrap console level, file level and log file path.

    The log directory defaults to ``~/.config/vsdown/logs`` and can be
    redirected with the ``VSDOWN_LOG_DIR`` environment variable (the
    test suite does this so runs never touch the real log).
    """
    env_log_dir = os.getenv(LOG_DIR_ENV_VAR)
    if env_log_dir:
        log_dir = Path(env_log_dir).expanduser()
    else:
        log_dir = Path.home() / ".config" / "vsdown" / "logs"
    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, log_dir / LOG_FILE_NAME


def flush_all_handlers() -> None:
    """Wait for the queue to drain and flush every listener handler."""
    state = get_state()
    if state.queue_listener is None or state.log_queue is None:
        return

    deadline = time.monotonic() + 5.0
    while not state.log_queue.empty() and time.monotonic() < deadline:
        time.sleep(0.01)

    for handler in state.queue_listener.handlers:
        with contextlib.suppress(OSError, ValueError):
            handler.flush()


def _cleanup_logging() -> None:
    """Stop the QueueListener on interpreter exit."""
    state = get_state()
    if state.queue_listener is not None:
        # stop() drains the queue before joining the thread
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Configure logging once and return the requested logger.

    Args:
        name: Logger name, typically __name__
        console_level: Console log level ("DEBUG", "INFO", ...)
        file_level: File log level
        log_file: Path to log file
        enable_file_logging: Whether to enable file logging

    Returns:
        Logger instance

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            cfg_console, cfg_file, cfg_path = load_log_settings()
            setup_root_logger(
                state,
                console_level or cfg_console,
                file_level or cfg_file,
                log_file or cfg_path,
                enable_file_logging,
            )

    return logging.getLogger(name)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a logger, initializing the root logger on first use.

    Usage:
        >>> logger = get_logger(__name__)
        >>> logger.info("Installing %s", version)

    """
    return setup_logging(name=name)


def _iter_handlers() -> list[logging.Handler]:
    state = get_state()
    if state.queue_listener is None:
        return []
    return list(state.queue_listener.handlers)


def set_console_level(level: str) -> None:
    """Set the console handler level (e.g. "DEBUG" for --verbose)."""
    console_level = getattr(logging, level.upper(), logging.INFO)
    for handler in _iter_handlers():
        if not isinstance(handler, RotatingFileHandler):
            handler.setLevel(console_level)


def update_logger_levels(console_level: str, file_level: str) -> None:
    """Apply console and file levels, typically read from settings.conf.

    Only handler levels change; handlers are never added or removed.
    """
    set_console_level(console_level)
    resolved_file_level = getattr(logging, file_level.upper(), logging.INFO)
    for handler in _iter_handlers():
        if isinstance(handler, RotatingFileHandler):
            handler.setLevel(resolved_file_level)


def clear_logger_state() -> None:
    """Clear global logger state. Intended for tests only.

    Stops the QueueListener and closes every handler on ``vsdown``
    loggers so the next get_logger() configures the root again.
    """
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            state.queue_listener.stop()
            for handler in state.queue_listener.handlers:
                handler.close()
            state.queue_listener = None

        state.log_queue = None
        state.root_initialized = False

        for logger_name in list(logging.Logger.manager.loggerDict):
            if logger_name.startswith(ROOT_LOGGER_NAME):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    handler.close()
                    log_instance.removeHandler(handler)
