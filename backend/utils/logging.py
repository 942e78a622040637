"""Structured logging setup for the land claim app."""

import logging
from typing import Optional, Dict, Any
from pathlib import Path

# Fields every record carries so format strings may reference them.
DEFAULT_CONTEXT_FIELDS = ("session_id", "component")


class ContextFilter(logging.Filter):
    """Attach session context (session id, component) to log records."""

    def __init__(self):
        super().__init__()
        self.context: Dict[str, Any] = {}

    def filter(self, record: logging.LogRecord) -> bool:
        for key in DEFAULT_CONTEXT_FIELDS:
            if not hasattr(record, key):
                setattr(record, key, "-")
        for key, value in self.context.items():
            setattr(record, key, value)
        return True

    def set_context(self, **kwargs):
        self.context.update(kwargs)

    def clear_context(self):
        self.context.clear()


_context_filter = ContextFilter()


def setup_logging(
    level: str = "INFO",
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure the root logger for the Streamlit app or the API server.

    Calling it again replaces previously installed handlers, which matters
    under Streamlit where the script body re-runs on every interaction.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Format string for log messages
        log_file: Optional path to log file

    Returns:
        Configured root logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(_context_filter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(_context_filter)
        root_logger.addHandler(file_handler)

    return root_logger


def setup_logging_from_config(logging_config) -> logging.Logger:
    """Configure logging from a ``LoggingConfig`` section."""
    return setup_logging(
        level=logging_config.level,
        log_format=logging_config.format,
        log_file=logging_config.file or None,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def set_context(**kwargs):
    """
    Set context fields for all subsequent log messages.

    Example:
        set_context(session_id="3f2a9c", component="server")
        logger.info("Claim submitted")  # Will include session_id and component

    Args:
        **kwargs: Context key-value pairs
    """
    _context_filter.set_context(**kwargs)


def clear_context():
    _context_filter.clear_context()

