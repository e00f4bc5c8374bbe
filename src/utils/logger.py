"""Logging configuration and utilities."""

import logging
import logging.handlers
import os
from pathlib import Path
from config.settings import settings

# Loggers created through get_logger, so console output can be silenced later
_configured_loggers = set()
_console_suppressed = False


class EndpointContextFilter(logging.Filter):
    """Filter to add the polled endpoint to log records."""

    def __init__(self):
        super().__init__()
        self.endpoint = None

    def set_endpoint_context(self, endpoint: str):
        """Set the endpoint context for this filter."""
        self.endpoint = endpoint

    def filter(self, record):
        """Add endpoint context to the log record."""
        record.endpoint = self.endpoint or '-'
        return True


def get_logger(name: str, endpoint: str = None) -> logging.Logger:
    """Get configured logger instance with optional endpoint context."""
    logger = logging.getLogger(name)

    if not logger.handlers:
        # Configure logger
        level = getattr(logging, settings.get('logging.level', 'INFO').upper())
        logger.setLevel(level)
        logger.propagate = False

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - [%(endpoint)s] - %(levelname)s - %(message)s'
        )

        # Console handler
        if not _console_suppressed:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(level)
            console_handler.setFormatter(formatter)
            console_handler.addFilter(EndpointContextFilter())
            logger.addHandler(console_handler)

        # File handler
        log_file = settings.get('logging.file', 'logs/traffic_dashboard.log')
        log_dir = os.path.dirname(log_file)
        if log_dir:
            Path(log_dir).mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=settings.get('logging.max_bytes', 10485760),
            backupCount=settings.get('logging.backup_count', 5)
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(EndpointContextFilter())
        logger.addHandler(file_handler)

        _configured_loggers.add(name)

    if endpoint:
        update_logger_endpoint_context(logger, endpoint)

    return logger


def update_logger_endpoint_context(logger: logging.Logger, endpoint: str):
    """Update the endpoint context for an existing logger."""
    for handler in logger.handlers:
        for filter_obj in handler.filters:
            if isinstance(filter_obj, EndpointContextFilter):
                filter_obj.set_endpoint_context(endpoint)


def suppress_console_logging():
    """Drop console handlers so log lines do not draw over the TUI.

    File logging is untouched. Loggers created afterwards skip the console
    handler entirely.
    """
    global _console_suppressed
    _console_suppressed = True

    for name in _configured_loggers:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            if type(handler) is logging.StreamHandler:
                logger.removeHandler(handler)
