import os
import sys
import logging
import structlog
from logging.handlers import RotatingFileHandler
from typing import Optional

from patterndemo.config.schemas.logging_schema import LoggingConfig

_configured = False


class DetailedFormatter(logging.Formatter):
    """Formatter that adds method name and line number to the record."""

    def format(self, record):
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging configuration. If None, the LoggingConfig defaults are used.
    Returns:
        Configured structlog logger instance.
    """
    global _configured
    logging_config = config or LoggingConfig()

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, logging_config.level))

    # Configure handlers
    handlers = []

    if logging_config.destination in ("file", "both"):
        log_file = os.path.expandvars(logging_config.file_path)
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=logging_config.max_size_mb * 1024 * 1024,
            backupCount=logging_config.backup_count
        )
        file_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
        handlers.append(file_handler)

    if logging_config.destination in ("stdout", "both"):
        # console logs go to stderr, stdout carries command output
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    renderer = (
        structlog.processors.JSONRenderer()
        if logging_config.json_format
        else structlog.processors.KeyValueRenderer(key_order=["event"])
    )

    # Configure structlog
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
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    _configured = True

    logger = structlog.get_logger("patterndemo")
    logger.debug(
        "Logging configured",
        log_level=logging_config.level,
        log_destination=logging_config.destination,
    )
    return logger


def is_configured() -> bool:
    return _configured


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger for a module.

    Logging is configured with defaults on first use so that library code
    never falls back to structlog's print logger.
    """
    if not _configured:
        setup_logging()
    return structlog.get_logger(name)
