"""Structured logging infrastructure."""

from .logger import get_logger, is_configured, setup_logging

__all__: list[str] = ["get_logger", "setup_logging", "is_configured"]
