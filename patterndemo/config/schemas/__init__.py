"""Configuration schemas package."""

from .app_schema import AppConfig
from .demo_schema import DocumentTemplateConfig, PaymentConfig, PrototypeConfig
from .logging_schema import LoggingConfig

__all__ = [
    # Main configuration
    "AppConfig",
    # Logging configuration
    "LoggingConfig",
    # Demo configurations
    "PaymentConfig",
    "PrototypeConfig",
    "DocumentTemplateConfig",
]
