"""Configuration package with clean public API."""

# Main configuration classes
from .schemas import (
    AppConfig,
    DocumentTemplateConfig,
    LoggingConfig,
    PaymentConfig,
    PrototypeConfig,
)

# Configuration management
from .loader import ConfigurationLoader
from .manager import ConfigurationManager, get_config_manager, reset_config_manager

__all__ = [
    # Main configuration
    'AppConfig',

    # Specific configurations
    'LoggingConfig',
    'PaymentConfig',
    'PrototypeConfig',
    'DocumentTemplateConfig',

    # Configuration management
    'ConfigurationManager',
    'ConfigurationLoader',
    'get_config_manager',
    'reset_config_manager',
]
