"""Unified configuration management for the application."""
from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Optional, Type, TypeVar

import pydantic

from patterndemo.config.loader import ConfigurationLoader
from patterndemo.config.schemas import (
    AppConfig,
    LoggingConfig,
    PaymentConfig,
    PrototypeConfig,
)
from patterndemo.domain.core.exceptions import ConfigurationError

T = TypeVar('T')
logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Provides:
    - Type safety through pydantic models
    - JSON / YAML configuration files
    - Environment variable overrides
    - Lazy loading, guarded by a lock
    """

    def __init__(self, config_file: Optional[str] = None, loader: Optional[ConfigurationLoader] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._loader = loader or ConfigurationLoader()

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_data: Dict[str, Any] = {}
        if self._config_file:
            config_data = self._loader.load_from_file(self._config_file)

        config_data = self._loader.apply_environment_overrides(config_data)

        try:
            app_config = AppConfig(**config_data)
        except pydantic.ValidationError as e:
            fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields) from e

        logger.debug("Configuration loaded from %s", self._config_file or "defaults")
        return app_config

    def get_typed(self, config_type: Type[T]) -> T:
        """
        Get a typed configuration section.

        Raises:
            ConfigurationError: If config_type is not a known section
        """
        config_mapping = {
            AppConfig: self.app_config,
            LoggingConfig: self.app_config.logging,
            PaymentConfig: self.app_config.payment,
            PrototypeConfig: self.app_config.prototype,
        }
        if config_type not in config_mapping:
            raise ConfigurationError(f"Unknown configuration type: {config_type.__name__}")
        return config_mapping[config_type]

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key (dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value: Any = self.app_config.model_dump()
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def reload(self) -> None:
        """Reload configuration from sources."""
        with self._lock:
            self._app_config = None


_config_manager: Optional[ConfigurationManager] = None
_config_manager_lock = threading.Lock()


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """
    Get the global configuration manager.

    The first call decides which configuration file is used; later
    arguments are ignored.
    """
    global _config_manager
    if _config_manager is None:
        with _config_manager_lock:
            if _config_manager is None:
                _config_manager = ConfigurationManager(config_file)
    return _config_manager


def reset_config_manager() -> None:
    """
    Reset the global configuration manager.

    This function is primarily for testing purposes.
    """
    global _config_manager
    with _config_manager_lock:
        _config_manager = None
