"""Configuration loading from files and environment variables."""
import copy
import json
import os
from typing import Any, Dict, Tuple

import yaml

from patterndemo.domain.core.exceptions import ConfigurationError

ENV_PREFIX = "PATTERNDEMO_"

# Environment variable -> nested configuration path
ENV_MAPPINGS: Dict[str, Tuple[str, ...]] = {
    f"{ENV_PREFIX}LOG_LEVEL": ("logging", "level"),
    f"{ENV_PREFIX}LOG_DESTINATION": ("logging", "destination"),
    f"{ENV_PREFIX}LOG_FILE": ("logging", "file_path"),
    f"{ENV_PREFIX}ENVIRONMENT": ("environment",),
    f"{ENV_PREFIX}CURRENCY_SYMBOL": ("payment", "currency_symbol"),
    f"{ENV_PREFIX}ALLOW_NEGATIVE_AMOUNTS": ("payment", "allow_negative_amounts"),
}


class ConfigurationLoader:
    """
    Loads raw configuration dictionaries.

    Handles:
    - JSON and YAML configuration files
    - Environment variable overrides (highest priority)
    - ${VAR} and ${VAR:default} interpolation in string values
    """

    def load_from_file(self, config_path: str) -> Dict[str, Any]:
        """
        Load configuration from a .json, .yaml or .yml file.

        Raises:
            ConfigurationError: If the file is missing, unreadable or malformed
        """
        if not os.path.exists(config_path):
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        _, extension = os.path.splitext(config_path)
        try:
            with open(config_path, 'r') as f:
                if extension.lower() in ('.yaml', '.yml'):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping, got {type(data).__name__}"
            )
        return self._interpolate_values(data)

    def apply_environment_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Return a copy of config with environment overrides applied."""
        result = copy.deepcopy(config)
        for env_var, path in ENV_MAPPINGS.items():
            if env_var in os.environ:
                self._set_nested_value(result, path, os.environ[env_var])
        return result

    def _set_nested_value(self, config: Dict[str, Any], path: Tuple[str, ...], value: Any) -> None:
        """Set a nested configuration value."""
        current = config
        for key in path[:-1]:
            current = current.setdefault(key, {})
        current[path[-1]] = value

    def _interpolate_values(self, config: Any) -> Any:
        """Interpolate variables in configuration values."""
        if isinstance(config, str):
            if config.startswith("${") and config.endswith("}"):
                var_name = config[2:-1]
                if ":" in var_name:
                    var_name, default = var_name.split(":", 1)
                    return os.environ.get(var_name, default)
                return os.environ.get(var_name, config)
            return config
        elif isinstance(config, dict):
            return {k: self._interpolate_values(v) for k, v in config.items()}
        elif isinstance(config, list):
            return [self._interpolate_values(v) for v in config]
        return config
